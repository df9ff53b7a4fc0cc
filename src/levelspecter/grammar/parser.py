"""
Levelspec grammar recognizer.

Turns a raw string such as "DEV01.RD.0001" or ".RD." into an ordered list
of one to three level tokens. The grammar is a fixed, ordered list of
alternatives. Each alternative is a sequence of slots joined by "."; an
alternative only matches if it consumes the whole input, and the first
alternative that matches wins. Several inputs are claimed by more than one
alternative, so the order of ALTERNATIVES is part of the grammar.

Case handling is chosen per parser through ParserConfig. Callers holding a
textual mode name ("strict" / "relaxed", e.g. from their own settings)
turn it into a CaseMode with CaseMode.from_name:

    config = ParserConfig(case_mode=CaseMode.from_name("relaxed"))
    LevelParser(config).recognize("dev01.rd.0001")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto

from levelspecter.errors import LevelSpecError
from levelspecter.grammar.classifiers import (
    alpha_alphanum,
    alpha_alphanum_upper,
    digits,
)
from levelspecter.grammar.tokens import RELATIVE, WILDCARD, LevelToken

logger = logging.getLogger(__name__)

DELIMITER = "."
ASSETDEV = "ASSETDEV"


class ParseError(LevelSpecError, ValueError):
    """The input did not fully match any grammar alternative."""

    def __init__(self, text: str):
        self.text = text
        super().__init__(f"Unable to parse levelspec for {text}")


# ============================================================================
# Configuration
# ============================================================================

class CaseMode(Enum):
    """How the recognizer treats letter case."""
    STRICT = "strict"    # uppercase only, ASSETDEV matched exactly
    RELAXED = "relaxed"  # any case, ASSETDEV matched case-insensitively

    @classmethod
    def from_name(cls, name: str) -> "CaseMode":
        """
        Resolve a case mode from its name.

        Raises:
            ValueError: If the name is not a known mode
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            available = ", ".join(mode.value for mode in cls)
            raise ValueError(f"Unknown case mode: {name}. Available: {available}") from None


@dataclass
class ParserConfig:
    """Configuration for the levelspec recognizer."""

    case_mode: CaseMode = CaseMode.STRICT

    @property
    def case_sensitive(self) -> bool:
        return self.case_mode is CaseMode.STRICT


# ============================================================================
# Alternatives
# ============================================================================

class Slot(Enum):
    """One position of an alternative."""
    SHOW = auto()
    SEQUENCE = auto()
    SHOT = auto()
    RELATIVE = auto()  # elided component, consumes nothing


@dataclass(frozen=True)
class Alternative:
    """
    A single grammar alternative.

    Example:
        Alternative("show_seq_rel", (Slot.SHOW, Slot.SEQUENCE, Slot.RELATIVE))
        matches "DEV01.RD." as ["DEV01", "RD", ""]
    """
    name: str
    slots: tuple[Slot, ...]

    def __repr__(self):
        return f"Alternative({self.name})"


ALTERNATIVES: tuple[Alternative, ...] = (
    Alternative("rel_shot", (Slot.RELATIVE, Slot.RELATIVE, Slot.SHOT)),           # ..0001
    Alternative("rel_seq_shot", (Slot.RELATIVE, Slot.SEQUENCE, Slot.SHOT)),       # .RD.0001
    Alternative("rel_seq_rel", (Slot.RELATIVE, Slot.SEQUENCE, Slot.RELATIVE)),    # .RD.
    Alternative("rel_seq", (Slot.RELATIVE, Slot.SEQUENCE)),                       # .RD
    Alternative("shot", (Slot.SHOW, Slot.SEQUENCE, Slot.SHOT)),                   # DEV01.RD.0001
    Alternative("show_rel_rel", (Slot.SHOW, Slot.RELATIVE, Slot.RELATIVE)),       # DEV01..
    Alternative("show_seq_rel", (Slot.SHOW, Slot.SEQUENCE, Slot.RELATIVE)),       # DEV01.RD.
    Alternative("seq", (Slot.SHOW, Slot.SEQUENCE)),                               # DEV01.RD
    Alternative("show_rel", (Slot.SHOW, Slot.RELATIVE)),                          # DEV01.
    Alternative("show", (Slot.SHOW,)),                                            # DEV01
)


# ============================================================================
# Recognizer
# ============================================================================

class LevelParser:
    """
    Recognizes levelspecs under a given case mode.

    Component grammars:
        show      letter (letter|digit)*  |  %
        sequence  letter (letter|digit)*  |  ASSETDEV  |  %
        shot      digit+  |  %
                  letter (letter|digit)*  |  %     when the sequence is ASSETDEV

    A wildcard sequence keeps the numeric shot grammar.
    """

    def __init__(self, config: ParserConfig | None = None):
        self.config = config or ParserConfig()
        self.alternatives = ALTERNATIVES

    def recognize(self, text: str) -> list[LevelToken]:
        """
        Parse a levelspec into level tokens.

        Args:
            text: The levelspec, e.g. "DEV01.RD.0001"

        Returns:
            One to three LevelTokens, show first

        Raises:
            ParseError: If no alternative matches the whole input
        """
        return [LevelToken.from_text(part) for part in self.split(text)]

    def split(self, text: str) -> list[str]:
        """Like recognize, but returns the raw component texts."""
        for alternative in self.alternatives:
            parts = self.match(alternative, text)
            if parts is not None:
                logger.debug(f"{text!r} matched {alternative.name}: {parts}")
                return parts
        logger.debug(f"{text!r} matched no alternative ({self.config.case_mode.value})")
        raise ParseError(text)

    def match(self, alternative: Alternative, text: str) -> list[str] | None:
        """Match one alternative against the whole of text."""
        parts = []
        pos = 0
        sequence = None

        for index, slot in enumerate(alternative.slots):
            if index:
                if not text.startswith(DELIMITER, pos):
                    return None
                pos += len(DELIMITER)

            if slot is Slot.RELATIVE:
                parts.append(RELATIVE)
                continue

            if slot is Slot.SHOT:
                end = self._match_shot(text, pos, after_assetdev=self.is_assetdev(sequence))
            else:
                end = self._match_name(text, pos)
            if end is None:
                return None

            lexeme = text[pos:end]
            if slot is Slot.SEQUENCE:
                sequence = lexeme
            parts.append(lexeme)
            pos = end

        if pos != len(text):
            return None
        return parts

    def is_assetdev(self, lexeme: str | None) -> bool:
        """Is the sequence lexeme the ASSETDEV keyword under the case mode?"""
        if lexeme is None:
            return False
        if self.config.case_sensitive:
            return lexeme == ASSETDEV
        return lexeme.upper() == ASSETDEV

    # ------------------------------------------------------------------
    # Component grammars
    # ------------------------------------------------------------------

    def _match_name(self, text: str, pos: int) -> int | None:
        # show, sequence and ASSETDEV shots share the same shape
        if text.startswith(WILDCARD, pos):
            return pos + len(WILDCARD)
        if self.config.case_sensitive:
            return alpha_alphanum_upper(text, pos)
        return alpha_alphanum(text, pos)

    def _match_shot(self, text: str, pos: int, after_assetdev: bool) -> int | None:
        if after_assetdev:
            return self._match_name(text, pos)
        if text.startswith(WILDCARD, pos):
            return pos + len(WILDCARD)
        return digits(text, pos)


def levelspec_parser(text: str, config: ParserConfig | None = None) -> list[str]:
    """
    Parse a levelspec into its component texts.

    Relative components come back as "" and wildcards as "%".

    Example:
        levelspec_parser("DEV01.RD.0001") -> ["DEV01", "RD", "0001"]
        levelspec_parser(".RD.0001")      -> ["", "RD", "0001"]
    """
    return LevelParser(config).split(text)
