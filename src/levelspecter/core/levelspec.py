"""
The LevelSpec aggregate.

A LevelSpec holds a show and, optionally, a sequence and a shot. It is
built by parsing a string or from its parts, renders back to the dotted
notation, and can resolve relative levels against a caller-supplied
resolver.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, Sequence

from levelspecter.errors import LevelSpecError
from levelspecter.grammar.parser import DELIMITER, LevelParser, ParserConfig
from levelspecter.grammar.tokens import LevelName, LevelToken

logger = logging.getLogger(__name__)

Resolver = Callable[[LevelName], "str | None"]


class ResolveError(LevelSpecError):
    """A relative level could not be replaced by rel_to_abs."""

    def __init__(self, level: LevelName, value: str | None = None):
        self.level = level
        self.value = value
        if value is None:
            message = f"Unable to retrieve {level} in rel_to_abs"
        else:
            message = f"{level} returned by resolver is relative '{value}'"
        super().__init__(message)


@dataclass(frozen=True)
class LevelSpec:
    """
    A parsed show[.sequence[.shot]] levelspec.

    Example:
        >>> ls = LevelSpec.parse("DEV01.RD.0001")
        >>> ls.shot
        Term('0001')
        >>> str(ls)
        'DEV01.RD.0001'
    """
    show: LevelToken
    sequence: LevelToken | None = None
    shot: LevelToken | None = None

    def __post_init__(self):
        if not isinstance(self.show, LevelToken):
            raise TypeError(f"show must be a LevelToken, got {self.show!r}")
        for name in ("sequence", "shot"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, LevelToken):
                raise TypeError(f"{name} must be a LevelToken or None, got {value!r}")
        if self.shot is not None and self.sequence is None:
            raise ValueError("A levelspec with a shot must also have a sequence")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str, config: ParserConfig | None = None) -> "LevelSpec":
        """
        Parse a levelspec string.

        Raises:
            ParseError: If text is not a valid levelspec
        """
        return cls.from_tokens(LevelParser(config).recognize(text))

    @classmethod
    def from_tokens(cls, tokens: Sequence[LevelToken]) -> "LevelSpec":
        """Distribute one to three tokens into show, sequence and shot."""
        if not 1 <= len(tokens) <= 3:
            raise ValueError(f"Cannot create a levelspec from {len(tokens)} levels")
        return cls(*tokens)

    @classmethod
    def from_show(cls, show: str, config: ParserConfig | None = None) -> "LevelSpec":
        return cls._from_parts(config, show)

    @classmethod
    def from_sequence(
        cls,
        show: str,
        sequence: str,
        config: ParserConfig | None = None,
    ) -> "LevelSpec":
        return cls._from_parts(config, show, sequence)

    @classmethod
    def from_shot(
        cls,
        show: str,
        sequence: str,
        shot: str,
        config: ParserConfig | None = None,
    ) -> "LevelSpec":
        """
        Build a shot levelspec from its parts without running the grammar.

        Under the strict case mode the parts are uppercased.
        """
        return cls._from_parts(config, show, sequence, shot)

    @classmethod
    def _from_parts(cls, config: ParserConfig | None, *parts: str) -> "LevelSpec":
        config = config or ParserConfig()
        levelspec = cls.from_tokens([LevelToken.from_text(part) for part in parts])
        if config.case_sensitive:
            levelspec.set_upper()
        return levelspec

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def to_tokens(self) -> list[LevelToken]:
        """The present levels, show first."""
        tokens = [self.show]
        if self.sequence is not None:
            tokens.append(self.sequence)
            if self.shot is not None:
                tokens.append(self.shot)
        return tokens

    def levels(self) -> list[tuple[LevelName, LevelToken]]:
        return list(zip(LevelName, self.to_tokens()))

    def is_concrete(self) -> bool:
        """A levelspec is concrete unless one of its levels is a wildcard."""
        return not any(token.is_wildcard() for token in self.to_tokens())

    def is_absolute(self) -> bool:
        """True when no level is relative."""
        return not any(token.is_relative() for token in self.to_tokens())

    # ------------------------------------------------------------------
    # Transformations
    # ------------------------------------------------------------------

    def set_upper(self):
        """Uppercase every Term in place. The only mutation a LevelSpec allows."""
        for level, token in self.levels():
            object.__setattr__(self, level.value, token.upper())

    def upper(self) -> "LevelSpec":
        """Return an uppercased copy."""
        levelspec = replace(self)
        levelspec.set_upper()
        return levelspec

    def rel_to_abs(self, resolver: Resolver) -> "LevelSpec":
        """
        Return a copy with every relative level replaced.

        The resolver is called once per relative level, show first, and
        returns the text for that level or None if it has no value.
        Levels that are not relative, wildcards included, are kept.

        Args:
            resolver: Callable taking a LevelName and returning str | None

        Raises:
            ResolveError: If the resolver returns None or an empty value
        """
        resolved = {}
        for level, token in self.levels():
            if not token.is_relative():
                continue
            value = resolver(level)
            if value is None:
                raise ResolveError(level)
            replacement = LevelToken.from_text(value)
            if replacement.is_relative():
                raise ResolveError(level, value)
            logger.debug(f"Resolved relative {level} to {replacement!r}")
            resolved[level.value] = replacement
        return replace(self, **resolved)

    def __str__(self):
        return DELIMITER.join(token.to_text() for token in self.to_tokens())


def parse(text: str, config: ParserConfig | None = None) -> LevelSpec:
    """Parse a levelspec string. See LevelSpec.parse."""
    return LevelSpec.parse(text, config)
