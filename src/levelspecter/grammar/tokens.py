"""
Level tokens produced by the recognizer.

A level token is one of three things:
    Term("DEV01")  -> a concrete name
    Wildcard       -> "%", matches any value at that level
    Relative       -> "", a value to be supplied later by context

The sentinel strings only exist at the text boundary (from_text / to_text).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto

WILDCARD = "%"
RELATIVE = ""


class TokenKind(IntEnum):
    """Tag of a LevelToken."""
    TERM = auto()
    WILDCARD = auto()
    RELATIVE = auto()


class LevelName(Enum):
    """Selector for one of the three levels of a levelspec."""
    SHOW = "show"
    SEQUENCE = "sequence"
    SHOT = "shot"

    def __str__(self):
        return self.value


@dataclass(frozen=True, order=True, repr=False)
class LevelToken:
    """A single show, sequence or shot entry of a levelspec."""
    kind: TokenKind
    text: str = RELATIVE

    def __post_init__(self):
        if self.kind is TokenKind.TERM:
            if self.text in (WILDCARD, RELATIVE):
                raise ValueError(f"Term cannot hold the sentinel {self.text!r}")
        elif self.kind is TokenKind.WILDCARD:
            if self.text != WILDCARD:
                raise ValueError(f"Wildcard must hold {WILDCARD!r}, got {self.text!r}")
        elif self.text != RELATIVE:
            raise ValueError(f"Relative must be empty, got {self.text!r}")

    @classmethod
    def term(cls, text: str) -> "LevelToken":
        return cls(TokenKind.TERM, text)

    @classmethod
    def wildcard(cls) -> "LevelToken":
        return cls(TokenKind.WILDCARD, WILDCARD)

    @classmethod
    def relative(cls) -> "LevelToken":
        return cls(TokenKind.RELATIVE, RELATIVE)

    @classmethod
    def from_text(cls, text: str) -> "LevelToken":
        """
        Convert raw text to a token.

        The conversion is total: "" is Relative, "%" is Wildcard and
        anything else is a Term.
        """
        if text == RELATIVE:
            return cls.relative()
        if text == WILDCARD:
            return cls.wildcard()
        return cls.term(text)

    def is_term(self) -> bool:
        return self.kind is TokenKind.TERM

    def is_wildcard(self) -> bool:
        """Wildcards mark a levelspec as a query rather than a name."""
        return self.kind is TokenKind.WILDCARD

    def is_relative(self) -> bool:
        return self.kind is TokenKind.RELATIVE

    def to_text(self) -> str:
        return self.text

    def upper(self) -> "LevelToken":
        """Uppercase a Term payload. Wildcard and Relative come back as-is."""
        if self.is_term():
            return LevelToken.term(self.text.upper())
        return self

    def __str__(self):
        return self.text

    def __repr__(self):
        if self.is_term():
            return f"Term({self.text!r})"
        if self.is_wildcard():
            return "Wildcard"
        return "Relative"
