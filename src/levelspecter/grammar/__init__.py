"""
Levelspec grammar: character classes, level tokens and the recognizer.
"""

from levelspecter.grammar.tokens import (
    LevelName,
    LevelToken,
    TokenKind,
)
from levelspecter.grammar.parser import (
    Alternative,
    CaseMode,
    LevelParser,
    ParseError,
    ParserConfig,
    levelspec_parser,
)

__all__ = [
    "LevelName",
    "LevelToken",
    "TokenKind",
    "Alternative",
    "CaseMode",
    "LevelParser",
    "ParseError",
    "ParserConfig",
    "levelspec_parser",
]
