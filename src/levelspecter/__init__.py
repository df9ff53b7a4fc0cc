"""
levelspecter: parse and model show.sequence.shot levelspecs.
"""

from levelspecter.errors import LevelSpecError
from levelspecter.grammar import (
    CaseMode,
    LevelName,
    LevelParser,
    LevelToken,
    ParseError,
    ParserConfig,
    TokenKind,
    levelspec_parser,
)
from levelspecter.core import (
    LevelSpec,
    ResolveError,
    parse,
    resolver_from_levelspec,
    resolver_from_mapping,
)

__version__ = "0.1.0"

__all__ = [
    "LevelSpecError",
    "CaseMode",
    "LevelName",
    "LevelParser",
    "LevelToken",
    "ParseError",
    "ParserConfig",
    "TokenKind",
    "levelspec_parser",
    "LevelSpec",
    "ResolveError",
    "parse",
    "resolver_from_levelspec",
    "resolver_from_mapping",
]
