"""
The LevelSpec model and relative resolution.
"""

from levelspecter.core.levelspec import (
    LevelSpec,
    ResolveError,
    Resolver,
    parse,
)
from levelspecter.core.context import (
    resolver_from_levelspec,
    resolver_from_mapping,
)

__all__ = [
    # levelspec
    "LevelSpec",
    "ResolveError",
    "Resolver",
    "parse",
    # context
    "resolver_from_levelspec",
    "resolver_from_mapping",
]
