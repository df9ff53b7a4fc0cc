"""
Ready-made resolvers for LevelSpec.rel_to_abs.

rel_to_abs knows nothing about where relative values come from. These
helpers cover the two common sources: the levelspec of the current working
context, and a plain mapping of level to value.
"""

from __future__ import annotations

from typing import Mapping

from levelspecter.core.levelspec import LevelSpec, Resolver
from levelspecter.grammar.tokens import LevelName


def resolver_from_levelspec(context: LevelSpec) -> Resolver:
    """
    Resolve relative levels from a context levelspec.

    Example:
        >>> ctx = LevelSpec.parse("DEV01.RD.0001")
        >>> str(LevelSpec.parse(".AA.").rel_to_abs(resolver_from_levelspec(ctx)))
        'DEV01.AA.0001'
    """
    values = {
        level: token.to_text()
        for level, token in context.levels()
        if not token.is_relative()
    }
    return values.get


def resolver_from_mapping(values: Mapping) -> Resolver:
    """
    Resolve relative levels from a mapping.

    Keys may be LevelName members or their names ("show", "sequence", "shot").
    """
    def resolve(level: LevelName) -> str | None:
        if level in values:
            return values[level]
        return values.get(level.value)
    return resolve
