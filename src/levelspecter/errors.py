"""
Exception base shared by the grammar and the LevelSpec model.
"""


class LevelSpecError(Exception):
    """Base class for errors raised while parsing or resolving a levelspec."""
