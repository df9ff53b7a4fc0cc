"""
Shared fixtures for levelspecter tests.
"""
import pytest

from levelspecter.grammar import CaseMode, LevelParser, ParserConfig


@pytest.fixture
def strict_config():
    return ParserConfig(case_mode=CaseMode.STRICT)


@pytest.fixture
def relaxed_config():
    return ParserConfig(case_mode=CaseMode.RELAXED)


@pytest.fixture
def strict_parser(strict_config):
    return LevelParser(strict_config)


@pytest.fixture
def relaxed_parser(relaxed_config):
    return LevelParser(relaxed_config)
