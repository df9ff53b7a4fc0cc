"""Tests for the levelspec grammar recognizer."""

import pytest

from levelspecter.grammar import (
    CaseMode,
    LevelParser,
    LevelToken,
    ParseError,
    ParserConfig,
    levelspec_parser,
)
from levelspecter.grammar.parser import ALTERNATIVES, Slot

REL = LevelToken.relative()
WILD = LevelToken.wildcard()
T = LevelToken.term


# ###############
# Alternatives
# ###############


class TestAlternativeOrder:
    def test_alternatives_are_in_priority_order(self):
        assert [alt.name for alt in ALTERNATIVES] == [
            "rel_shot",
            "rel_seq_shot",
            "rel_seq_rel",
            "rel_seq",
            "shot",
            "show_rel_rel",
            "show_seq_rel",
            "seq",
            "show_rel",
            "show",
        ]

    def test_no_alternative_has_more_than_three_slots(self):
        assert all(1 <= len(alt.slots) <= 3 for alt in ALTERNATIVES)

    def test_first_slot_is_show_or_relative(self):
        assert all(alt.slots[0] in (Slot.SHOW, Slot.RELATIVE) for alt in ALTERNATIVES)

    def test_match_requires_full_consumption(self, strict_parser):
        show_alt = ALTERNATIVES[-1]
        assert strict_parser.match(show_alt, "DEV01") == ["DEV01"]
        assert strict_parser.match(show_alt, "DEV01.RD") is None


# ###############
# Strict mode
# ###############


class TestStrictRecognize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("DEV01", [T("DEV01")]),
            ("DEV01.RD", [T("DEV01"), T("RD")]),
            ("DEV01.RD.0001", [T("DEV01"), T("RD"), T("0001")]),
            ("DEV01.ASSETDEV.FOOBAR", [T("DEV01"), T("ASSETDEV"), T("FOOBAR")]),
            ("DEV01.ASSETDEV.F00BAR1", [T("DEV01"), T("ASSETDEV"), T("F00BAR1")]),
            ("DEV01.ASSETDEV", [T("DEV01"), T("ASSETDEV")]),
            ("..0001", [REL, REL, T("0001")]),
            ("..%", [REL, REL, WILD]),
            (".RD.0001", [REL, T("RD"), T("0001")]),
            (".ASSETDEV.FOOBAR", [REL, T("ASSETDEV"), T("FOOBAR")]),
            (".RD.", [REL, T("RD"), REL]),
            (".ASSETDEV.", [REL, T("ASSETDEV"), REL]),
            (".%.", [REL, WILD, REL]),
            (".RD", [REL, T("RD")]),
            (".%", [REL, WILD]),
            ("DEV01..", [T("DEV01"), REL, REL]),
            ("DEV01.RD.", [T("DEV01"), T("RD"), REL]),
            ("DEV01.", [T("DEV01"), REL]),
            ("%", [WILD]),
            ("%.RD.0001", [WILD, T("RD"), T("0001")]),
            ("DEV01.%.0001", [T("DEV01"), WILD, T("0001")]),
            ("DEV01.RD.%", [T("DEV01"), T("RD"), WILD]),
            ("DEV01.ASSETDEV.%", [T("DEV01"), T("ASSETDEV"), WILD]),
            ("%.%.%", [WILD, WILD, WILD]),
            ("D", [T("D")]),
        ],
    )
    def test_valid(self, strict_parser, text, expected):
        assert strict_parser.recognize(text) == expected

    @pytest.mark.parametrize(
        "text",
        [
            "",
            ".",
            "...",
            "dev01",
            "DEV01.rd",
            "DEV01.RD.0001.343",
            "1DEV01",
            "DEV 01",
            "DEV01%",
            "DEV_01",
            "DEV01.1D",
            "DEV01.R D",
            "DEV01.R%",
            "DEV01.R_D",
            "DEV01.RD.R0001",
            "DEV01.RD.0 001",
            "DEV01.RD.00%",
            "DEV01.RD.0_001",
            "DEV01.RD.FOOBAR",
            "DEV01.ASSETDEV.foobar",
            "DEV01.assetdev.FOOBAR",
            ".assetdev",
            ".R%.",
            ".1D.",
            "..FOOBAR",
            "DEV01..0001",
            "DEV01...",
            "%%",
            " DEV01",
            "DEV01 ",
        ],
    )
    def test_invalid(self, strict_parser, text):
        with pytest.raises(ParseError):
            strict_parser.recognize(text)

    def test_assetdev_shot_is_alphanumeric_instead_of_numeric(self, strict_parser):
        with pytest.raises(ParseError):
            strict_parser.recognize("DEV01.ASSETDEV.0001")

    def test_wildcard_sequence_keeps_numeric_shot(self, strict_parser):
        assert strict_parser.recognize("DEV01.%.0001") == [T("DEV01"), WILD, T("0001")]
        with pytest.raises(ParseError):
            strict_parser.recognize("DEV01.%.FOOBAR")

    def test_assetdev_prefix_is_an_ordinary_sequence(self, strict_parser):
        assert strict_parser.recognize("DEV01.ASSETDEV2.0001") == [
            T("DEV01"), T("ASSETDEV2"), T("0001"),
        ]
        with pytest.raises(ParseError):
            strict_parser.recognize("DEV01.ASSETDEV2.FOOBAR")


# ###############
# Relaxed mode
# ###############


class TestRelaxedRecognize:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("dev01", [T("dev01")]),
            ("Dev01.rD", [T("Dev01"), T("rD")]),
            ("dev01.rd.0001", [T("dev01"), T("rd"), T("0001")]),
            ("dev01.assetdev.foobar", [T("dev01"), T("assetdev"), T("foobar")]),
            ("DEV01.AssetDev.FooBar", [T("DEV01"), T("AssetDev"), T("FooBar")]),
            (".assetdev.foobar", [REL, T("assetdev"), T("foobar")]),
            (".rd.", [REL, T("rd"), REL]),
            ("dev01..", [T("dev01"), REL, REL]),
        ],
    )
    def test_valid(self, relaxed_parser, text, expected):
        assert relaxed_parser.recognize(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["dev_01", "1dev", "dev01.rd.foobar", "dev01.rd.00%", "dev01.assetdev.0001"],
    )
    def test_invalid(self, relaxed_parser, text):
        with pytest.raises(ParseError):
            relaxed_parser.recognize(text)

    def test_modes_can_be_used_side_by_side(self, strict_parser, relaxed_parser):
        assert relaxed_parser.recognize("dev01") == [T("dev01")]
        with pytest.raises(ParseError):
            strict_parser.recognize("dev01")


# ###############
# Configuration and errors
# ###############


class TestConfig:
    def test_default_is_strict(self):
        assert ParserConfig().case_mode is CaseMode.STRICT
        assert LevelParser().config.case_sensitive

    @pytest.mark.parametrize(
        "name, mode",
        [("strict", CaseMode.STRICT), ("RELAXED", CaseMode.RELAXED), (" relaxed ", CaseMode.RELAXED)],
    )
    def test_case_mode_from_name(self, name, mode):
        assert CaseMode.from_name(name) is mode

    def test_config_built_from_mode_name(self):
        config = ParserConfig(case_mode=CaseMode.from_name("relaxed"))
        assert LevelParser(config).recognize("dev01.rd.0001") == [T("dev01"), T("rd"), T("0001")]

    def test_unknown_case_mode(self):
        with pytest.raises(ValueError, match="Unknown case mode: loose"):
            CaseMode.from_name("loose")


class TestParseError:
    def test_error_carries_input(self, strict_parser):
        with pytest.raises(ParseError) as excinfo:
            strict_parser.recognize("DEV_01")
        assert excinfo.value.text == "DEV_01"
        assert str(excinfo.value) == "Unable to parse levelspec for DEV_01"

    def test_error_is_a_value_error(self, strict_parser):
        with pytest.raises(ValueError):
            strict_parser.recognize("dev01")


class TestLevelspecParser:
    def test_returns_component_texts(self):
        assert levelspec_parser("DEV01.RD.0001") == ["DEV01", "RD", "0001"]
        assert levelspec_parser(".RD.0001") == ["", "RD", "0001"]
        assert levelspec_parser("DEV01.%") == ["DEV01", "%"]

    def test_accepts_config(self, relaxed_config):
        assert levelspec_parser("dev01.rd", relaxed_config) == ["dev01", "rd"]

    def test_failure(self):
        with pytest.raises(ParseError):
            levelspec_parser("DEV01.rd.9999")
