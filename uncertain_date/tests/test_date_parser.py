"""Unit tests for parsing the dotted and ISO forms."""

from datetime import date

import pytest

from uncertain_date import UncertainDate, parse
from uncertain_date.parsing import (
    FieldShape,
    UncertainDateParser,
    UncertainDateParserFactory,
    UncertainDateParsers,
)
from uncertain_date.parsing.dotted_date_parser import DottedDateParser
from uncertain_date.parsing.iso_date_parser import IsoDateParser
from uncertain_date.parsing.strategy import field_shape


class TestDottedDateParser:
    """Test cases for DottedDateParser."""

    def setup_method(self):
        self.parser = DottedDateParser()

    @pytest.mark.parametrize("text", ["00.00.0000", "xx.xx.xxxx"])
    def test_nothing_known(self, text):
        assert self.parser.parse(text) == UncertainDate.empty()

    @pytest.mark.parametrize("text", ["00.00.1966", "xx.xx.1966"])
    def test_year_only(self, text):
        value = self.parser.parse(text)
        assert value.start == date(1966, 1, 1)
        assert value.end == date(1966, 12, 31)

    @pytest.mark.parametrize("text", ["00.05.1966", "xx.05.1966"])
    def test_year_and_month(self, text):
        value = self.parser.parse(text)
        assert value.start == date(1966, 5, 1)
        assert value.end == date(1966, 5, 31)

    def test_full_date(self):
        assert self.parser.parse("10.08.2017") == UncertainDate.of_year_month_day(2017, 8, 10)

    def test_leap_day(self):
        assert self.parser.parse("29.02.2016").to_date() == date(2016, 2, 29)

    def test_small_year(self):
        assert self.parser.parse("01.01.0001").to_date() == date(1, 1, 1)

    def test_other_layout_is_not_claimed(self):
        assert self.parser.parse("2017-08-10") is None


class TestIsoDateParser:
    """Test cases for IsoDateParser."""

    def setup_method(self):
        self.parser = IsoDateParser()

    def test_nothing_known(self):
        assert self.parser.parse("xxxx-xx-xx") == UncertainDate.empty()

    def test_year_only(self):
        assert self.parser.parse("1966-xx-xx") == UncertainDate.of_year(1966)

    def test_year_and_month(self):
        assert self.parser.parse("2016-02-xx").end == date(2016, 2, 29)

    def test_full_date(self):
        assert self.parser.parse("2017-08-10") == UncertainDate.of_year_month_day(2017, 8, 10)

    def test_other_layout_is_not_claimed(self):
        assert self.parser.parse("10.08.2017") is None


class TestFieldShape:
    @pytest.mark.parametrize(
        "token, expected",
        [
            ("xx", FieldShape.X),
            ("xxxx", FieldShape.X),
            ("00", FieldShape.ZERO),
            ("0000", FieldShape.ZERO),
            ("08", FieldShape.NUMBER),
            ("2017", FieldShape.NUMBER),
        ],
    )
    def test_field_shape(self, token, expected):
        assert field_shape(token) is expected


class TestUncertainDateParser:
    """Tests for the parse entry point across both families."""

    @pytest.mark.parametrize(
        "dotted, iso",
        [
            ("15.08.2016", "2016-08-15"),
            ("xx.08.2016", "2016-08-xx"),
            ("xx.xx.2016", "2016-xx-xx"),
            ("xx.xx.xxxx", "xxxx-xx-xx"),
        ],
    )
    def test_parsed_date_formats_are_equal(self, dotted, iso):
        assert UncertainDate.parse(dotted) == UncertainDate.parse(iso)

    def test_empty_forms_equal_empty(self):
        assert parse("xx.xx.xxxx") == parse("xxxx-xx-xx") == parse("00.00.0000") == UncertainDate.empty()

    def test_module_level_parse_matches_classmethod(self):
        assert parse("xx.08.2016") == UncertainDate.parse("xx.08.2016")

    def test_families_tried_in_order(self):
        assert UncertainDateParser.PARSER_STEPS == (UncertainDateParsers.DOTTED, UncertainDateParsers.ISO)

    @pytest.mark.parametrize(
        "value",
        [
            UncertainDate.empty(),
            UncertainDate.of_year(2016),
            UncertainDate.of_year_month(2016, 2),
            UncertainDate.of_year_month(2017, 12),
            UncertainDate.of_year_month_day(2016, 2, 29),
            UncertainDate.of_year_month_day(1, 1, 1),
        ],
    )
    def test_round_trip(self, value):
        assert parse(value.format()) == value
        assert parse(value.format_iso()) == value


class TestUncertainDateParserFactory:
    def test_get_parser(self):
        assert isinstance(UncertainDateParserFactory.get_parser(UncertainDateParsers.DOTTED), DottedDateParser)
        assert isinstance(UncertainDateParserFactory.get_parser(UncertainDateParsers.ISO), IsoDateParser)

    def test_unknown_strategy(self):
        with pytest.raises(ValueError):
            UncertainDateParserFactory.get_parser("dotted")
