"""Unit tests for the dotted and ISO formatters."""

from datetime import date

import pytest

from uncertain_date import DateStyle, UncertainDate, format_date, format_dotted, format_iso


class TestFormatIso:
    def test_empty(self):
        assert UncertainDate.empty().format_iso() == "xxxx-xx-xx"

    def test_single_day(self):
        single_day = UncertainDate.of_range(date(2000, 1, 1), date(2000, 1, 1))
        assert single_day.format_iso() == "2000-01-01"

    def test_year_only(self):
        year = UncertainDate.of_year(2000)
        year_span = UncertainDate.of_range(date(2000, 1, 1), date(2000, 12, 31))
        assert year.format_iso() == year_span.format_iso() == "2000-xx-xx"

    def test_year_and_month(self):
        assert UncertainDate.of_year_month(2000, 1).format_iso() == "2000-01-xx"

    def test_span(self):
        span = UncertainDate.of_range(date(2000, 1, 1), date(2000, 2, 2))
        assert span.format_iso() == "2000-01-01 - 2000-02-02"

    def test_small_year_is_padded(self):
        assert format_iso(UncertainDate.of_year(33)) == "0033-xx-xx"


class TestFormatDotted:
    def test_empty(self):
        assert UncertainDate.empty().format() == "xx.xx.xxxx"

    def test_single_day(self):
        assert UncertainDate.of_year_month_day(2017, 8, 1).format() == "01.08.2017"

    def test_year_only(self):
        year_span = UncertainDate.of_range(date(2000, 1, 1), date(2000, 12, 31))
        assert UncertainDate.of_year(2000).format() == year_span.format() == "xx.xx.2000"

    def test_year_and_month(self):
        assert UncertainDate.of_year_month(2016, 2).format() == "xx.02.2016"

    def test_whole_month_from_explicit_range(self):
        month_span = UncertainDate.of_range(date(2016, 2, 1), date(2016, 2, 29))
        assert format_dotted(month_span) == "xx.02.2016"

    def test_span(self):
        span = UncertainDate.of_range(date(2017, 8, 10), date(2017, 8, 31))
        assert span.format() == "10.08.2017 - 31.08.2017"

    def test_nearly_whole_month_is_a_span(self):
        span = UncertainDate.of_range(date(2016, 2, 1), date(2016, 2, 28))
        assert span.format() == "01.02.2016 - 28.02.2016"

    def test_str_uses_dotted_form(self):
        assert str(UncertainDate.of_year_month(2017, 8)) == "xx.08.2017"


class TestFormatDate:
    def setup_method(self):
        self.value = UncertainDate.of_year_month(2017, 8)

    @pytest.mark.parametrize(
        "style, expected",
        [
            (DateStyle.DOTTED, "xx.08.2017"),
            (DateStyle.ISO, "2017-08-xx"),
            ("dotted", "xx.08.2017"),
            ("ISO", "2017-08-xx"),
        ],
    )
    def test_explicit_style(self, style, expected):
        assert format_date(self.value, style) == expected

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            format_date(self.value, "german")

    def test_default_style_is_dotted(self, monkeypatch):
        monkeypatch.delenv("UNCERTAIN_DATE_STYLE", raising=False)
        assert format_date(self.value) == "xx.08.2017"

    def test_default_style_from_environment(self, monkeypatch):
        monkeypatch.setenv("UNCERTAIN_DATE_STYLE", "iso")
        assert format_date(self.value) == "2017-08-xx"
