"""Tests for the historical date model."""

import pytest

from roman_timeline.dates.historical import (
    EMPTY_YEAR_MESSAGE,
    INVALID_YEAR_MESSAGE,
    astronomical_to_display,
    compare,
    format_date,
    format_range,
    format_year_label,
    parse_year,
    to_coordinate,
    validate_year_input,
)
from roman_timeline.types import (
    DatePrecision,
    DisplayYear,
    Era,
    HistoricalDate,
    HistoricalDateRange,
)


def _date(year, precision=DatePrecision.YEAR, **kwargs):
    return HistoricalDate(year=year, precision=precision, **kwargs)


class TestAstronomicalToDisplay:
    def test_one_bce(self):
        assert astronomical_to_display(0) == DisplayYear(1, Era.BCE)

    def test_two_bce(self):
        assert astronomical_to_display(-1) == DisplayYear(2, Era.BCE)

    def test_founding_of_republic(self):
        assert astronomical_to_display(-508) == DisplayYear(509, Era.BCE)

    def test_one_ce(self):
        assert astronomical_to_display(1) == DisplayYear(1, Era.CE)

    def test_never_zero(self):
        for y in range(-600, 1500):
            assert astronomical_to_display(y).value != 0

    def test_str(self):
        assert str(astronomical_to_display(-43)) == "44 BCE"

    def test_year_label_rounds_fractional_positions(self):
        assert format_year_label(-0.4) == "1 BCE"
        assert format_year_label(472.5) == "473 CE"


class TestToCoordinate:
    def test_year_only(self):
        assert to_coordinate(_date(44)) == 44

    def test_month_fraction(self):
        assert to_coordinate(_date(44, DatePrecision.MONTH, month=3)) == pytest.approx(44.1667, abs=1e-3)

    def test_day_fraction(self):
        d = _date(44, DatePrecision.EXACT, month=3, day=15)
        assert to_coordinate(d) == pytest.approx(44 + 2 / 12 + 14 / 365)

    def test_day_without_month_is_ignored(self):
        assert to_coordinate(_date(44, DatePrecision.EXACT, day=15)) == 44

    def test_bce(self):
        assert to_coordinate(_date(-508)) == -508

    def test_flat_365_day_year(self):
        # 31 Dec is 364/365 into the year regardless of month lengths
        d = _date(100, DatePrecision.EXACT, month=1, day=365)
        assert to_coordinate(d) == pytest.approx(100 + 364 / 365)


class TestFormatDate:
    def test_bce_year(self):
        assert format_date(_date(-508)) == "509 BCE"

    def test_ce_year(self):
        assert format_date(_date(79)) == "79 CE"

    def test_approximate(self):
        assert format_date(_date(-508, approximate=True)) == "c. 509 BCE"

    def test_exact(self):
        d = _date(-43, DatePrecision.EXACT, month=3, day=15)
        assert format_date(d) == "15 Mar 44 BCE"

    def test_exact_without_day_falls_back_to_month(self):
        assert format_date(_date(-43, DatePrecision.EXACT, month=3)) == "Mar 44 BCE"

    def test_exact_without_month_falls_back_to_year(self):
        assert format_date(_date(-43, DatePrecision.EXACT)) == "44 BCE"

    def test_month(self):
        assert format_date(_date(14, DatePrecision.MONTH, month=8)) == "Aug 14 CE"

    def test_month_without_month_falls_back_to_year(self):
        assert format_date(_date(14, DatePrecision.MONTH)) == "14 CE"

    def test_decade(self):
        assert format_date(_date(-263, DatePrecision.DECADE)) == "260s BCE"
        assert format_date(_date(55, DatePrecision.DECADE)) == "50s CE"

    def test_approximate_decade(self):
        assert format_date(_date(-263, DatePrecision.DECADE, approximate=True)) == "c. 260s BCE"

    @pytest.mark.parametrize(
        "year,expected",
        [
            (1, "1st century CE"),
            (150, "2nd century CE"),
            (250, "3rd century CE"),
            (350, "4th century CE"),
            (1050, "11th century CE"),
            (1150, "12th century CE"),
            (1250, "13th century CE"),
            (-263, "3rd century BCE"),
            (-508, "6th century BCE"),
        ],
    )
    def test_century(self, year, expected):
        assert format_date(_date(year, DatePrecision.CENTURY)) == expected

    def test_century_ordinals_21_to_23(self):
        assert format_date(_date(2050, DatePrecision.CENTURY)) == "21st century CE"
        assert format_date(_date(2150, DatePrecision.CENTURY)) == "22nd century CE"
        assert format_date(_date(2250, DatePrecision.CENTURY)) == "23rd century CE"
        assert format_date(_date(11150, DatePrecision.CENTURY)) == "112th century CE"


class TestFormatRange:
    def test_same_era_bce(self):
        r = HistoricalDateRange(start=_date(-263), end=_date(-240))
        assert format_range(r) == "264–241 BCE"

    def test_same_era_ce(self):
        r = HistoricalDateRange(start=_date(14), end=_date(68))
        assert format_range(r) == "14–68 CE"

    def test_cross_era(self):
        r = HistoricalDateRange(start=_date(-26), end=_date(14))
        assert format_range(r) == "27 BCE – 14 CE"

    def test_same_era_keeps_approximate_prefix(self):
        r = HistoricalDateRange(start=_date(100, approximate=True), end=_date(200))
        assert format_range(r) == "c. 100–200 CE"

    def test_one_bce_to_one_ce_is_cross_era(self):
        r = HistoricalDateRange(start=_date(0), end=_date(1))
        assert format_range(r) == "1 BCE – 1 CE"


class TestCompare:
    def test_monotonic_across_boundary(self):
        for y in range(-600, 1500):
            assert compare(_date(y), _date(y + 1)) < 0

    def test_bce_before_ce(self):
        assert compare(_date(0), _date(1)) < 0
        assert compare(_date(1), _date(0)) > 0

    def test_equal(self):
        assert compare(_date(44), _date(44)) == 0

    def test_same_year_ordering_by_month_and_day(self):
        ides = _date(-43, DatePrecision.EXACT, month=3, day=15)
        march = _date(-43, DatePrecision.MONTH, month=3)
        april = _date(-43, DatePrecision.MONTH, month=4)
        assert compare(march, ides) < 0
        assert compare(ides, april) < 0

    def test_sorting(self):
        dates = [_date(79), _date(-508), _date(0), _date(-43)]
        ordered = sorted(dates, key=to_coordinate)
        assert [d.year for d in ordered] == [-508, -43, 0, 79]


class TestParseYear:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("509 BCE", -508),
            ("1 BCE", 0),
            ("2 BC", -1),
            ("79", 79),
            ("79 CE", 79),
            ("476 AD", 476),
            ("44 bce", -43),
            ("  1453 ce  ", 1453),
            ("509BCE", -508),
        ],
    )
    def test_valid(self, text, expected):
        assert parse_year(text) == expected

    @pytest.mark.parametrize(
        "text",
        ["12.5 BCE", "", "   ", "abc", "-5", "5 BCE CE", "BCE", "1,000"],
    )
    def test_invalid(self, text):
        assert parse_year(text) is None

    def test_one_bce_is_not_negative_zero(self):
        result = parse_year("1 BCE")
        assert result == 0
        assert str(result) == "0"

    @pytest.mark.parametrize("y", [1, 79, 476, 1453])
    def test_round_trip_ce_years(self, y):
        assert parse_year(format_date(_date(y))) == y


class TestValidateYearInput:
    def test_empty(self):
        result = validate_year_input("  ")
        assert not result.is_valid
        assert result.error == EMPTY_YEAR_MESSAGE

    def test_valid_with_era(self):
        result = validate_year_input("44", Era.BCE)
        assert result.is_valid
        assert result.year == -43

    def test_invalid_keeps_text(self):
        result = validate_year_input("4.5", Era.CE)
        assert not result.is_valid
        assert result.error == INVALID_YEAR_MESSAGE
        assert result.text == "4.5"
