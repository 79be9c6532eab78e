"""Tests for day labels."""

import pytest

from weatherapp.forecast.labels import label


class TestLabel:
    def test_known_wednesday(self):
        assert label("2023-11-29", False) == "Wed"

    @pytest.mark.parametrize(
        "date_string,expected",
        [
            ("2023-11-27", "Mon"),
            ("2023-11-28", "Tue"),
            ("2023-11-30", "Thu"),
            ("2023-12-01", "Fri"),
            ("2023-12-02", "Sat"),
            ("2023-12-03", "Sun"),
            ("2024-02-29", "Thu"),
        ],
    )
    def test_weekdays(self, date_string: str, expected: str):
        assert label(date_string, False) == expected

    @pytest.mark.parametrize(
        "date_string", ["2023-11-29", "not-a-date", "", "2023-13-45"]
    )
    def test_today_ignores_date(self, date_string: str):
        assert label(date_string, True) == "Today"

    @pytest.mark.parametrize(
        "date_string",
        [
            "not-a-date",
            "",
            "2023-02-30",
            "2023-13-01",
            "23-11-29",
            "2023/11/29",
            "2023-11-29T10:00",
            "2023-11-29\n",
        ],
    )
    def test_unparseable_is_sentinel(self, date_string: str):
        assert label(date_string, False) == "???"

    def test_non_string_is_sentinel(self):
        assert label(None, False) == "???"  # type: ignore[arg-type]
