"""Tests for weather code classification."""

import pytest

from weatherapp.forecast.classifier import classify
from weatherapp.models.common import IconCategory

EXPECTED = {
    IconCategory.CLEAR: [0, 1],
    IconCategory.PARTLY_CLOUDY: [2],
    IconCategory.CLOUDY: [3],
    IconCategory.FOG: [45, 48],
    IconCategory.DRIZZLE: [51, 53],
    IconCategory.RAIN: [55, 61],
    IconCategory.HEAVY_RAIN: [63, 65, 80, 81, 82],
    IconCategory.HAIL: [56, 57, 66, 67],
    IconCategory.SNOW: [71, 73, 75, 77, 85, 86],
    IconCategory.THUNDERSTORM: [95, 96, 99],
}

MAPPED_CODES = {code for codes in EXPECTED.values() for code in codes}


class TestClassify:
    @pytest.mark.parametrize(
        "code,category",
        [(code, cat) for cat, codes in EXPECTED.items() for code in codes],
    )
    def test_mapping_table(self, code: int, category: IconCategory):
        assert classify(code) == category

    def test_every_other_code_in_wmo_range_is_unknown(self):
        for code in range(0, 100):
            if code not in MAPPED_CODES:
                assert classify(code) == IconCategory.UNKNOWN, code

    @pytest.mark.parametrize(
        "code", [-1, 4, 100, 2**31 - 1, -(2**31), 10**12]
    )
    def test_unmapped_codes_are_unknown(self, code: int):
        assert classify(code) == IconCategory.UNKNOWN

    def test_non_integer_input_is_unknown(self):
        assert classify(None) == IconCategory.UNKNOWN  # type: ignore[arg-type]
        assert classify("0") == IconCategory.UNKNOWN  # type: ignore[arg-type]
        assert classify(True) == IconCategory.UNKNOWN

    def test_deterministic(self):
        assert [classify(c) for c in range(-5, 105)] == [
            classify(c) for c in range(-5, 105)
        ]

    def test_always_returns_a_category(self):
        for code in range(-1000, 1000, 7):
            assert isinstance(classify(code), IconCategory)
