"""
Tests for parse_item_id() in strict and lenient mode.
"""

import pytest

from items_api.app.api.v1.endpoints.deps import parse_item_id
from items_api.app.core.errors import DecodeError, InvalidItemIdError


class TestStrict:

    @pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("-3", -3), ("+7", 7), ("007", 7)])
    def test_decimal_integers(self, raw, expected):
        assert parse_item_id(raw) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "1e3", "0x1f", "1_000", " 1", str(2 ** 63)])
    def test_rejected(self, raw):
        with pytest.raises(InvalidItemIdError):
            parse_item_id(raw)

    def test_invalid_id_is_a_decode_error(self):
        with pytest.raises(DecodeError):
            parse_item_id("nope")


class TestLenient:

    @pytest.mark.parametrize(
        "raw, expected",
        [("12", 12), ("0x10", 16), ("0o10", 8), ("0b101", 5), ("010", 8), ("-010", -8), ("-5", -5), ("0", 0)],
    )
    def test_parsed(self, raw, expected):
        assert parse_item_id(raw, lenient=True) == expected

    @pytest.mark.parametrize("raw", [None, "", "abc", "1.5", "0x", "09", " 7", "--5", "+-5"])
    def test_falls_back_to_zero(self, raw):
        assert parse_item_id(raw, lenient=True) == 0

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (str(2 ** 31), 2 ** 31 - 1),
            ("99999999999999999999", 2 ** 31 - 1),
            (str(-(2 ** 31) - 1), -(2 ** 31)),
            ("0xffffffffff", 2 ** 31 - 1),
        ],
    )
    def test_out_of_range_is_clamped(self, raw, expected):
        assert parse_item_id(raw, lenient=True) == expected
