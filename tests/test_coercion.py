"""Tests for id comparison.

Covers:
- loose_equals: plain equality, numeric-string coercion, whitespace, floats,
  exponents, non-numeric strings never equal numbers, bool never equals a
  number, digit strings too long to convert are not numeric
- strict_equals: type and value must both match
- ids_match dispatches on the loose flag
"""

from __future__ import annotations

import pytest

from enumerators.coercion import ids_match, loose_equals, strict_equals


class TestLooseEquals:
    @pytest.mark.parametrize(
        ("query", "candidate"),
        [
            (2, 2),
            ("2", 2),
            (2, "2"),
            ("2.0", 2),
            (2.0, 2),
            (" 3 ", 3),
            ("+4", 4),
            ("-1", -1),
            ("1e1", 10),
            ("1e1", "10"),
            (".5", 0.5),
            ("eu", "eu"),
        ],
    )
    def test_matches(self, query: object, candidate: object) -> None:
        assert loose_equals(query, candidate) is True

    @pytest.mark.parametrize(
        ("query", "candidate"),
        [
            ("x", 0),
            ("", 0),
            ("0x1A", 26),
            ("1_000", 1000),
            ("nan", float("nan")),
            ("inf", float("inf")),
            ("2", 3),
            (True, "1"),
            ("1", True),
            (True, 1),
            (1, True),
            (False, 0),
            (0.0, False),
            ("1" * 5000, 1),
            (None, 0),
            ("EU", "eu"),
        ],
    )
    def test_does_not_match(self, query: object, candidate: object) -> None:
        assert loose_equals(query, candidate) is False


class TestStrictEquals:
    def test_same_type_and_value(self) -> None:
        assert strict_equals(2, 2) is True
        assert strict_equals("eu", "eu") is True

    def test_numeric_string_does_not_match(self) -> None:
        assert strict_equals("2", 2) is False

    def test_int_and_float_do_not_match(self) -> None:
        assert strict_equals(2.0, 2) is False


class TestIdsMatch:
    def test_loose(self) -> None:
        assert ids_match("2", 2, loose=True) is True

    def test_strict(self) -> None:
        assert ids_match("2", 2, loose=False) is False
        assert ids_match(2, 2, loose=False) is True


class TestOversizedNumericStrings:
    def test_integral_string_past_conversion_limit(self) -> None:
        assert loose_equals("9" * 5000, "9" * 5000) is True
        assert loose_equals("9" * 5000, 9) is False

    def test_bool_still_matches_itself(self) -> None:
        assert loose_equals(True, True) is True
        assert loose_equals(False, False) is True
