"""Tests for the ById mixin.

Covers:
- The Color scenario (by_id(3) is BLUE)
- Loose matching: numeric ids match numeric strings ("2", "2.0", " 3 ")
- Loose matching boundary: "x" and "" never match an id of 0; bools never
  match numeric ids; oversized digit strings are plain misses
- by_id and get_by("id", ...) never share memoized results
- String ids match exactly (case-sensitive)
- Strict matching via RegistryConfig(loose_id_matching=False)
- Earliest-declared enumerator wins on duplicate ids
- Misses raise EnumeratorNotFound with field "id"
- Types without id() raise NotImplementedError
- Identified Protocol conformance
"""

from __future__ import annotations

import pytest

from enumerators import (
    ById,
    Enumeration,
    EnumeratorNotFound,
    EnumRegistry,
    Identified,
    RegistryConfig,
)

# ---------------------------------------------------------------------------
# Fixture enumerations
# ---------------------------------------------------------------------------


class Color(ById, Enumeration):
    RED = 1
    GREEN = 2
    BLUE = 3

    def __init__(self, code: int) -> None:
        self.code = code

    def id(self) -> int:
        return self.code


class Level(ById, Enumeration):
    NONE = 0
    LOW = 1

    def __init__(self, rank: int) -> None:
        self.rank = rank

    def id(self) -> int:
        return self.rank


class Region(Enumeration, ById):
    EUROPE = ("eu", "Europe")
    ASIA = ("ap", "Asia Pacific")

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    def id(self) -> str:
        return self.code


class Alias(ById, Enumeration):
    PRIMARY = 7
    SECONDARY = 7

    def __init__(self, code: int) -> None:
        self.code = code

    def id(self) -> int:
        return self.code


class Anonymous(ById, Enumeration):
    ONLY = 1


strict_registry = EnumRegistry(RegistryConfig(loose_id_matching=False))


class StrictColor(ById, Enumeration, registry=strict_registry):
    RED = 1
    GREEN = 2

    def __init__(self, code: int) -> None:
        self.code = code

    def id(self) -> int:
        return self.code


# ---------------------------------------------------------------------------
# Loose matching (default)
# ---------------------------------------------------------------------------


class TestByIdLoose:
    def test_scenario_by_id(self) -> None:
        assert Color.by_id(3).name == "BLUE"

    @pytest.mark.parametrize("query", [2, "2", "2.0", 2.0, " 2 ", "+2"])
    def test_numeric_forms_match(self, query: int | str) -> None:
        assert Color.by_id(query) is Color.GREEN

    def test_numeric_and_string_queries_share_result(self) -> None:
        assert Color.by_id("1") is Color.by_id(1) is Color.RED

    @pytest.mark.parametrize("query", ["x", "", "zero", "0x0"])
    def test_non_numeric_string_never_matches_zero(self, query: str) -> None:
        with pytest.raises(EnumeratorNotFound) as info:
            Level.by_id(query)
        assert info.value.field == "id"
        assert info.value.value == query

    def test_zero_matches_zero(self) -> None:
        assert Level.by_id("0") is Level.NONE
        assert Level.by_id(0) is Level.NONE

    def test_miss_raises(self) -> None:
        with pytest.raises(EnumeratorNotFound) as info:
            Color.by_id(4)
        assert info.value.query == {"id": 4}
        assert info.value.declaring_type is Color

    def test_string_ids(self) -> None:
        assert Region.by_id("ap") is Region.ASIA

    def test_string_ids_are_case_sensitive(self) -> None:
        with pytest.raises(EnumeratorNotFound):
            Region.by_id("EU")

    def test_earliest_declared_wins(self) -> None:
        assert Alias.by_id(7) is Alias.PRIMARY

    @pytest.mark.parametrize("query", [True, False])
    def test_bool_never_matches_numeric_ids(self, query: bool) -> None:
        with pytest.raises(EnumeratorNotFound):
            Level.by_id(query)

    def test_oversized_numeric_string_is_a_miss(self) -> None:
        query = "1" * 5000
        with pytest.raises(EnumeratorNotFound) as info:
            Color.by_id(query)
        assert info.value.value == query

    def test_by_id_and_get_by_on_id_stay_separate(self) -> None:
        assert Color.by_id(2) is Color.GREEN
        # get_by compares the attribute itself, here the bound id method.
        with pytest.raises(EnumeratorNotFound):
            Color.get_by("id", 2)


# ---------------------------------------------------------------------------
# Strict matching
# ---------------------------------------------------------------------------


class TestByIdStrict:
    def test_exact_type_matches(self) -> None:
        assert StrictColor.by_id(2) is StrictColor.GREEN

    @pytest.mark.parametrize("query", ["2", 2.0, " 2 "])
    def test_coercible_values_do_not_match(self, query: str | float) -> None:
        with pytest.raises(EnumeratorNotFound):
            StrictColor.by_id(query)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Capability
# ---------------------------------------------------------------------------


class TestIdCapability:
    def test_missing_id_implementation(self) -> None:
        with pytest.raises(NotImplementedError, match="must implement id"):
            Anonymous.by_id(1)

    def test_enumerators_satisfy_identified(self) -> None:
        assert isinstance(Color.RED, Identified) is True
        assert isinstance(Region.EUROPE, Identified) is True

    def test_plain_enumerations_do_not_satisfy_identified(self) -> None:
        class Plain(Enumeration):
            ONLY = 1

        assert isinstance(Plain.ONLY, Identified) is False
