"""Tests for marker classification: alphabetic and roman values, list types."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from fancylists.lists.classifier import (
    alpha_value,
    continuation_type,
    marker_type,
    roman_value,
    type_of_fancy_marker,
)
from fancylists.lists.types import ListType

letters = st.text(alphabet="abcdefghijklmnopqrstuvwxyz", min_size=1, max_size=5)


class TestAlphaValue:
    """Bijective base-26 values."""

    @pytest.mark.parametrize(
        ("token", "value"),
        [("a", 1), ("g", 7), ("z", 26), ("aa", 27), ("az", 52), ("ba", 53), ("vi", 581), ("C", 3)],
    )
    def test_known_values(self, token: str, value: int) -> None:
        assert alpha_value(token) == value

    @pytest.mark.parametrize("token", ["", "a1", "é", "#"])
    def test_invalid_is_zero(self, token: str) -> None:
        assert alpha_value(token) == 0

    @given(token=letters)
    def test_case_insensitive(self, token: str) -> None:
        assert alpha_value(token.upper()) == alpha_value(token)

    @given(token=letters, last=st.sampled_from("abcdefghijklmnopqrstuvwxyz"))
    def test_appending_a_letter_shifts_by_26(self, token: str, last: str) -> None:
        assert alpha_value(token + last) == alpha_value(token) * 26 + alpha_value(last)

    @given(token=letters)
    def test_positive(self, token: str) -> None:
        assert alpha_value(token) > 0


class TestRomanValue:
    """Roman numerals are only recognized when they start with i/I."""

    @pytest.mark.parametrize(
        ("token", "value"),
        [("i", 1), ("ii", 2), ("iii", 3), ("iv", 4), ("ix", 9), ("I", 1), ("IV", 4), ("IX", 9)],
    )
    def test_valid(self, token: str, value: int) -> None:
        assert roman_value(token) == value

    @pytest.mark.parametrize("token", ["v", "vi", "x", "c", "XII", "L", "M"])
    def test_not_starting_with_i(self, token: str) -> None:
        assert roman_value(token) is None

    @pytest.mark.parametrize("token", ["iiii", "ic", "il", "ivi", "ij", ""])
    def test_malformed(self, token: str) -> None:
        assert roman_value(token) is None


class TestTypeOfFancyMarker:
    """Display type and value from a single token."""

    def test_hash_is_indeterminate(self) -> None:
        assert type_of_fancy_marker("#") == (None, 1)

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("i", (ListType.LC_ROMAN, 1)),
            ("ii", (ListType.LC_ROMAN, 2)),
            ("IV", (ListType.UC_ROMAN, 4)),
            ("a", (ListType.LC_ALPHA, 1)),
            ("g", (ListType.LC_ALPHA, 7)),
            ("C", (ListType.UC_ALPHA, 3)),
            ("vi", (ListType.LC_ALPHA, 581)),
            ("v", (ListType.LC_ALPHA, 22)),
        ],
    )
    def test_types(self, token: str, expected: tuple[ListType, int]) -> None:
        assert type_of_fancy_marker(token) == expected

    def test_malformed_roman_falls_back_to_alpha(self) -> None:
        assert type_of_fancy_marker("ic") == (ListType.LC_ALPHA, alpha_value("ic"))

    def test_marker_type_handles_digits(self) -> None:
        assert marker_type("10") == (ListType.NUM, 10)
        assert marker_type("b") == (ListType.LC_ALPHA, 2)

    @given(token=letters)
    def test_case_picks_the_variant(self, token: str) -> None:
        lower_type, lower_value = type_of_fancy_marker(token)
        upper_type, upper_value = type_of_fancy_marker(token.upper())
        assert lower_value == upper_value > 0
        assert lower_type in (ListType.LC_ALPHA, ListType.LC_ROMAN)
        assert upper_type in (ListType.UC_ALPHA, ListType.UC_ROMAN)


class TestContinuationType:
    """A bare i/I is ambiguous; the open list decides."""

    def test_bare_i_continues_lowercase_alpha(self) -> None:
        assert continuation_type("i", ListType.LC_ALPHA) is ListType.LC_ALPHA

    def test_bare_upper_i_continues_uppercase_alpha(self) -> None:
        assert continuation_type("I", ListType.UC_ALPHA) is ListType.UC_ALPHA

    @pytest.mark.parametrize("current", [ListType.NUM, ListType.UC_ALPHA, ListType.LC_ROMAN])
    def test_bare_i_elsewhere_is_roman(self, current: ListType) -> None:
        assert continuation_type("i", current) is ListType.LC_ROMAN

    def test_bare_upper_i_after_lowercase_alpha_is_roman(self) -> None:
        assert continuation_type("I", ListType.LC_ALPHA) is ListType.UC_ROMAN

    def test_other_tokens_use_their_own_type(self) -> None:
        assert continuation_type("ii", ListType.LC_ALPHA) is ListType.LC_ROMAN
        assert continuation_type("v", ListType.LC_ROMAN) is ListType.LC_ALPHA
        assert continuation_type("3", ListType.LC_ALPHA) is ListType.NUM
