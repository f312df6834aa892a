"""Tests for finident.ccs.iso7064: MOD 97-10 check digits."""

from __future__ import annotations

import pytest
from conftest import lei_payloads, valid_leis
from hypothesis import given
from hypothesis import strategies as st

from finident.ccs.char_value import char_value
from finident.ccs.iso7064 import MAX, MODULUS, check_digits, compute_check_digits, mod97_10

ANNEX_A_PAYLOAD = "YZ83GD8L7GG84979J5"
ANNEX_A_LEI = "YZ83GD8L7GG84979J516"


def _as_integer(s: str) -> int:
    return int("".join(str(char_value(c)) for c in s))


class TestConstants:
    def test_max(self) -> None:
        assert MAX == 92233720368547757

    def test_max_leaves_room_for_one_more_step(self) -> None:
        assert MAX * 100 + 35 <= 2**63 - 1

    def test_modulus(self) -> None:
        assert MODULUS == 97


class TestAnnexA:
    def test_check_digits(self) -> None:
        assert check_digits(ANNEX_A_PAYLOAD) == "16"

    def test_compute_check_digits_with_placeholder(self) -> None:
        assert compute_check_digits(ANNEX_A_PAYLOAD + "00") == 16

    def test_full_lei_yields_one(self) -> None:
        assert mod97_10(ANNEX_A_LEI) == 1


class TestMod9710:
    @pytest.mark.parametrize(
        "lei",
        [
            "635400B4JJBON4TCHF02",
            "529900ODI3047E2LIV03",
            "5493002F3N6V3Z14SP04",
            "95980020140005346817",
            "AJ6VL0Z1WDC42KKJZO20",
        ],
    )
    def test_issued_leis_yield_one(self, lei: str) -> None:
        assert mod97_10(lei) == 1

    def test_zero_padded_check_digits(self) -> None:
        assert check_digits("635400B4JJBON4TCHF") == "02"

    @given(st.text(alphabet="0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ", min_size=1, max_size=100))
    def test_matches_arbitrary_precision(self, s: str) -> None:
        assert mod97_10(s) == _as_integer(s) % 97

    @given(lei_payloads())
    def test_computed_digits_in_range(self, payload: str) -> None:
        assert 2 <= int(check_digits(payload)) <= 98

    @given(valid_leis())
    def test_valid_leis_yield_one(self, lei: str) -> None:
        assert mod97_10(lei) == 1
