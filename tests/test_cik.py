"""Tests for finident.ident.cik."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from finident.core.errors import InvalidComponentFormatError, InvalidFormatError, InvalidValueError
from finident.core.result import Err, Ok, unwrap
from finident.ident.cik import MAX_CIK, Cik


class TestCik:
    def test_apple(self) -> None:
        cik = unwrap(Cik.from_string("320193"))
        assert cik.value == 320193
        assert str(cik) == "320193"
        assert cik.to_string_padded() == "0000320193"
        assert cik.to_string_tagged() == "cik:320193"

    @pytest.mark.parametrize("raw", ["0000320193", "000320193", " 320193 "])
    def test_loose_accepts_padding(self, raw: str) -> None:
        assert Cik.from_string(raw) == Ok(Cik(320193))

    def test_strict_requires_canonical(self) -> None:
        assert Cik.from_string_strict("320193") == Ok(Cik(320193))
        assert isinstance(Cik.from_string_strict("0000320193"), Err)
        assert isinstance(Cik.from_string_strict(" 320193"), Err)

    def test_empty(self) -> None:
        result = Cik.from_string("")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidFormatError)

    @pytest.mark.parametrize("raw", ["0", "0000000000"])
    def test_zero(self, raw: str) -> None:
        result = Cik.from_string(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidValueError)

    @pytest.mark.parametrize("raw", ["12345678901", "32019a", "-320193", "3201 93"])
    def test_bad_format(self, raw: str) -> None:
        result = Cik.from_string(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidFormatError)

    def test_from_int(self) -> None:
        assert Cik.from_int(MAX_CIK) == Ok(Cik(9999999999))
        assert isinstance(Cik.from_int(MAX_CIK + 1), Err)
        assert isinstance(Cik.from_int(0), Err)
        assert isinstance(Cik.from_int(-1), Err)

    def test_validate_format(self) -> None:
        assert Cik.validate_format("000320193") == Ok("320193")
        assert Cik.is_valid_format("0000320193")
        assert not Cik.is_valid_format("0")
        assert not Cik.is_valid_format_strict("0000320193")

    def test_numeric_ordering(self) -> None:
        assert unwrap(Cik.from_string("9")) < unwrap(Cik.from_string("10"))

    @given(st.integers(min_value=1, max_value=MAX_CIK))
    def test_padded_round_trip(self, n: int) -> None:
        cik = unwrap(Cik.from_int(n))
        assert Cik.from_string(cik.to_string_padded()) == Ok(cik)
        assert Cik.from_string_strict(str(cik)) == Ok(cik)


class TestCikParts:
    def test_loose_parts_accept_padding(self) -> None:
        assert Cik.from_parts("0000320193") == Ok(Cik(320193))
        assert Cik.from_parts(" 320193 ") == Ok(Cik(320193))
        assert Cik.validate_component("value", "0000320193") == Ok("320193")
        assert Cik.is_valid_component_format("value", "0000320193")

    def test_strict_parts_reject_padding(self) -> None:
        assert isinstance(Cik.from_parts_strict("0000320193"), Err)
        assert Cik.from_parts_strict("320193") == Ok(Cik(320193))
        assert not Cik.is_valid_component_format_strict("value", "0000320193")

    @pytest.mark.parametrize("raw", ["0", "0000000000", "12345678901", "32O193"])
    def test_loose_parts_invalid(self, raw: str) -> None:
        result = Cik.from_parts(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidComponentFormatError)
        assert result.error.component == "value"

    def test_parts_arity(self) -> None:
        with pytest.raises(TypeError):
            Cik.from_parts("1", "2")
