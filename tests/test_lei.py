"""Tests for finident.ident.lei."""

from __future__ import annotations

import pytest
from conftest import valid_leis
from hypothesis import given

from finident.ccs.iso7064 import check_digits, mod97_10
from finident.core.errors import IncorrectCheckCharacterError, InvalidComponentFormatError
from finident.core.result import Err, Ok, unwrap
from finident.ident import lei_whitelist
from finident.ident.lei import Lei
from finident.ident.lei_whitelist import RegistrationStatus


def _mod97_one_with(supplied: str, expected: str) -> str:
    """An LEI ending in ``supplied`` whose MOD 97-10 is 1 anyway.

    The payload's own check digits are ``expected``; varying the last two
    payload digits reaches every residue mod 97.
    """
    for k in range(100):
        payload = f"529900ODI3047E2L{k:02d}"
        if check_digits(payload) == expected:
            return payload + supplied
    raise AssertionError(f"no payload with check digits {expected}")


CONFORMING = [
    "635400B4JJBON4TCHF02",
    "529900ODI3047E2LIV03",
    "5493002F3N6V3Z14SP04",
    "549300IYKILIU506KA05",
    "JJKC32MCHWDI71265Z06",
    "549300RIPPWJB5Z0FK07",
    "Z2VZBHUMB7PWWJ63I008",
    "FRQ78DFDYWMT3XY6UR09",
    "337KMNHEWWWR6B7Q7W10",
    "549300E9PC51EN656011",
    "5493003WHB7TFLYQFS12",
    "549300C04BJ0G297NC13",
    "T68X8LLAQYRNDV034K14",
    "8HWWA59ZS6Z54QLX6S15",
    "54930018SOOHBHRLWC16",
    "95980020140005346817",
    "549300HMMEWVG3PPQU18",
    "5JQ7W3GWO8J5DAE5WR19",
    "AJ6VL0Z1WDC42KKJZO20",
]

NON_CONFORMING = [
    "31570010000000045200",
    "3157006B6JVZ5DFMSN00",
    "315700BBRQHDWX6SHZ00",
    "315700G5G24XYL1TXH00",
    "31570010000000048401",
    "31570010000000067801",
    "315700WH3YMKHCVYW201",
]


# ---------------------------------------------------------------------------
# Conforming LEIs
# ---------------------------------------------------------------------------


class TestLei:
    def test_annex_a(self) -> None:
        lei = unwrap(Lei.from_parts("YZ83", "GD8L7GG84979J5", "16"))
        assert str(lei) == "YZ83GD8L7GG84979J516"
        assert Lei.from_payload_parts("YZ83", "GD8L7GG84979J5") == Ok(lei)
        assert Lei.calculate_check_digit("YZ83", "GD8L7GG84979J5") == Ok("16")

    def test_components(self) -> None:
        lei = unwrap(Lei.from_string("529900ODI3047E2LIV03"))
        assert lei.lou_identifier == "5299"
        assert lei.entity_identifier == "00ODI3047E2LIV"
        assert lei.check_digits == "03"

    @pytest.mark.parametrize("raw", CONFORMING)
    def test_conforming(self, raw: str) -> None:
        lei = unwrap(Lei.from_string_strict(raw))
        assert str(lei) == raw
        assert lei.is_conforming
        assert lei.whitelist_entry is None
        assert Lei.validate(raw)

    def test_incorrect_check_digits(self) -> None:
        result = Lei.from_string("529900ODI3047E2LIV04")
        assert isinstance(result, Err)
        assert isinstance(result.error, IncorrectCheckCharacterError)
        assert result.error.expected == "03"
        assert result.error.corrected == "529900ODI3047E2LIV03"
        assert result.error.message == (
            "check digits '04' is not correct for LEI LOU identifier '5299' and entity identifier "
            "'00ODI3047E2LIV'. It should be '03'."
        )

    @pytest.mark.parametrize("check", ["00", "01", "99"])
    def test_out_of_range_check_digits_rejected(self, check: str) -> None:
        result = Lei.from_parts("5299", "00ODI3047E2LIV", check)
        assert isinstance(result, Err)
        assert isinstance(result.error, IncorrectCheckCharacterError)

    @pytest.mark.parametrize(("supplied", "expected"), [("00", "97"), ("01", "98"), ("99", "02")])
    def test_out_of_range_check_digits_rejected_when_mod97_is_one(self, supplied: str, expected: str) -> None:
        raw = _mod97_one_with(supplied, expected)
        assert mod97_10(raw) == 1
        assert not lei_whitelist.contains(raw)
        result = Lei.from_string(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, IncorrectCheckCharacterError)
        assert result.error.supplied == supplied
        assert result.error.expected == expected
        assert isinstance(Lei.from_parts(raw[:4], raw[4:18], supplied), Err)
        assert not Lei.validate(raw)

    def test_check_digits_must_be_numeric(self) -> None:
        result = Lei.from_parts("5299", "00ODI3047E2LIV", "0A")
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidComponentFormatError)
        assert result.error.component == "check_digits"

    def test_loose_and_strict(self) -> None:
        assert Lei.from_string(" 529900odi3047e2liv03 ") == Ok(Lei("529900ODI3047E2LIV03"))
        assert isinstance(Lei.from_string_strict("529900odi3047e2liv03"), Err)

    def test_ordering(self) -> None:
        a = unwrap(Lei.from_string("529900ODI3047E2LIV03"))
        b = unwrap(Lei.from_string("635400B4JJBON4TCHF02"))
        assert a < b

    def test_tagged(self) -> None:
        assert unwrap(Lei.from_string("529900ODI3047E2LIV03")).to_string_tagged() == "lei:529900ODI3047E2LIV03"

    @given(valid_leis())
    def test_generated_leis_conform(self, raw: str) -> None:
        lei = unwrap(Lei.from_string_strict(raw))
        assert lei.is_conforming
        assert Lei.from_string(str(lei)) == Ok(lei)


# ---------------------------------------------------------------------------
# Whitelisted non-conforming LEIs
# ---------------------------------------------------------------------------


class TestNonConformingLei:
    @pytest.mark.parametrize("raw", NON_CONFORMING)
    def test_parses_but_not_conforming(self, raw: str) -> None:
        lei = unwrap(Lei.from_string(raw))
        assert str(lei) == raw
        assert not lei.is_conforming
        assert mod97_10(raw) == 1

    @pytest.mark.parametrize("raw", NON_CONFORMING)
    def test_validate_excludes_whitelist(self, raw: str) -> None:
        assert not Lei.validate(raw)
        assert Lei.validate_allow_non_conforming(raw)

    def test_whitelist_entry(self) -> None:
        entry = unwrap(Lei.from_string("315700WH3YMKHCVYW201")).whitelist_entry
        assert entry is not None
        assert entry.index == 33
        assert entry.registration_status is RegistrationStatus.ISSUED

    def test_from_parts_with_whitelisted_check_digits(self) -> None:
        assert Lei.from_parts("3157", "00WH3YMKHCVYW2", "01") == Ok(Lei("315700WH3YMKHCVYW201"))

    def test_payload_of_whitelisted_lei_gets_computed_digits(self) -> None:
        lei = unwrap(Lei.from_payload("315700WH3YMKHCVYW2"))
        assert lei.check_digits == "98"
        assert lei.is_conforming


class TestValidate:
    @pytest.mark.parametrize("raw", ["", "529900ODI3047E2LIV0", "529900ODI3047E2LIV03X", "529900odi3047e2liv03"])
    def test_rejects_bad_format(self, raw: str) -> None:
        assert not Lei.validate(raw)
        assert not Lei.validate_allow_non_conforming(raw)
