"""Tests for finident.core.factory — the shared construction pipeline."""

from __future__ import annotations

import pytest

from finident.core import factory
from finident.core.errors import (
    IncorrectCheckCharacterError,
    InvalidComponentFormatError,
    InvalidFormatError,
)
from finident.core.result import Err, Ok
from finident.ident.cusip import CUSIP_GRAMMAR
from finident.ident.lei import LEI_GRAMMAR
from finident.ident.mic import MIC_GRAMMAR

# ---------------------------------------------------------------------------
# Whole strings
# ---------------------------------------------------------------------------


class TestFromString:
    def test_valid(self) -> None:
        assert factory.from_string(CUSIP_GRAMMAR, "037833100", strict=True) == Ok(("037833", "10", "0"))

    def test_loose_normalizes(self) -> None:
        assert factory.from_string(CUSIP_GRAMMAR, " 09739d100 ", strict=False) == Ok(("09739D", "10", "0"))

    def test_strict_does_not_normalize(self) -> None:
        result = factory.from_string(CUSIP_GRAMMAR, " 037833100", strict=True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidFormatError)
        assert result.error.raw == " 037833100"

    def test_check_mismatch(self) -> None:
        result = factory.from_string(CUSIP_GRAMMAR, "111111111", strict=True)
        assert isinstance(result, Err)
        assert isinstance(result.error, IncorrectCheckCharacterError)
        assert result.error.expected == "8"
        assert result.error.supplied == "1"

    def test_no_check_grammar(self) -> None:
        assert factory.from_string(MIC_GRAMMAR, "xnas", strict=False) == Ok(("XNAS",))

    def test_override_skips_verification(self) -> None:
        assert isinstance(factory.from_string(LEI_GRAMMAR, "315700WH3YMKHCVYW201", strict=True), Ok)


class TestValidateFormat:
    def test_does_not_verify_check(self) -> None:
        assert factory.validate_format(CUSIP_GRAMMAR, "111111111", strict=True) == Ok("111111111")

    def test_returns_normalized(self) -> None:
        assert factory.validate_format(CUSIP_GRAMMAR, " 09739d100", strict=False) == Ok("09739D100")

    def test_payload_format_error_names_payload(self) -> None:
        result = factory.validate_payload_format(CUSIP_GRAMMAR, "0378331", strict=True)
        assert isinstance(result, Err)
        assert result.error.component == "payload"
        assert result.error.message == "Format of payload '0378331' is not valid for CUSIP."


# ---------------------------------------------------------------------------
# Parts
# ---------------------------------------------------------------------------


class TestFromParts:
    def test_valid(self) -> None:
        assert factory.from_parts(CUSIP_GRAMMAR, ("037833", "10", "0"), strict=True) == Ok(("037833", "10", "0"))

    def test_first_bad_component_reported(self) -> None:
        result = factory.from_parts(CUSIP_GRAMMAR, ("03783", "1", "0"), strict=True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidComponentFormatError)
        assert result.error.component == "issuer_number"

    def test_bad_check_component(self) -> None:
        result = factory.from_parts(CUSIP_GRAMMAR, ("037833", "10", "X"), strict=True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidComponentFormatError)
        assert result.error.component == "check_digit"

    def test_wrong_arity_is_a_programming_error(self) -> None:
        with pytest.raises(TypeError):
            factory.from_parts(CUSIP_GRAMMAR, ("037833", "10"), strict=True)

    def test_from_payload_parts_appends_check(self) -> None:
        assert factory.from_payload_parts(CUSIP_GRAMMAR, ("037833", "10"), strict=True) == Ok(("037833", "10", "0"))

    def test_from_payload(self) -> None:
        assert factory.from_payload(CUSIP_GRAMMAR, "03783310", strict=True) == Ok(("037833", "10", "0"))

    def test_from_payload_rejects_complete_identifier(self) -> None:
        result = factory.from_payload(CUSIP_GRAMMAR, "037833100", strict=True)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidComponentFormatError)

    def test_calculate_check(self) -> None:
        assert factory.calculate_check(CUSIP_GRAMMAR, ("111111", "11"), strict=False) == Ok("8")

    def test_validate_component(self) -> None:
        assert factory.validate_component(CUSIP_GRAMMAR, "issue_number", " 1a", strict=False) == Ok("1A")
        assert isinstance(factory.validate_component(CUSIP_GRAMMAR, "issue_number", "1a", strict=True), Err)
