"""Tests for finident.ident.mic."""

from __future__ import annotations

import pytest

from finident.core.errors import InvalidFormatError
from finident.core.result import Err, Ok, unwrap
from finident.ident.mic import Mic


class TestMic:
    @pytest.mark.parametrize("raw", ["XNAS", "XNYS", "BATS", "XS2X"])
    def test_valid(self, raw: str) -> None:
        assert str(unwrap(Mic.from_string_strict(raw))) == raw

    def test_loose(self) -> None:
        assert Mic.from_string(" xnas ") == Ok(Mic("XNAS"))
        assert isinstance(Mic.from_string_strict("xnas"), Err)

    @pytest.mark.parametrize("raw", ["", "XNA", "XNASD", "XN-S", "XN S"])
    def test_invalid(self, raw: str) -> None:
        result = Mic.from_string(raw)
        assert isinstance(result, Err)
        assert isinstance(result.error, InvalidFormatError)
        assert result.error.message == f"Format of identifier '{raw}' is not valid for MIC."

    def test_tagged(self) -> None:
        assert unwrap(Mic.from_string("XNAS")).to_string_tagged() == "mic:XNAS"

    def test_is_valid_format(self) -> None:
        assert Mic.is_valid_format("xnys")
        assert not Mic.is_valid_format_strict("xnys")

    def test_ordering(self) -> None:
        assert unwrap(Mic.from_string("XNAS")) < unwrap(Mic.from_string("XNYS"))
