"""Hypothesis strategies and pytest fixtures for finident.

Strategies produce payloads over each identifier's alphabet and complete,
valid identifier strings (payload plus computed check characters).
"""

from __future__ import annotations

from hypothesis import HealthCheck, settings
from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from finident.ccs.double_add_double import CusipVariant, IsinVariant
from finident.ccs.iso7064 import check_digits
from finident.ident.figi import PROVIDER_EXCLUSIONS

# ---------------------------------------------------------------------------
# Hypothesis global settings
# ---------------------------------------------------------------------------

settings.register_profile(
    "ci",
    max_examples=200,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.register_profile(
    "dev",
    max_examples=50,
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
)
settings.load_profile("dev")


# ===================================================================
# ALPHABETS
# ===================================================================

DIGITS = "0123456789"
UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALNUM = DIGITS + UPPER
FIGI_ALPHABET = DIGITS + "BCDFGHJKLMNPQRSTVWXYZ"


def fixed(alphabet: str, size: int) -> SearchStrategy[str]:
    return st.text(alphabet=alphabet, min_size=size, max_size=size)


def alphanumerics(min_size: int = 1, max_size: int = 100) -> SearchStrategy[str]:
    """Mixed-case alphanumeric strings."""
    return st.text(alphabet=ALNUM + ALNUM.lower(), min_size=min_size, max_size=max_size)


# ===================================================================
# PAYLOADS
# ===================================================================


def cusip_payloads() -> SearchStrategy[str]:
    return fixed(ALNUM, 8)


def isin_payloads() -> SearchStrategy[str]:
    return st.builds(lambda cc, nsin: cc + nsin, fixed(UPPER, 2), fixed(ALNUM, 9))


def figi_payloads() -> SearchStrategy[str]:
    providers = fixed(FIGI_ALPHABET, 2).filter(lambda p: p not in PROVIDER_EXCLUSIONS)
    return st.builds(lambda p, i: p + "G" + i, providers, fixed(FIGI_ALPHABET, 8))


def lei_payloads() -> SearchStrategy[str]:
    return fixed(ALNUM, 18)


# ===================================================================
# VALID IDENTIFIERS
# ===================================================================


@st.composite
def valid_cusips(draw: st.DrawFn) -> str:
    payload = draw(cusip_payloads())
    return payload + CusipVariant.calculate(payload)


@st.composite
def valid_isins(draw: st.DrawFn) -> str:
    payload = draw(isin_payloads())
    return payload + IsinVariant.calculate(payload)


@st.composite
def valid_figis(draw: st.DrawFn) -> str:
    payload = draw(figi_payloads())
    return payload + CusipVariant.calculate(payload)


@st.composite
def valid_leis(draw: st.DrawFn) -> str:
    payload = draw(lei_payloads())
    return payload + check_digits(payload)
