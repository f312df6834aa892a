"""The identifier construction pipeline, shared by every identifier kind.

normalize (loose mode only) -> structural validation -> check character
resolution (verify a supplied one, or compute one) -> assembled parts.

Each function returns the validated component strings in grammar order
(check component last, when the grammar has one). The identifier classes in
finident.ident wrap those parts into their immutable values; nothing here
knows about any particular identifier kind.
"""

from __future__ import annotations

from collections.abc import Sequence

from finident.core.errors import (
    IdentError,
    IncorrectCheckCharacterError,
    InvalidComponentFormatError,
    InvalidFormatError,
)
from finident.core.grammar import Component, Grammar, normalize
from finident.core.result import Err, Ok, sequence

type Parts = tuple[str, ...]


def _prepare(raw: str, *, strict: bool) -> str:
    return raw if strict else normalize(raw)


def _validate(
    grammar: Grammar, component: Component, raw: str, *, strict: bool,
) -> Ok[str] | Err[InvalidComponentFormatError]:
    s = _prepare(raw, strict=strict)
    if component.matches(s):
        return Ok(s)
    return Err(InvalidComponentFormatError.create(grammar.kind, component.name, component.label, raw))


def validate_component(
    grammar: Grammar, name: str, raw: str, *, strict: bool,
) -> Ok[str] | Err[InvalidComponentFormatError]:
    """Validate a single named component, returning it in canonical form."""
    return _validate(grammar, grammar.component(name), raw, strict=strict)


def validate_format(grammar: Grammar, raw: str, *, strict: bool) -> Ok[str] | Err[InvalidFormatError]:
    """Structural check of a complete identifier. Check characters are NOT verified."""
    s = _prepare(raw, strict=strict)
    if grammar.split(s) is None:
        return Err(InvalidFormatError.create(grammar.kind, raw))
    return Ok(s)


def validate_payload_format(
    grammar: Grammar, raw: str, *, strict: bool,
) -> Ok[str] | Err[InvalidComponentFormatError]:
    s = _prepare(raw, strict=strict)
    if grammar.split_payload(s) is None:
        return Err(InvalidComponentFormatError.create(grammar.kind, "payload", "payload", raw))
    return Ok(s)


def verify_check(grammar: Grammar, payload: Parts, check: str) -> Ok[Parts] | Err[IncorrectCheckCharacterError]:
    """Compare supplied check characters to the computed ones.

    All arguments must already be validated. A candidate accepted by the
    grammar's override is returned as is.
    """
    assert grammar.check is not None
    joined = "".join(payload)
    if grammar.override is not None and grammar.override(joined + check):
        return Ok((*payload, check))
    expected = grammar.scheme.calculate(joined)
    if check != expected:
        return Err(IncorrectCheckCharacterError.create(
            grammar.kind,
            grammar.check.label,
            check,
            expected,
            [(c.name, c.label, p) for c, p in zip(grammar.components, payload, strict=True)],
        ))
    return Ok((*payload, check))


def _complete(grammar: Grammar, payload: Parts) -> Parts:
    if grammar.check is None:
        return payload
    return (*payload, grammar.scheme.calculate("".join(payload)))


def _resolve(grammar: Grammar, parts: Parts) -> Ok[Parts] | Err[IdentError]:
    if grammar.check is None:
        return Ok(parts)
    return verify_check(grammar, parts[:-1], parts[-1])


def from_string(grammar: Grammar, raw: str, *, strict: bool) -> Ok[Parts] | Err[IdentError]:
    """Parse a complete identifier, verifying its check characters."""
    parts = grammar.split(_prepare(raw, strict=strict))
    if parts is None:
        return Err(InvalidFormatError.create(grammar.kind, raw))
    return _resolve(grammar, parts)


def from_parts(grammar: Grammar, parts: Sequence[str], *, strict: bool) -> Ok[Parts] | Err[IdentError]:
    """Build from every component including the check characters, verifying them."""
    components = grammar.all_components
    if len(parts) != len(components):
        raise TypeError(f"{grammar.kind} takes {len(components)} components, got {len(parts)}")
    match sequence(_validate(grammar, c, p, strict=strict) for c, p in zip(components, parts, strict=True)):
        case Err() as e:
            return e
        case Ok(validated):
            return _resolve(grammar, validated)


def from_payload_parts(grammar: Grammar, parts: Sequence[str], *, strict: bool) -> Ok[Parts] | Err[IdentError]:
    """Build from the payload components, computing the check characters."""
    if len(parts) != len(grammar.components):
        raise TypeError(f"{grammar.kind} payload takes {len(grammar.components)} components, got {len(parts)}")
    match sequence(_validate(grammar, c, p, strict=strict) for c, p in zip(grammar.components, parts, strict=True)):
        case Err() as e:
            return e
        case Ok(validated):
            return Ok(_complete(grammar, validated))


def from_payload(grammar: Grammar, raw: str, *, strict: bool) -> Ok[Parts] | Err[IdentError]:
    """Build from the whole payload string, computing the check characters."""
    parts = grammar.split_payload(_prepare(raw, strict=strict))
    if parts is None:
        return Err(InvalidComponentFormatError.create(grammar.kind, "payload", "payload", raw))
    return Ok(_complete(grammar, parts))


def calculate_check(grammar: Grammar, parts: Sequence[str], *, strict: bool) -> Ok[str] | Err[IdentError]:
    """Check characters for the given payload components."""
    return from_payload_parts(grammar, parts, strict=strict).map(lambda p: p[-1])
