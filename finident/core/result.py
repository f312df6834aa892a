"""Ok / Err values returned by every finident factory.

Parsing never raises for bad input. Callers branch with ``match`` on the two
variants, or ask ``is_ok`` when only validity matters. ``unwrap`` belongs in
tests and at program boundaries.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Literal, NoReturn, final


@final
@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    @property
    def is_ok(self) -> Literal[True]:
        return True

    def ok(self) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def map_err(self, f: Callable[[Any], Any]) -> Ok[T]:  # noqa: ARG002
        return self

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        return self.value


@final
@dataclass(frozen=True, slots=True)
class Err[E]:
    """Rejected input. ``error`` is usually an IdentError value."""

    error: E

    @property
    def is_ok(self) -> Literal[False]:
        return False

    def ok(self) -> None:
        """The value, which an Err never has."""
        return None

    def map(self, f: Callable[[Any], Any]) -> Err[E]:  # noqa: ARG002
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Replace the error, e.g. to report the caller's raw input."""
        return Err(f(self.error))

    def unwrap(self) -> NoReturn:
        raise RuntimeError(f"Called unwrap on Err: {self.error}")

    def unwrap_or[T](self, default: T) -> T:
        return default


type Result[T, E] = Ok[T] | Err[E]


def unwrap[T](result: Ok[T] | Err[Any]) -> T:
    """Value of an Ok; RuntimeError for an Err."""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise RuntimeError(f"unwrap on Err: {error}")
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def sequence[T, E](results: Iterable[Ok[T] | Err[E]]) -> Ok[tuple[T, ...]] | Err[E]:
    """All values in order, or the first Err. Later results are not consumed."""
    values: list[T] = []
    for r in results:
        match r:
            case Err():
                return r
            case Ok(value):
                values.append(value)
    return Ok(tuple(values))
