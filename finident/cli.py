"""Command-line filter: validate one identifier per stdin line.

Valid lines are written to stdout in canonical (or tagged) form; rejected
lines are logged to stderr and make the exit status 1. With ``--fix`` a
check character mismatch is repaired from the error's ``corrected`` value
instead of rejected. With ``--json`` every line yields one JSON object.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, TextIO, final

from finident.core.errors import IdentError, IncorrectCheckCharacterError
from finident.core.result import Err, Ok
from finident.core.serialization import canonical_bytes
from finident.ident import (
    Cik,
    Cusip,
    Ein,
    Figi,
    Isin,
    Lei,
    Mic,
    country_code_from_string,
    country_code_from_string_strict,
    currency_code_from_string,
    currency_code_from_string_strict,
    sic_code_from_string,
    sic_code_from_string_strict,
)

logger = logging.getLogger(__name__)

type Parser = Callable[[str], Ok[Any] | Err[IdentError]]

# kind -> (loose parser, strict parser)
PARSERS: dict[str, tuple[Parser, Parser]] = {
    "cusip": (Cusip.from_string, Cusip.from_string_strict),
    "isin": (Isin.from_string, Isin.from_string_strict),
    "figi": (Figi.from_string, Figi.from_string_strict),
    "lei": (Lei.from_string, Lei.from_string_strict),
    "cik": (Cik.from_string, Cik.from_string_strict),
    "mic": (Mic.from_string, Mic.from_string_strict),
    "ein": (Ein.from_string, Ein.from_string_strict),
    "country": (country_code_from_string, country_code_from_string_strict),
    "currency": (currency_code_from_string, currency_code_from_string_strict),
    "sic": (sic_code_from_string, sic_code_from_string_strict),
}


@final
@dataclass(frozen=True, slots=True)
class CliConfig:
    """Runtime options for one invocation."""

    kind: str
    strict: bool = False
    fix: bool = False
    tagged: bool = False
    json: bool = False
    verbose: bool = False

    @property
    def parser(self) -> Parser:
        loose, strict = PARSERS[self.kind]
        return strict if self.strict else loose


@final
@dataclass(frozen=True, slots=True)
class LineOutcome:
    """What happened to one input line."""

    raw: str
    value: object | None
    error: IdentError | None = None
    fixed: bool = False


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="finident",
        description="Validate financial identifiers read from stdin, one per line.",
    )
    parser.add_argument("kind", choices=sorted(PARSERS), help="Identifier kind to validate.")
    parser.add_argument("--strict", action="store_true", help="Do not normalize whitespace or case.")
    parser.add_argument("--fix", action="store_true", help="Repair incorrect check characters.")
    parser.add_argument("--tagged", action="store_true", help="Write values as '<tag>:<value>'.")
    parser.add_argument("--json", action="store_true", help="Write one JSON object per input line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every line at DEBUG level.")
    return parser


def config_from_args(argv: Sequence[str] | None = None) -> CliConfig:
    args = build_parser().parse_args(argv)
    return CliConfig(
        kind=args.kind,
        strict=args.strict,
        fix=args.fix,
        tagged=args.tagged,
        json=args.json,
        verbose=args.verbose,
    )


def process_line(config: CliConfig, raw: str) -> LineOutcome:
    """Validate one line, applying a check character fix when configured."""
    match config.parser(raw):
        case Ok(value):
            logger.debug("accepted %r", raw)
            return LineOutcome(raw=raw, value=value)
        case Err(IncorrectCheckCharacterError() as error) if config.fix:
            match config.parser(error.corrected):
                case Ok(value):
                    logger.info("fixed %r -> %s (%s)", raw, value, error.message)
                    return LineOutcome(raw=raw, value=value, error=error, fixed=True)
                case Err(second):
                    logger.warning("rejected %r: %s", raw, second.message)
                    return LineOutcome(raw=raw, value=None, error=second)
        case Err(error):
            logger.warning("rejected %r: %s", raw, error.message)
            return LineOutcome(raw=raw, value=None, error=error)
    raise AssertionError("unreachable")


def render(config: CliConfig, outcome: LineOutcome) -> str | None:
    """Output line for an outcome, or None when nothing is written."""
    if config.json:
        payload = {
            "input": outcome.raw,
            "value": None if outcome.value is None else str(outcome.value),
            "error": outcome.error,
            "fixed": outcome.fixed,
        }
        match canonical_bytes(payload):
            case Ok(b):
                return b.decode("utf-8")
            case Err(msg):
                raise TypeError(msg)
    if outcome.value is None:
        return None
    if config.tagged:
        return outcome.value.to_string_tagged()  # type: ignore[attr-defined, no-any-return]
    return str(outcome.value)


def run(config: CliConfig, lines: TextIO, out: TextIO) -> int:
    """Stream ``lines`` through the validator. Returns the exit status."""
    rejected = 0
    for line in lines:
        raw = line.rstrip("\r\n")
        if not raw.strip():
            continue
        outcome = process_line(config, raw)
        if outcome.value is None:
            rejected += 1
        text = render(config, outcome)
        if text is not None:
            out.write(text + "\n")
    if rejected:
        logger.warning("%d line(s) rejected", rejected)
    return 1 if rejected else 0


def main(argv: Sequence[str] | None = None) -> int:
    config = config_from_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return run(config, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
