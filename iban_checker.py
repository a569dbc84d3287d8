# iban_checker.py
"""IBAN validation by country length and the ISO 7064 MOD-97-10 checksum.

The check runs as a short pipeline of pure steps::

    check_length -> rearrange_iban -> convert_to_integer
                 -> create_segments -> calculate

``validate`` is the entry point. ``check_iban`` runs the same pipeline
but returns a structured result with the reason for the verdict.
"""
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Expected IBAN length per supported country code.
COUNTRY_LENGTHS: Mapping[str, int] = MappingProxyType(
    {
        "AT": 20,
        "BE": 16,
        "CZ": 24,
        "DE": 22,
        "DK": 18,
        "FR": 27,
    }
)

MIN_IBAN_LENGTH = 4
FIRST_SEGMENT_LENGTH = 9
SEGMENT_LENGTH = 7

_DIGITS = "0123456789"
_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


class InvalidInputError(ValueError):
    """Raised when a candidate IBAN cannot be checked at all."""


def _require_candidate(iban: Any) -> str:
    if not isinstance(iban, str):
        raise InvalidInputError(f"IBAN must be a string, got {type(iban).__name__}.")
    if len(iban) < MIN_IBAN_LENGTH:
        raise InvalidInputError(
            f"IBAN too short (must have at least {MIN_IBAN_LENGTH} characters, got {len(iban)})."
        )
    return iban


def check_length(iban: str, country_lengths: Mapping[str, int] = COUNTRY_LENGTHS) -> bool:
    """Return True if the country code is known and the length matches it.

    The country code is matched case-sensitively against the table.
    """
    iban = _require_candidate(iban)
    expected_length = country_lengths.get(iban[:2])
    return expected_length is not None and expected_length == len(iban)


def rearrange_iban(iban: str) -> str:
    """Move the country code and check digits to the end."""
    iban = _require_candidate(iban)
    return iban[4:] + iban[:4]


def convert_to_integer(iban: str) -> str:
    """
    Convert letters to numbers (A=10 ... Z=35) and keep digits as they are.

    Lower-case letters are upper-cased first. Any other character is
    dropped from the output without complaint. Only ASCII ``0-9`` and
    ``A-Z`` count, so non-ASCII decimal digits such as Arabic-Indic
    ``٨`` are dropped too instead of being read as digits.
    """
    result = []
    for ch in iban.upper():
        if ch in _DIGITS:
            result.append(ch)
        elif ch in _LETTERS:
            result.append(str(ord(ch) - 55))  # A -> 10, B -> 11, ...
    return "".join(result)


def create_segments(numeric_iban: str) -> list[str]:
    """
    Split a digit string into chunks for the iterative MOD-97 reduction.

    The first chunk holds 9 digits. While at least 9 digits remain, 7-digit
    chunks are cut off. Whatever is left (0 to 8 digits) becomes the last
    chunk, so a string of 9 digits or fewer ends with an empty chunk.
    """
    if any(ch not in _DIGITS for ch in numeric_iban):
        raise InvalidInputError(f"Numeric IBAN must contain digits only: {numeric_iban!r}")

    segments = [numeric_iban[:FIRST_SEGMENT_LENGTH]]
    remaining = numeric_iban[FIRST_SEGMENT_LENGTH:]
    while len(remaining) >= FIRST_SEGMENT_LENGTH:
        segments.append(remaining[:SEGMENT_LENGTH])
        remaining = remaining[SEGMENT_LENGTH:]
    segments.append(remaining)
    return segments


def calculate(segments: list[str]) -> int:
    """
    Reduce the segments modulo 97.

    Each segment after the first is prefixed with the running remainder
    (no zero padding), so the result equals the whole number mod 97.
    """
    if not segments:
        raise InvalidInputError("At least one segment is required.")

    remainder = int(segments[0] or "0") % 97
    for segment in segments[1:]:
        remainder = int(str(remainder) + segment) % 97
    return remainder


def _checksum(iban: str) -> int:
    rearranged = rearrange_iban(iban)
    numeric = convert_to_integer(rearranged)
    segments = create_segments(numeric)
    remainder = calculate(segments)
    logger.debug(
        "MOD-97 of %s: numeric=%s segments=%s remainder=%d", iban, numeric, segments, remainder
    )
    return remainder


def validate(iban: str, country_lengths: Mapping[str, int] = COUNTRY_LENGTHS) -> bool:
    """
    Return True if the IBAN has the right length for its country and a
    MOD-97-10 checksum of 1.

    Raises:
        InvalidInputError: if ``iban`` is not a string or is shorter than
            4 characters.
    """
    if not check_length(iban, country_lengths):
        return False
    return _checksum(iban) == 1


def check_iban(iban: str, country_lengths: Mapping[str, int] = COUNTRY_LENGTHS) -> dict:
    """
    Run the length check and checksum and report which step decided.

    The ``valid`` key always agrees with :func:`validate`. Keys for steps
    that were never reached (``expected_length``, ``remainder``) are left out.
    """
    iban = _require_candidate(iban)
    country = iban[:2]
    verdict: dict[str, Any] = {"valid": False, "iban": iban, "country": country}

    expected_length = country_lengths.get(country)
    if expected_length is None:
        verdict["reason"] = f"Country code {country!r} is not supported."
        return verdict

    verdict["expected_length"] = expected_length
    if len(iban) != expected_length:
        verdict["reason"] = (
            f"{country} IBANs have {expected_length} characters, got {len(iban)}."
        )
        return verdict

    remainder = _checksum(iban)
    verdict["remainder"] = remainder
    verdict["valid"] = remainder == 1
    if verdict["valid"]:
        verdict["reason"] = "Length and checksum are correct."
    else:
        verdict["reason"] = f"Checksum remainder is {remainder}, not 1."
    return verdict


if __name__ == "__main__":
    sample = "DE227902007600279131"
    print("Welcome to the IBAN Checker!")
    print(f"IBAN {sample} is {validate(sample)}")
