"""Identifier formatting — prefixes, canonical forms and record id parsing.

Serial and part numbers are entered without their fixed prefix but are
validated and stored in canonical form (prefix + upper case).
"""

import re

from fieldreports.domain.exceptions import MalformedIdentifierError

SERIAL_PREFIX = "TM-"
PART_PREFIX = "NF-"

SERIAL_NUMBER_PATTERN = re.compile(r"^TM-[0-9]{6}$")
PART_NUMBER_PATTERN = re.compile(r"^NF-[A-Z0-9]{8}$")

_REPORT_ID_PATTERN = re.compile(r"^[0-9]+$")


def strip_prefix(value: str, prefix: str) -> str:
    """Return ``value`` without a literal leading ``prefix``, if present."""
    if value.startswith(prefix):
        return value[len(prefix):]
    return value


def apply_prefix(value: str, prefix: str) -> str:
    """Return ``prefix + value``; an empty value stays empty."""
    if not value:
        return ""
    return prefix + value


def _canonical(raw: str | None, prefix: str) -> str:
    if not isinstance(raw, str):
        return ""
    value = raw.strip().upper()
    return apply_prefix(strip_prefix(value, prefix), prefix)


def canonical_serial_number(raw: str | None) -> str:
    """Normalize user input to ``TM-######`` form (no format check)."""
    return _canonical(raw, SERIAL_PREFIX)


def canonical_part_number(raw: str | None) -> str | None:
    """Normalize user input to ``NF-XXXXXXXX`` form; blank input means no part."""
    value = _canonical(raw, PART_PREFIX)
    return value or None


def display_identifier(value: str | None, prefix: str) -> str:
    """Prefix-stripped form shown in entry fields."""
    if not value:
        return ""
    return strip_prefix(value, prefix)


def is_valid_serial_number(value: str) -> bool:
    return bool(SERIAL_NUMBER_PATTERN.match(value))


def is_valid_part_number(value: str) -> bool:
    return bool(PART_NUMBER_PATTERN.match(value))


def parse_report_id(raw: str) -> int:
    """Parse a path parameter into a report id.

    Raises:
        MalformedIdentifierError: when ``raw`` is not a positive decimal integer.
    """
    candidate = raw.strip() if isinstance(raw, str) else ""
    if not _REPORT_ID_PATTERN.match(candidate):
        raise MalformedIdentifierError(str(raw))
    value = int(candidate)
    if value < 1:
        raise MalformedIdentifierError(str(raw))
    return value
