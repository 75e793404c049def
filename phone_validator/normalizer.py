"""Local normalization and junk filtering for North-American numbers."""

import re
from typing import Any

from .domain.models import PhoneInput
from .exceptions import BadLengthError, FakePatternError

NATIONAL_LENGTH = 10
SUBSCRIBER_LENGTH = 7

_NON_DIGITS = re.compile(r"\D")
_REPEATED = re.compile(r"^(\d)\1{6,}$")


def strip_digits(raw: Any) -> str:
    """Return ``raw`` with every non-digit character removed."""
    if raw is None:
        return ""
    return _NON_DIGITS.sub("", str(raw))


def looks_fake(digits: str) -> bool:
    """Check the subscriber part for ``xxx0000`` or seven repeated digits."""
    if len(digits) < SUBSCRIBER_LENGTH:
        return False
    local = digits[-SUBSCRIBER_LENGTH:]
    return local.endswith("0000") or bool(_REPEATED.match(local))


def normalize(raw: Any, *, strict_length: bool = True) -> PhoneInput:
    """Normalize user input into a :class:`PhoneInput`.

    Raises :class:`BadLengthError` when the strict policy is active and the
    number does not have exactly ten digits, and :class:`FakePatternError`
    for obviously fabricated subscriber numbers.

    >>> normalize("(202) 555-0143").e164
    '+12025550143'
    """
    digits = strip_digits(raw)
    if strict_length:
        if len(digits) != NATIONAL_LENGTH:
            raise BadLengthError(digits)
    elif len(digits) == NATIONAL_LENGTH + 1 and digits.startswith("1"):
        digits = digits[1:]

    if looks_fake(digits):
        raise FakePatternError(digits)

    return PhoneInput(raw="" if raw is None else str(raw), digits=digits)
