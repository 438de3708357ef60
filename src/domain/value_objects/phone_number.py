"""
Phone number helpers for the identification step.

The form accepts French mobile numbers typed as ten national digits. The
formatter keeps the input readable while typing ("06 12 34 56 78"), the
validator gates the submit button, and the CRM stores numbers in
international form, so the gateway rewrites the trunk prefix before
searching.
"""

import re

NATIONAL_NUMBER_LENGTH = 10

_NON_DIGITS = re.compile(r"\D")
_WHITESPACE = re.compile(r"\s")
_DIGIT_PAIRS = re.compile(r"(\d{2})(?=\d)")


def format_phone_number(value: str) -> str:
    """Keep at most ten digits and group them in pairs."""
    digits = _NON_DIGITS.sub("", value or "")[:NATIONAL_NUMBER_LENGTH]
    return _DIGIT_PAIRS.sub(r"\1 ", digits).strip()


def is_valid_phone_number(value: str) -> bool:
    """A phone number is valid when it holds exactly ten digits."""
    return len(_NON_DIGITS.sub("", value or "")) == NATIONAL_NUMBER_LENGTH


def to_international(value: str, country_code: str = "33") -> str:
    """Strip whitespace and rewrite a leading trunk "0" to "+<country_code>"."""
    cleaned = _WHITESPACE.sub("", value or "")
    if cleaned.startswith("0") and not cleaned.startswith("00"):
        return f"+{country_code}{cleaned[1:]}"
    if cleaned.startswith("00"):
        return f"+{cleaned[2:]}"
    return cleaned
