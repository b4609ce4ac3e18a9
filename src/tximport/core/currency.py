#!/usr/bin/env python3
"""
Monetary String Conventions

Parsing and formatting of user supplied monetary strings for the import
system. All values are produced as exact rationals (see ``Numeric``).

Currency Formats:
- 0: Locale conventions (decimal point and grouping from the process locale)
- 1: Period decimal, comma grouping ("1,234.56")
- 2: Comma decimal, period grouping ("1.234,56")

Key Principles:
- Never use floating-point arithmetic for currency values
- Strip currency symbols before looking at the number
- An empty string is zero, a string without digits is an error
- Group separators must separate groups of exactly three digits
"""

import locale
import re
import unicodedata
from dataclasses import dataclass
from fractions import Fraction

from .numeric import Numeric

CURRENCY_FORMAT_LOCALE = 0
CURRENCY_FORMAT_PERIOD = 1
CURRENCY_FORMAT_COMMA = 2

CURRENCY_FORMATS = (CURRENCY_FORMAT_LOCALE, CURRENCY_FORMAT_PERIOD, CURRENCY_FORMAT_COMMA)

NO_DIGITS_MESSAGE = "Value doesn't appear to contain a valid number."
BAD_FORMAT_MESSAGE = "Value can't be parsed into a number using the selected currency format."

_DIGIT_RE = re.compile(r"[0-9]")


@dataclass(frozen=True)
class NumberConvention:
    """Decimal point and digit grouping characters for one currency format."""

    decimal_point: str
    group_separator: str

    def number_pattern(self) -> re.Pattern:
        """
        Build the regex matching an unsigned number in this convention.

        Accepts "1234", "1234.5", ".5", "1,234" and "1,234.56" style input
        (shown for the period convention).
        """
        dec = re.escape(self.decimal_point)
        grp = re.escape(self.group_separator)
        return re.compile(
            rf"(?:(?P<grouped>[0-9]{{1,3}}(?:{grp}[0-9]{{3}})+)|(?P<plain>[0-9]+))?"
            rf"(?:{dec}(?P<fraction>[0-9]*))?"
        )


PERIOD_CONVENTION = NumberConvention(decimal_point=".", group_separator=",")
COMMA_CONVENTION = NumberConvention(decimal_point=",", group_separator=".")


def locale_convention() -> NumberConvention:
    """
    Get the number convention of the current process locale.

    Prefers the monetary conventions, falls back to the numeric ones and
    finally to the period convention when the locale defines neither.
    """
    conv = locale.localeconv()
    decimal_point = conv.get("mon_decimal_point") or conv.get("decimal_point") or "."
    group_separator = conv.get("mon_thousands_sep") or conv.get("thousands_sep") or ""
    if not group_separator or group_separator == decimal_point:
        group_separator = "," if decimal_point != "," else "."
    return NumberConvention(decimal_point=decimal_point, group_separator=group_separator)


def convention_for(currency_format: int) -> NumberConvention:
    """
    Get the number convention for a currency format selector.

    Raises:
        ValueError: If currency_format is not one of CURRENCY_FORMATS
    """
    if currency_format == CURRENCY_FORMAT_LOCALE:
        return locale_convention()
    if currency_format == CURRENCY_FORMAT_PERIOD:
        return PERIOD_CONVENTION
    if currency_format == CURRENCY_FORMAT_COMMA:
        return COMMA_CONVENTION
    raise ValueError(f"Unknown currency format: {currency_format}")


def strip_currency_symbols(text: str) -> str:
    """Remove all Unicode currency symbols ($, €, £, ...) from text."""
    return "".join(ch for ch in text if unicodedata.category(ch) != "Sc")


def _split_sign(text: str) -> tuple[bool, str] | None:
    """Separate sign markers from the number. Returns None on conflicting signs."""
    negative = False
    if text.startswith("(") and text.endswith(")"):
        negative = True
        text = text[1:-1].strip()
    if text[:1] in ("-", "+"):
        if negative and text[0] == "-":
            return None
        negative = negative or text[0] == "-"
        text = text[1:].strip()
    if text.endswith("-"):
        if negative:
            return None
        negative = True
        text = text[:-1].strip()
    return negative, text


def parse_amount(text: str, convention: NumberConvention) -> Numeric | None:
    """
    Parse a symbol free monetary string with a number convention.

    Args:
        text: String to parse, without currency symbols
        convention: Decimal point and grouping characters to use

    Returns:
        Exact Numeric, or None if the string doesn't fit the convention
    """
    signed = _split_sign(text.strip())
    if signed is None:
        return None
    negative, body = signed

    match = convention.number_pattern().fullmatch(body)
    if not match:
        return None

    whole = match.group("grouped") or match.group("plain") or ""
    whole = whole.replace(convention.group_separator, "")
    fraction = match.group("fraction") or ""
    if not whole and not fraction:
        return None

    value = Fraction(int(whole or "0"))
    if fraction:
        value += Fraction(int(fraction), 10 ** len(fraction))
    return Numeric(-value if negative else value)


def parse_monetary_string(text: str, currency_format: int) -> Numeric:
    """
    Parse a user supplied monetary string into an exact value.

    Args:
        text: Raw cell content like "$1,234.56", "-12,50 €" or "(3.00)"
        currency_format: One of CURRENCY_FORMATS

    Returns:
        Parsed Numeric; zero for an empty string

    Raises:
        ValueError: If text contains no digits or doesn't fit the format

    Examples:
        parse_monetary_string("$1,234.56", 1) -> Numeric(1234.56)
        parse_monetary_string("1.234,56", 2) -> Numeric(1234.56)
        parse_monetary_string("", 1) -> Numeric(0)
    """
    if not text:
        return Numeric.zero()

    if not _DIGIT_RE.search(text):
        raise ValueError(NO_DIGITS_MESSAGE)

    value = parse_amount(strip_currency_symbols(text), convention_for(currency_format))
    if value is None:
        raise ValueError(BAD_FORMAT_MESSAGE)
    return value


def format_monetary(value: Numeric, currency_format: int) -> str:
    """
    Format a value in the string form of a currency format.

    No grouping is applied so the result always parses back with
    ``parse_monetary_string`` under the same format.

    Raises:
        ValueError: If value has no finite decimal representation
    """
    convention = convention_for(currency_format)
    text = format(value.to_decimal(), "f")
    return text.replace(".", convention.decimal_point)
