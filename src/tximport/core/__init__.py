"""
Core Utilities Package

Shared primitives and ambient concerns used across the importer.

This package provides:
- Exact rational numbers for amounts, values and prices
- Locale and format aware monetary string handling
- The table of accepted date formats
- Configuration management for environment-specific settings
- The ParseError raised for bad import values
"""

from .config import (
    Config,
    Environment,
    ImportConfig,
    get_config,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import (
    CURRENCY_FORMAT_COMMA,
    CURRENCY_FORMAT_LOCALE,
    CURRENCY_FORMAT_PERIOD,
    CURRENCY_FORMATS,
    format_monetary,
    parse_monetary_string,
    strip_currency_symbols,
)
from .dates import DATE_FORMATS, date_format_names, parse_date_string, to_neutral_datetime
from .errors import ParseError
from .numeric import Numeric

__all__ = [
    # Numbers and errors
    "Numeric",
    "ParseError",

    # Monetary strings
    "CURRENCY_FORMATS",
    "CURRENCY_FORMAT_COMMA",
    "CURRENCY_FORMAT_LOCALE",
    "CURRENCY_FORMAT_PERIOD",
    "format_monetary",
    "parse_monetary_string",
    "strip_currency_symbols",

    # Dates
    "DATE_FORMATS",
    "date_format_names",
    "parse_date_string",
    "to_neutral_datetime",

    # Configuration
    "Config",
    "Environment",
    "ImportConfig",
    "get_config",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
]
