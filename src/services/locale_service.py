"""Centralized locale service for currency, percent and month-label formatting.

Single source of truth for all display formatting of dashboard figures.
Uses babel library.

Configuration:
    LOCALE env var (default: en_US) - number grouping, month names
    CURRENCY env var (default: PHP) - currency symbol for format_amount

Example:
    >>> from src.services.locale_service import format_currency, format_signed_percent
    >>> format_currency(Decimal("1234.5"))
    '1,234.50'
    >>> format_signed_percent(Decimal("12.345"))
    '+12.3%'
"""

import logging
import os
from decimal import ROUND_HALF_UP, Decimal

from babel import Locale, UnknownLocaleError
from babel.dates import get_month_names
from babel.numbers import (
    format_currency as babel_format_currency,
)
from babel.numbers import (
    format_decimal as babel_format_decimal,
)
from babel.numbers import (
    get_currency_symbol as babel_get_currency_symbol,
)
from babel.numbers import (
    is_currency,
)

logger = logging.getLogger(__name__)

# Defaults if env vars are invalid or missing
DEFAULT_LOCALE = "en_US"
DEFAULT_CURRENCY = "PHP"

CENT = Decimal("0.01")
TENTH = Decimal("0.1")

# Fixed two decimals with thousands grouping ("1,234.56" in en_US)
AMOUNT_PATTERN = "#,##0.00"
PERCENT_PATTERN = "0.0"


def _get_locale() -> str:
    """Get locale from environment with validation and fallback.

    Returns:
        Valid locale string (e.g., 'en_US')
    """
    locale_str = os.getenv("LOCALE", DEFAULT_LOCALE)
    try:
        # Validate locale exists in babel
        Locale.parse(locale_str)
        return locale_str
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Invalid LOCALE '{locale_str}': {e}. Falling back to '{DEFAULT_LOCALE}'")
        return DEFAULT_LOCALE


def _get_currency() -> str:
    """Get ISO 4217 currency code from environment with validation and fallback."""
    currency = os.getenv("CURRENCY", DEFAULT_CURRENCY).upper()
    if not is_currency(currency):
        logger.warning(f"Invalid CURRENCY '{currency}'. Falling back to '{DEFAULT_CURRENCY}'")
        return DEFAULT_CURRENCY
    return currency


# Module-level constants (computed once at import)
LOCALE = _get_locale()
CURRENCY = _get_currency()


def _to_decimal(amount: Decimal | int | float) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    return Decimal(str(amount))


def get_currency_symbol(currency: str | None = None, locale: str | None = None) -> str:
    """Get currency symbol for the locale.

    Returns:
        Currency symbol (e.g., '₱')
    """
    return babel_get_currency_symbol(currency or CURRENCY, locale=locale or LOCALE)


def format_currency(amount: Decimal | int | float, locale: str | None = None) -> str:
    """Format amount with exactly two decimals and thousands grouping, no symbol.

    Halves round away from zero.

    Example:
        >>> format_currency(Decimal("1234.565"))
        '1,234.57'
        >>> format_currency(0)
        '0.00'
    """
    value = _to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return babel_format_decimal(value, format=AMOUNT_PATTERN, locale=locale or LOCALE)


def format_amount(
    amount: Decimal | int | float,
    include_symbol: bool = True,
    currency: str | None = None,
    locale: str | None = None,
) -> str:
    """Format monetary amount according to locale.

    Args:
        amount: Numeric amount to format
        include_symbol: Whether to include currency symbol (default True)
        currency: Currency code override (default: CURRENCY)
        locale: Locale override (default: LOCALE)

    Returns:
        Formatted currency string (e.g., '₱1,234.56')

    Example:
        >>> format_amount(1234.56)
        '₱1,234.56'
        >>> format_amount(1234.56, include_symbol=False)
        '1,234.56'
    """
    if not include_symbol:
        return format_currency(amount, locale=locale)
    value = _to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    return babel_format_currency(
        value,
        currency or CURRENCY,
        format=f"¤{AMOUNT_PATTERN}",
        locale=locale or LOCALE,
        currency_digits=False,
    )


def round_percent(value: Decimal | int | float) -> Decimal:
    """Round a percent change to the one decimal shown on the dashboard.

    Halves round away from zero; values that round to zero lose their sign.
    """
    rounded = _to_decimal(value).quantize(TENTH, rounding=ROUND_HALF_UP)
    return abs(rounded) if rounded == 0 else rounded


def format_signed_percent(value: Decimal | int | float, locale: str | None = None) -> str:
    """Format percent change with one decimal and an explicit '+' when positive.

    Example:
        >>> format_signed_percent(Decimal("12.34"))
        '+12.3%'
        >>> format_signed_percent(-4)
        '-4.0%'
        >>> format_signed_percent(0)
        '0.0%'
    """
    rounded = round_percent(value)
    sign = "+" if rounded > 0 else ""
    text = babel_format_decimal(rounded, format=PERCENT_PATTERN, locale=locale or LOCALE)
    return f"{sign}{text}%"


def get_month_labels(locale: str | None = None) -> list[str]:
    """Get abbreviated month names January..December for chart axes.

    Returns:
        12 labels (e.g., ['Jan', 'Feb', ..., 'Dec'] for en_US)
    """
    names = get_month_names("abbreviated", locale=locale or LOCALE)
    return [names[month] for month in range(1, 13)]


__all__ = [
    "LOCALE",
    "CURRENCY",
    "get_currency_symbol",
    "format_currency",
    "format_amount",
    "round_percent",
    "format_signed_percent",
    "get_month_labels",
]
