"""Number, currency, scale, and percentage formatting utilities.

Every formatter is total: invalid input (unparseable text, empty string,
None) returns a fixed default string instead of raising.
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import Optional

from numfmt.config import DISPLAY, SCALES
from numfmt.data.parsing import NumericInput, clamp_digits, parse_number

# Wide enough for any float at max_digits fraction digits.
_CONTEXT = Context(prec=500)


def _round(value: float, digits: int) -> Decimal:
    """Round the exact binary value of a float, ties away from zero."""
    return Decimal(value).quantize(
        Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP, context=_CONTEXT
    )


def _group(amount: Decimal, digits: int) -> str:
    return f"{amount:,.{digits}f}"


def _trim_fraction(text: str, keep: int) -> str:
    """Drop trailing fraction zeros, keeping at least `keep` digits."""
    if "." not in text:
        return text
    whole, fraction = text.split(".")
    fraction = fraction.rstrip("0").ljust(keep, "0")
    return f"{whole}.{fraction}" if fraction else whole


def _plain(value: float) -> str:
    """Shortest round-trip text of a float, never in exponent notation."""
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _infinity(value: float, symbol: str = "") -> str:
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{DISPLAY.infinity}"


def _currency_zero() -> str:
    return f"{DISPLAY.currency_symbol}{Decimal(0):.{DISPLAY.currency_digits}f}"


def format_number(
    value: NumericInput, min_precision: int = 0, max_precision: int = 4
) -> str:
    """Format a number with comma thousands separators.

    Args:
        value: Number or numeric text to format.
        min_precision: Minimum number of fraction digits (zero padded).
        max_precision: Maximum number of fraction digits (rounded).

    Returns:
        Formatted number (e.g., "1,234.5"), or "0" for invalid input.
    """
    parsed = parse_number(value)
    if parsed is None:
        return "0"
    if math.isinf(parsed):
        return _infinity(parsed)

    min_digits = clamp_digits(min_precision)
    max_digits = clamp_digits(max_precision, lower=min_digits)
    text = _group(_round(parsed, max_digits), max_digits)
    return _trim_fraction(text, min_digits)


def format_usd(value: NumericInput) -> str:
    """Format a number as USD currency.

    Args:
        value: Number or numeric text to format.

    Returns:
        Currency string with two fraction digits (e.g., "-$1,234.50"),
        or "$0.00" for invalid input.
    """
    parsed = parse_number(value)
    if parsed is None:
        return _currency_zero()
    if math.isinf(parsed):
        return _infinity(parsed, DISPLAY.currency_symbol)

    digits = DISPLAY.currency_digits
    amount = _round(parsed, digits)
    sign = "-" if amount.is_signed() else ""
    return f"{sign}{DISPLAY.currency_symbol}{_group(abs(amount), digits)}"


def format_scale(value: NumericInput, use_currency: bool = False) -> str:
    """Format a number abbreviated to its magnitude (K/M/B/T).

    The scale is chosen by the length of the floored value's text, sign
    included, so -123 already counts as four characters and renders in K.

    Args:
        value: Number or numeric text to format.
        use_currency: Prefix the result with the currency symbol.

    Returns:
        Abbreviated string (e.g., "1.2T", "$123.5K", "< 0.0001"), or
        "0" / "$0.00" for invalid input.
    """
    parsed = parse_number(value)
    symbol = DISPLAY.currency_symbol if use_currency else ""
    if parsed is None:
        return _currency_zero() if use_currency else "0"
    if math.isinf(parsed):
        return f"{symbol}{_infinity(parsed)}"

    length = len(str(math.floor(parsed)))
    for scale in SCALES:
        if length >= scale.min_length:
            return f"{symbol}{_round(parsed / scale.divisor, 1):.1f}{scale.suffix}"

    if 0 < parsed < DISPLAY.near_zero:
        return f"< {symbol}{DISPLAY.near_zero_text}"
    if parsed == 0:
        return _currency_zero() if use_currency else "0"
    return f"{symbol}{_round(parsed, 2):.2f}"


def format_percent(
    value: NumericInput, precision: int = 2, fallback: str = "-"
) -> str:
    """Format a number as a percentage.

    The value is taken as already being in percent units (12.5 -> "12.5%").
    Magnitudes below 0.0001 render as "< 0.0001%" regardless of sign.

    Args:
        value: Number or numeric text to format.
        precision: Fraction digits to round to.
        fallback: Returned for zero or invalid input.

    Returns:
        Formatted percentage (e.g., "0.12%", "1,235%"), or fallback.
    """
    parsed = parse_number(value)
    if not parsed:
        return fallback
    if parsed == math.inf:
        return "0%"
    if parsed == -math.inf:
        return f"{_infinity(parsed)}%"
    if 0 < abs(parsed) < DISPLAY.near_zero:
        return f"< {DISPLAY.near_zero_text}%"

    percent = float(_round(parsed, clamp_digits(precision)))
    if percent == 0:
        return "0%"
    if percent > 100:
        return f"{_group(_round(parsed, 0), 0)}%"
    return f"{_plain(percent)}%"


def trim_address(address: Optional[str], prefix_len: int = 12) -> str:
    """Shorten a long address to its prefix and last four characters.

    Args:
        address: Address text (e.g., a hex wallet address).
        prefix_len: Number of leading characters to keep.

    Returns:
        The address unchanged if 16 characters or shorter, otherwise
        "<prefix>...<last 4>". None returns "".
    """
    if address is None:
        return ""
    if len(address) <= 16:
        return address
    return f"{address[:prefix_len]}...{address[-4:]}"
