"""Numeric input parsing for numfmt formatters.

Formatters accept native numbers, numpy scalars, or text. Everything is
reduced to a float here, once, at the call boundary. Input that cannot be
read as a number comes back as None and each formatter substitutes its own
default text.
"""

import logging
import math
import re
from decimal import Decimal
from typing import Optional, Union

import numpy as np

from numfmt.config import DISPLAY

logger = logging.getLogger(__name__)

NumericInput = Union[int, float, Decimal, str, np.generic, None]

# Longest leading decimal literal, as a browser's parseFloat reads it.
_NUMERIC_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def _parse_text(text: str) -> Optional[float]:
    match = _NUMERIC_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1))


def parse_number(value: NumericInput) -> Optional[float]:
    """Parse a numeric input to a float.

    Text is read up to the end of its leading numeric literal, so "12px"
    parses as 12.0 and "px12" does not parse.

    Args:
        value: Number, numpy scalar, Decimal, or text.

    Returns:
        The parsed float (possibly infinite), or None if the input is
        missing, empty, boolean, NaN, or has no numeric prefix.
    """
    if isinstance(value, np.generic):
        value = value.item()

    if value is None or isinstance(value, bool):
        parsed = None
    elif isinstance(value, Decimal) and value.is_nan():
        # float() raises on signaling NaN
        parsed = None
    elif isinstance(value, (int, float, Decimal)):
        try:
            parsed = float(value)
        except OverflowError:
            parsed = math.inf if value > 0 else -math.inf
    elif isinstance(value, str):
        parsed = _parse_text(value)
    else:
        parsed = _parse_text(str(value))

    if parsed is None or math.isnan(parsed):
        logger.debug("Unparseable numeric input %r", value)
        return None
    return parsed


def clamp_digits(digits: int, lower: int = 0, upper: int = DISPLAY.max_digits) -> int:
    """Clamp a fraction-digit count into [lower, upper].

    Non-integral counts are truncated; counts that are not numbers at all
    fall back to lower.
    """
    try:
        digits = int(digits)
    except (TypeError, ValueError, OverflowError):
        logger.debug("Invalid digit count %r, using %d", digits, lower)
        return lower
    return max(lower, min(upper, digits))
