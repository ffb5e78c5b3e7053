"""Display configuration for numfmt.

Defines the fixed en-US conventions (currency symbol, near-zero
threshold) and the ordered magnitude scales used by the formatters. These
are module constants, not caller parameters.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Scale:
    """One magnitude abbreviation.

    Attributes:
        suffix: Letter appended after the scaled value (e.g., "K").
        power: Power of ten the value is divided by. The scale applies
            once the floored value's text is at least power + 1 long.
    """

    suffix: str
    power: int

    def __post_init__(self):
        if not self.suffix:
            raise ValueError("suffix must be non-empty")
        if self.power < 1:
            raise ValueError(f"power must be >= 1, got {self.power}")

    @property
    def min_length(self) -> int:
        return self.power + 1

    @property
    def divisor(self) -> int:
        return 10 ** self.power


@dataclass(frozen=True)
class DisplayConfig:
    """Locale conventions shared by every formatter.

    Attributes:
        currency_symbol: Symbol placed before currency amounts.
        currency_digits: Fraction digits for currency amounts.
        near_zero: Magnitudes below this render as "< near_zero".
        infinity: Glyph used for infinite values.
        max_digits: Upper bound for any fraction-digit argument.
    """

    currency_symbol: str = "$"
    currency_digits: int = 2
    near_zero: float = 0.0001
    infinity: str = "∞"
    max_digits: int = 100

    def __post_init__(self):
        if not 0 <= self.currency_digits <= self.max_digits:
            raise ValueError(
                f"currency_digits must be 0-{self.max_digits}, got {self.currency_digits}"
            )
        if not 0 < self.near_zero < 1:
            raise ValueError(f"near_zero must be between 0 and 1, got {self.near_zero}")

    @property
    def near_zero_text(self) -> str:
        return f"{self.near_zero:f}".rstrip("0")


DISPLAY = DisplayConfig()

# Largest first; the first scale whose min_length fits wins.
SCALES: Tuple[Scale, ...] = (
    Scale("T", 12),
    Scale("B", 9),
    Scale("M", 6),
    Scale("K", 3),
)
