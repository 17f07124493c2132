"""Rupiah text parsing and formatting for the calculator's money fields."""

import logging
import re
from decimal import Decimal, ROUND_HALF_UP

logger = logging.getLogger(__name__)

# id-ID currency format: "Rp" + no-break space, "." groups thousands
CURRENCY_SYMBOL = "Rp"
SYMBOL_SEPARATOR = "\u00a0"
GROUP_SEPARATOR = "."

_NON_NUMERIC = re.compile(r"[^0-9-]+")


def parse_amount(text: str) -> int:
    """Extract an integer amount from free-form text.

    Everything except digits and minus signs is discarded, so grouping
    separators and the currency symbol disappear. Text that leaves nothing
    parseable behind (empty, "-", "1-2") counts as 0.
    """
    cleaned = _NON_NUMERIC.sub("", text or "")
    if not cleaned:
        return 0

    try:
        return int(cleaned)
    except ValueError:
        logger.debug("Unparseable amount %r, using 0", text)
        return 0


def format_amount(amount: float) -> str:
    """Format an amount as Rupiah with no decimal places.

    Fractions round half away from zero:
    1500 -> "Rp 1.500", -2500000 -> "-Rp 2.500.000".
    """
    if isinstance(amount, int):
        rounded = amount
    else:
        # to_integral_value is exact at any length, unlike quantize
        rounded = int(Decimal(str(amount)).to_integral_value(rounding=ROUND_HALF_UP))
    sign = "-" if rounded < 0 else ""
    grouped = f"{abs(rounded):,}".replace(",", GROUP_SEPARATOR)
    return f"{sign}{CURRENCY_SYMBOL}{SYMBOL_SEPARATOR}{grouped}"


def normalize_input(raw: str) -> str:
    """Canonical display text for whatever was typed into a money field."""
    return format_amount(parse_amount(raw))
