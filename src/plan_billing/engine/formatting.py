"""
Amount formatting for bill text.

"raw" renders the float product exactly as Python prints it (343.0, 2557.5).
"fixed" goes through Decimal and rounds half-up to whole paise.
"""
from decimal import ROUND_HALF_UP, Decimal

FIXED_PLACES = 2


def to_decimal(value) -> Decimal:
    """Convert to Decimal (float via str to avoid binary artifacts)."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def format_amount(amount: float, style: str = "raw") -> str:
    if style == "raw":
        return str(float(amount))
    if style == "fixed":
        quantizer = Decimal(10) ** -FIXED_PLACES
        return str(to_decimal(amount).quantize(quantizer, rounding=ROUND_HALF_UP))
    raise ValueError(f"Unknown amount style: {style!r}")
