"""Font size computation.

The base size shrinks by ``size / 16`` per initial so longer initials still
fit inside the canvas. Extreme multipliers or limits can push the result to
zero or below; that value is returned as-is.
"""

from decimal import ROUND_HALF_UP, Decimal

from initials_avatar.initials import initials
from initials_avatar.spec import AvatarSpec


def round_half_away_from_zero(value: float) -> int:
    # round() would use banker's rounding: 10.5 -> 10
    return int(Decimal(value).to_integral_value(rounding=ROUND_HALF_UP))


def base_font_size(spec: AvatarSpec) -> int:
    size = spec.size
    return size // 2 + size // 16 - (len(initials(spec)) * size) // 16


def font_size(spec: AvatarSpec) -> int:
    """Font size in pixels for the initials of ``spec``."""
    return round_half_away_from_zero(spec.font_size_multiplier * base_font_size(spec))
