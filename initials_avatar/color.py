"""Deterministic fill colors.

A name maps to a hue on a wheel split into ``spec.colors`` equal steps. Every
character contributes ``ord(char) * hue_step`` degrees, so neighboring
characters (``A`` and ``B``) land exactly one step apart instead of colliding.
"""

from PIL import ImageColor
from pyrsistent import pvector
from pyrsistent.typing import PVector

from initials_avatar.initials import display_name
from initials_avatar.spec import AvatarSpec
from initials_avatar.types import HUE_WHEEL, RGB

NEUTRAL_FILL = "hsl(0, 0%, 67%)"
SATURATION = 40
LIGHTNESS = 40


def hue_to_fill(hue: int) -> str:
    return f"hsl({hue}, {SATURATION}%, {LIGHTNESS}%)"


def hue(spec: AvatarSpec) -> int:
    """Position of the name on the hue wheel, in degrees."""
    hue_step = HUE_WHEEL // spec.colors
    char_sum = sum(ord(char) * hue_step for char in display_name(spec))
    return char_sum % HUE_WHEEL


def fill(spec: AvatarSpec) -> str:
    """CSS ``hsl()`` background color for ``spec``.

    Empty names get a fixed neutral gray regardless of ``spec.colors``.
    """
    if not spec.name:
        return NEUTRAL_FILL
    return hue_to_fill(hue(spec))


def fill_rgb(spec: AvatarSpec) -> RGB:
    """:func:`fill` converted to an ``(r, g, b)`` tuple."""
    r, g, b = ImageColor.getrgb(fill(spec))[:3]
    return r, g, b


def palette(colors: int) -> PVector[str]:
    """All fills a wheel of ``colors`` steps can produce, in hue order."""
    hue_step = HUE_WHEEL // colors
    return pvector(hue_to_fill(step * hue_step) for step in range(colors))
