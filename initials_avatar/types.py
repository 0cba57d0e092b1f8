"""Common enumerations, aliases and default option values.

The ``DEFAULT_*`` constants are the option defaults used by
:class:`initials_avatar.avatar.Avatar` and
:class:`initials_avatar.avatar.AvatarOptions`.
"""

from enum import StrEnum, auto
from typing import Tuple


HUE_WHEEL = 360

DEFAULT_COLORS = 12
DEFAULT_LIMIT = 3
DEFAULT_SIZE = 32
DEFAULT_FONT_SIZE_MULTIPLIER = 1.0
DEFAULT_TEXT_OPACITY = 0.75

PLACEHOLDER_NAME = "?"

RGB = Tuple[int, int, int]


class Shape(StrEnum):
    """Background geometry behind the initials."""

    CIRCLE = auto()
    RECT = auto()


DEFAULT_SHAPE = Shape.CIRCLE
