"""Parse-and-validate functions for avatar options.

Each ``parse_*`` function takes a loosely typed value, returns it in its
canonical type, or raises :class:`ConfigurationError`.
:class:`~initials_avatar.spec.AvatarSpec` runs them in a fixed order on
construction and stops at the first failure, so callers see exactly one error.
"""

import logging
import numbers
from decimal import Decimal
from typing import Any, Union

from initials_avatar.errors import ConfigurationError
from initials_avatar.title import Title, TitleFromName, TitleOmitted, TitleText
from initials_avatar.types import HUE_WHEEL, Shape

logger = logging.getLogger(__name__)


def _coerce_int(value: Any) -> int:
    # bool is an int subclass but never a meaningful size or count
    if isinstance(value, bool):
        raise ValueError(f"Not an integer: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Not an integer: {value!r}")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(f"Not an integer: {value!r}")


def _coerce_float(value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return float(value.strip())
    raise ValueError(f"Not a number: {value!r}")


def _reject(option: str, value: Any, message: str) -> ConfigurationError:
    logger.debug("Rejected %s=%r: %s", option, value, message)
    return ConfigurationError(message)


def parse_name(value: Any) -> str:
    """Return ``value`` as text with surrounding whitespace removed."""
    if value is None:
        return ""
    return str(value).strip()


def parse_font_size_multiplier(value: Any) -> float:
    message = f"Font size multiplier must be a number between 0 and 2, was: {value}"
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        raise _reject("font_size_multiplier", value, message)
    try:
        multiplier = float(value)
    except ValueError:
        raise _reject("font_size_multiplier", value, message) from None
    if not 0 <= multiplier <= 2:
        raise _reject("font_size_multiplier", value, message)
    return multiplier


def parse_colors(value: Any) -> int:
    """Return the number of hue steps; it must be a positive divisor of 360."""
    message = "Colors must be a divisor of 360 e.g. 24 but not 16."
    try:
        colors = _coerce_int(value)
    except ValueError:
        raise _reject("colors", value, message) from None
    if colors <= 0 or HUE_WHEEL % colors != 0:
        raise _reject("colors", value, message)
    return colors


def parse_size(value: Any) -> int:
    message = "Size is not a positive integer."
    try:
        size = _coerce_int(value)
    except ValueError:
        raise _reject("size", value, message) from None
    if size <= 0:
        raise _reject("size", value, message)
    return size


def parse_text_opacity(value: Any) -> Union[int, float]:
    """Return the opacity, keeping an ``int`` as ``int`` so ``1`` renders as ``1``
    and ``1.0`` as ``1.0``. Numeric strings become ``float``.
    """
    message = "Text opacity should be a value from 0 to 1."
    try:
        opacity = _coerce_float(value)
    except ValueError:
        raise _reject("text_opacity", value, message) from None
    if not 0.0 <= opacity <= 1.0:
        raise _reject("text_opacity", value, message)
    if isinstance(value, int):
        return value
    return opacity


def parse_limit(value: Any) -> int:
    message = "Limit is not a positive integer."
    try:
        limit = _coerce_int(value)
    except ValueError:
        raise _reject("limit", value, message) from None
    if limit <= 0:
        raise _reject("limit", value, message)
    return limit


def parse_shape(value: Any) -> Shape:
    """Accept a :class:`Shape` or its string value (``"circle"`` / ``"rect"``)."""
    if isinstance(value, Shape):
        return value
    if isinstance(value, str):
        try:
            return Shape(value.strip().lower())
        except ValueError:
            pass
    choices = ", ".join(shape.value for shape in Shape)
    raise _reject("shape", value, f"Shape must be one of: {choices}, was: {value}")


def parse_title(value: Any) -> Title:
    """Map the loose title option onto a title variant.

    ``True`` derives the title from the name, ``False`` and ``None`` omit it,
    a title variant passes through, and anything else becomes trimmed text.
    """
    if value is True:
        return TitleFromName()
    if value is False or value is None:
        return TitleOmitted()
    if isinstance(value, (TitleOmitted, TitleFromName, TitleText)):
        return value
    return TitleText(str(value).strip())

