"""Immutable avatar configuration.

:class:`AvatarSpec` is the single value every rendering function consumes.
Construction validates and normalizes every field, so an instance that exists
always renders. It is never mutated afterwards; derived values (fill,
initials, font size, markup) are recomputed from it on every call rather than
stored on it.
"""

from dataclasses import dataclass
from typing import Any, Optional, Union

from pyrsistent import pmap
from pyrsistent.typing import PMap

from initials_avatar.title import Title, TitleOmitted, resolve_title
from initials_avatar.types import (
    DEFAULT_COLORS,
    DEFAULT_FONT_SIZE_MULTIPLIER,
    DEFAULT_LIMIT,
    DEFAULT_SHAPE,
    DEFAULT_SIZE,
    DEFAULT_TEXT_OPACITY,
    Shape,
)
from initials_avatar.validation import (
    parse_colors,
    parse_font_size_multiplier,
    parse_limit,
    parse_name,
    parse_shape,
    parse_size,
    parse_text_opacity,
    parse_title,
)


@dataclass(frozen=True)
class AvatarSpec:
    """Validated configuration for one avatar render.

    Fields accept loosely typed values and are parsed on construction, in this
    order: font size multiplier, colors, size, text opacity, limit, shape. The
    first invalid field raises :class:`ConfigurationError`.

    Attributes:
        name (str): Display name, trimmed. May be empty.
        colors (int): Number of hue steps on the color wheel; divides 360.
        limit (int): Maximum number of initials.
        shape (Shape): Background geometry.
        size (int): Width and height of the square canvas in pixels.
        title (Title): Title variant.
        font_size_multiplier (float): Scale applied to the base font size, in [0, 2].
        text_opacity (int | float): Opacity of the initials, in [0, 1].
    """

    name: str
    colors: int = DEFAULT_COLORS
    limit: int = DEFAULT_LIMIT
    shape: Shape = DEFAULT_SHAPE
    size: int = DEFAULT_SIZE
    title: Title = TitleOmitted()
    font_size_multiplier: float = DEFAULT_FONT_SIZE_MULTIPLIER
    text_opacity: Union[int, float] = DEFAULT_TEXT_OPACITY

    def __post_init__(self) -> None:
        parsed = [
            (
                "font_size_multiplier",
                parse_font_size_multiplier(self.font_size_multiplier),
            ),
            ("colors", parse_colors(self.colors)),
            ("size", parse_size(self.size)),
            ("text_opacity", parse_text_opacity(self.text_opacity)),
            ("limit", parse_limit(self.limit)),
            ("shape", parse_shape(self.shape)),
            ("name", parse_name(self.name)),
            ("title", parse_title(self.title)),
        ]
        for field, value in parsed:
            object.__setattr__(self, field, value)

    @property
    def title_text(self) -> Optional[str]:
        """Text of the ``<title>`` element, or ``None`` when it is omitted."""
        return resolve_title(self.title, self.name)

    @property
    def description(self) -> PMap[str, Any]:
        """Persistent map of field name to value, for diagnostics."""
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            description = description.set(field, getattr(self, field))
        return description.set("title_text", self.title_text)


def validate(
    name: Any,
    colors: Any = DEFAULT_COLORS,
    limit: Any = DEFAULT_LIMIT,
    shape: Any = DEFAULT_SHAPE,
    size: Any = DEFAULT_SIZE,
    title: Any = None,
    font_size_multiplier: Any = DEFAULT_FONT_SIZE_MULTIPLIER,
    text_opacity: Any = DEFAULT_TEXT_OPACITY,
) -> AvatarSpec:
    """Validate raw options and build an :class:`AvatarSpec`.

    Raises:
        ConfigurationError: If any option is malformed or out of range.
    """
    return AvatarSpec(
        name=name,
        colors=colors,
        limit=limit,
        shape=shape,
        size=size,
        title=title,
        font_size_multiplier=font_size_multiplier,
        text_opacity=text_opacity,
    )
