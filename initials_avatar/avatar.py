"""Public facade.

Usage::

    avatar = Avatar("Ada Lovelace", shape="rect", size=64)
    avatar.render()      # SVG document
    avatar.fill()        # "hsl(..., 40%, 40%)"
    avatar.initials()    # "AL"

Options are validated once, in the constructor; an ``Avatar`` that exists
always renders. Nothing derived from the name is escaped in the output.
"""

import logging
from dataclasses import asdict, dataclass
from typing import Any

from initials_avatar import color, initials, layout
from initials_avatar.renderer import svg as svg_renderer
from initials_avatar.spec import AvatarSpec, validate
from initials_avatar.types import (
    DEFAULT_COLORS,
    DEFAULT_FONT_SIZE_MULTIPLIER,
    DEFAULT_LIMIT,
    DEFAULT_SHAPE,
    DEFAULT_SIZE,
    DEFAULT_TEXT_OPACITY,
    RGB,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AvatarOptions:
    """Bundle of styling options with their defaults.

    Values are not validated until passed to :meth:`Avatar.from_options`.
    """

    colors: Any = DEFAULT_COLORS
    limit: Any = DEFAULT_LIMIT
    shape: Any = DEFAULT_SHAPE
    size: Any = DEFAULT_SIZE
    title: Any = None
    font_size_multiplier: Any = DEFAULT_FONT_SIZE_MULTIPLIER
    text_opacity: Any = DEFAULT_TEXT_OPACITY


class Avatar:
    """An initials avatar for one display name.

    Args:
        name: Display name; surrounding whitespace is removed.
        colors: Hue steps on the color wheel, must divide 360.
        limit: Maximum number of initials.
        shape: ``"circle"`` or ``"rect"``.
        size: Canvas width and height in pixels.
        title: ``True`` to use the name as title, ``False``/``None`` for no
            title, any other value as explicit title text.
        font_size_multiplier: Font scale in [0, 2].
        text_opacity: Initials opacity in [0, 1].

    Raises:
        ConfigurationError: If any option is invalid.
    """

    __slots__ = ("_spec",)

    def __init__(
        self,
        name: Any,
        *,
        colors: Any = DEFAULT_COLORS,
        limit: Any = DEFAULT_LIMIT,
        shape: Any = DEFAULT_SHAPE,
        size: Any = DEFAULT_SIZE,
        title: Any = None,
        font_size_multiplier: Any = DEFAULT_FONT_SIZE_MULTIPLIER,
        text_opacity: Any = DEFAULT_TEXT_OPACITY,
    ) -> None:
        self._spec = validate(
            name,
            colors=colors,
            limit=limit,
            shape=shape,
            size=size,
            title=title,
            font_size_multiplier=font_size_multiplier,
            text_opacity=text_opacity,
        )
        logger.debug("Built avatar spec %s", self._spec)

    @classmethod
    def from_options(cls, name: Any, options: AvatarOptions) -> "Avatar":
        return cls(name, **asdict(options))

    @property
    def spec(self) -> AvatarSpec:
        return self._spec

    @property
    def name(self) -> str:
        """Name used for color and initials (``"?"`` for an empty name)."""
        return initials.display_name(self._spec)

    def fill(self) -> str:
        return color.fill(self._spec)

    def fill_rgb(self) -> RGB:
        return color.fill_rgb(self._spec)

    def initials(self) -> str:
        return initials.initials(self._spec)

    def font_size(self) -> int:
        return layout.font_size(self._spec)

    def render(self) -> str:
        """SVG document for this avatar. Name-derived text is not escaped."""
        return svg_renderer.render(self._spec)

    def data_uri(self) -> str:
        return svg_renderer.to_data_uri(self.render())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Avatar({self._spec.name!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Avatar):
            return NotImplemented
        return self._spec == other._spec

    def __hash__(self) -> int:
        return hash(self._spec)


def svg(name: Any, **options: Any) -> str:
    """Render the avatar for ``name`` in one call; see :class:`Avatar`."""
    return Avatar(name, **options).render()
