"""SVG markup assembly.

Security note: name-derived text (the initials and the title) is inserted
into the markup verbatim. Nothing is escaped. Callers that render untrusted
names into HTML or XML must apply their own escaping or sanitization.
"""

import base64
from typing import List, Optional

from initials_avatar.color import fill
from initials_avatar.initials import initials
from initials_avatar.layout import font_size
from initials_avatar.spec import AvatarSpec
from initials_avatar.types import Shape

CONTENT_TYPE = "image/svg+xml"

FONT_FAMILY = (
    '-apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, Oxygen-Sans, '
    'Ubuntu, Cantarell, "Helvetica Neue", sans-serif'
)


def render_title(spec: AvatarSpec) -> Optional[str]:
    title = spec.title_text
    if title is None:
        return None
    return f"<title>{title}</title>"


def render_background(spec: AvatarSpec) -> str:
    size = spec.size
    if spec.shape == Shape.RECT:
        radius = size // 32
        return (
            f"<rect width='{size}' height='{size}' rx='{radius}' ry='{radius}'"
            f" fill='{fill(spec)}' />"
        )
    half = size // 2
    return f"<circle cx='{half}' cy='{half}' r='{half}' fill='{fill(spec)}' />"


def render_text(spec: AvatarSpec) -> str:
    style = (
        f"font-size: {font_size(spec)}px; "
        f"font-family: {FONT_FAMILY}; "
        "user-select: none;"
    )
    return (
        "<text x='50%' y='50%' fill='white'"
        f" fill-opacity='{spec.text_opacity}'"
        " dominant-baseline='central' text-anchor='middle'"
        f" style='{style}'>"
        f"{initials(spec)}"
        "</text>"
    )


def render(spec: AvatarSpec) -> str:
    """Render ``spec`` as a complete SVG document.

    The document holds, in order: the ``<svg>`` root sized ``size`` x ``size``,
    an optional ``<title>``, the background shape, and the centered initials.

    The returned string is NOT escaped; see the module docstring.
    """
    parts: List[Optional[str]] = [
        f"<svg xmlns='http://www.w3.org/2000/svg' width='{spec.size}' height='{spec.size}'>",
        render_title(spec),
        render_background(spec),
        render_text(spec),
        "</svg>",
    ]
    return "".join(part for part in parts if part is not None)


def to_data_uri(markup: str) -> str:
    """Encode SVG markup as a base64 ``data:`` URI for ``<img src>``."""
    encoded = base64.b64encode(markup.encode("utf-8")).decode("ascii")
    return f"data:{CONTENT_TYPE};base64,{encoded}"
