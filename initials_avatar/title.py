"""Title variants.

An avatar either has no ``<title>`` element (:class:`TitleOmitted`), takes its
title from the trimmed name (:class:`TitleFromName`), or carries an explicit
text (:class:`TitleText`).
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class TitleOmitted:
    """No title element is rendered."""


@dataclass(frozen=True)
class TitleFromName:
    """The title repeats the trimmed name, even when that name is empty."""


@dataclass(frozen=True)
class TitleText:
    """Explicit title text (already trimmed).

    Attributes:
        text: Title contents. May be empty, which still renders a title element.
    """

    text: str


Title = Union[TitleOmitted, TitleFromName, TitleText]


def resolve_title(title: Title, name: str) -> Optional[str]:
    """Return the title text to render for ``name`` or ``None`` for no title."""
    if isinstance(title, TitleFromName):
        return name
    if isinstance(title, TitleText):
        return title.text
    return None
