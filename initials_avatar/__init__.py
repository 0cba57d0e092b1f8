"""initials_avatar
=================

Deterministic SVG avatars showing a name's initials on a colored shape.

The same name and options always produce byte-identical markup, so outputs
can be cached freely. Typical use::

    from initials_avatar import Avatar

    Avatar("Grace Hopper", title=True).render()

Name-derived text is inserted into the markup without escaping; embedding
applications are responsible for sanitizing untrusted names.
"""

from .avatar import Avatar, AvatarOptions, svg
from .errors import ConfigurationError
from .renderer import CONTENT_TYPE
from .spec import AvatarSpec, validate
from .title import Title, TitleFromName, TitleOmitted, TitleText
from .types import Shape

__all__ = [
    "Avatar",
    "AvatarOptions",
    "AvatarSpec",
    "CONTENT_TYPE",
    "ConfigurationError",
    "Shape",
    "Title",
    "TitleFromName",
    "TitleOmitted",
    "TitleText",
    "svg",
    "validate",
]
