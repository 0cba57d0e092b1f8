"""Initials extraction."""

from initials_avatar.spec import AvatarSpec
from initials_avatar.types import PLACEHOLDER_NAME


def display_name(spec: AvatarSpec) -> str:
    """Return the name used for color and initials, ``"?"`` when it is empty."""
    return spec.name or PLACEHOLDER_NAME


def initials(spec: AvatarSpec) -> str:
    """Title-cased first characters of the first ``spec.limit`` words.

    ``"ada lovelace"`` gives ``"AL"``; an empty name gives ``"?"``.
    """
    words = display_name(spec).split()[: spec.limit]
    return "".join(word[0].title() for word in words)
