"""Rendering subpackage.

Turns an :class:`~initials_avatar.spec.AvatarSpec` into a standalone SVG
document. See :mod:`initials_avatar.renderer.svg` for the markup layout.
"""

from .svg import CONTENT_TYPE, render, to_data_uri

__all__ = ["CONTENT_TYPE", "render", "to_data_uri"]
