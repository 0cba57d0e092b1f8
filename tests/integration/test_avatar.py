from dataclasses import replace

import pytest

from initials_avatar import (
    Avatar,
    AvatarOptions,
    ConfigurationError,
    Shape,
    TitleFromName,
    svg,
)


def test_render_is_deterministic() -> None:
    first = Avatar("Ada Lovelace", shape="rect", size=48, title=True)
    second = Avatar("Ada Lovelace", shape="rect", size=48, title=True)
    assert first.render() == first.render() == second.render()
    assert str(first) == first.render()
    assert first == second
    assert hash(first) == hash(second)


@pytest.mark.parametrize(
    "options",
    [
        {"size": 16},
        {"size": 256, "shape": "rect"},
        {"limit": 1, "title": True},
        {"font_size_multiplier": 2.0, "text_opacity": 0.0},
    ],
)
def test_color_stable_across_styling(options: dict) -> None:
    assert Avatar("Grace Hopper", colors=24, **options).fill() == Avatar(
        "Grace Hopper", colors=24
    ).fill()


def test_divisor_enforcement() -> None:
    with pytest.raises(ConfigurationError):
        Avatar("Ada Lovelace", colors=16)
    assert Avatar("Ada Lovelace", colors=24).spec.colors == 24


@pytest.mark.parametrize("value", [2.0, 0.0])
def test_multiplier_bounds_accepted(value: float) -> None:
    Avatar("Ada", font_size_multiplier=value)


@pytest.mark.parametrize(
    "options",
    [
        {"font_size_multiplier": 2.0001},
        {"text_opacity": 1.0001},
        {"size": "big"},
        {"shape": "triangle"},
    ],
)
def test_invalid_options_raise(options: dict) -> None:
    with pytest.raises(ConfigurationError):
        Avatar("Ada", **options)


@pytest.mark.parametrize(
    "value, rendered", [(1.0, "1.0"), (0.0, "0.0"), (1, "1"), (0, "0")]
)
def test_opacity_bounds_accepted(value: float, rendered: str) -> None:
    assert f"fill-opacity='{rendered}'" in Avatar("Ada", text_opacity=value).render()


@pytest.mark.parametrize("name", ["", "   "])
def test_empty_name_fallback(name: str) -> None:
    avatar = Avatar(name, colors=24)
    assert avatar.name == "?"
    assert avatar.initials() == "?"
    assert avatar.fill() == "hsl(0, 0%, 67%)"
    assert ">?</text>" in avatar.render()


def test_shape_switch_keeps_fill_and_text() -> None:
    circle = Avatar("Ada Lovelace", size=64)
    rect = Avatar("Ada Lovelace", size=64, shape=Shape.RECT)
    assert "<circle cx='32' cy='32' r='32'" in circle.render()
    assert "<rect" not in circle.render()
    assert "rx='2' ry='2'" in rect.render()
    assert "<circle" not in rect.render()
    assert circle.fill() == rect.fill()
    assert circle.render().split("<text")[1] == rect.render().split("<text")[1]


def test_title_behavior() -> None:
    assert "<title>Grace Hopper</title>" in Avatar("Grace Hopper", title=True).render()
    assert "<title>" not in Avatar("Grace Hopper", title=False).render()
    assert "<title>" not in Avatar("Grace Hopper").render()
    assert Avatar("Grace Hopper", title=True).spec.title == TitleFromName()


def test_from_options() -> None:
    options = AvatarOptions(shape="rect", size=64)
    avatar = Avatar.from_options("Ada Lovelace", options)
    assert avatar == Avatar("Ada Lovelace", shape="rect", size=64)

    with pytest.raises(ConfigurationError, match="Colors"):
        Avatar.from_options("Ada Lovelace", replace(options, colors=16))


def test_accessors() -> None:
    avatar = Avatar("  Ada Lovelace ", limit=1)
    assert avatar.name == "Ada Lovelace"
    assert avatar.initials() == "A"
    assert avatar.font_size() == 16
    assert avatar.fill() == "hsl(30, 40%, 40%)"
    assert len(avatar.fill_rgb()) == 3
    assert avatar.data_uri().startswith("data:image/svg+xml;base64,")
    assert repr(avatar) == "Avatar('Ada Lovelace')"


def test_spec_description() -> None:
    description = Avatar("Grace Hopper", title="Admiral").spec.description
    assert description["name"] == "Grace Hopper"
    assert description["title_text"] == "Admiral"
    assert description["shape"] == Shape.CIRCLE


def test_spec_is_immutable() -> None:
    avatar = Avatar("Ada")
    with pytest.raises(AttributeError):
        avatar.spec.size = 64  # type: ignore[misc]


def test_svg_helper() -> None:
    assert svg("Ada Lovelace", size=64) == Avatar("Ada Lovelace", size=64).render()
