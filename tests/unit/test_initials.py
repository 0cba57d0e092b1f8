import pytest

from initials_avatar.initials import display_name, initials
from initials_avatar.spec import validate


@pytest.mark.parametrize(
    "name, limit, expected",
    [
        ("ada lovelace", 3, "AL"),
        ("ada lovelace", 1, "A"),
        ("Ada Lovelace Byron", 2, "AL"),
        ("Ada Lovelace Byron", 1, "A"),
        ("Ada Lovelace Byron", 3, "ALB"),
        ("Augusta Ada King Lovelace", 3, "AAK"),
        ("madonna", 1, "M"),
        ("madonna", 5, "M"),
        ("  jean   luc\tpicard ", 3, "JLP"),
        ("élodie durand", 2, "ÉD"),
        ("42 wallaby way", 3, "4WW"),
        ("ßig schmidt", 2, "SsS"),
        ("ǆemal bijedić", 2, "ǅB"),
    ],
)
def test_initials(name: str, limit: int, expected: str) -> None:
    assert initials(validate(name, limit=limit)) == expected


@pytest.mark.parametrize("name", ["", "   ", "\n\t"])
def test_empty_name_uses_placeholder(name: str) -> None:
    spec = validate(name)
    assert display_name(spec) == "?"
    assert initials(spec) == "?"


def test_display_name_keeps_case_and_inner_whitespace() -> None:
    assert display_name(validate(" ada  Lovelace ")) == "ada  Lovelace"
