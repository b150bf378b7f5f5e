import pytest

from pytxt.services.text_transforms import (
    remove_all_spaces,
    remove_character,
    remove_extra_spaces,
)
from pytxt.utils.constants import REMOVABLE_CHARACTERS

SAMPLES = [
    "",
    "plain words",
    "a-b/c\\d>e<f.g,h_i*j",
    "--//\\\\>><<..,,__**",
    "line one.\n\tline-two, <three>\r\n  four_*",
    "ünïcödé — text/with\u00a0nbsp.",
]


@pytest.mark.parametrize("char", REMOVABLE_CHARACTERS)
@pytest.mark.parametrize("text", SAMPLES)
def test_remove_character_deletes_only_that_character(text, char):
    out = remove_character(text, char)
    assert char not in out
    assert out == "".join(c for c in text if c != char)


def test_remove_character_is_literal_not_regex():
    # "." must not behave like a regex wildcard
    assert remove_character("a.b.c", ".") == "abc"
    assert remove_character("a*b", "*") == "ab"
    assert remove_character("C:\\dir\\file", "\\") == "C:dirfile"


def test_remove_character_rejects_unlisted_character():
    with pytest.raises(ValueError):
        remove_character("abc", "a")
    with pytest.raises(ValueError):
        remove_character("abc", "ab")


@pytest.mark.parametrize("text", SAMPLES + ["  leading", "trailing \n", "\n\n\n"])
def test_remove_extra_spaces_is_idempotent_and_flat(text):
    once = remove_extra_spaces(text)
    assert remove_extra_spaces(once) == once
    assert "\n" not in once and "\t" not in once and "\r" not in once
    assert not any(a.isspace() and b.isspace() for a, b in zip(once, once[1:]))


def test_remove_extra_spaces_collapses_runs_to_single_space():
    assert remove_extra_spaces("a  b\n\n\tc") == "a b c"
    assert remove_extra_spaces("  x  ") == " x "


@pytest.mark.parametrize("text", SAMPLES)
def test_remove_all_spaces_leaves_no_whitespace(text):
    out = remove_all_spaces(text)
    assert not any(c.isspace() for c in out)


def test_remove_all_spaces_joins_tokens():
    assert remove_all_spaces("a b\tc\nd") == "abcd"
