import pytest

from wego.search.errors import ValidationError
from wego.search.text import (
    normalize_name,
    split_paragraphs,
    truncate_description,
    validate_keyword,
)


def test_normalize_name_lowercases_and_trims() -> None:
    assert normalize_name("  New   York ") == "new york"
    assert normalize_name("") == ""


def test_validate_keyword_accepts_letters_spaces_and_hyphens() -> None:
    assert validate_keyword("  Rio de Janeiro ") == "Rio de Janeiro"
    assert validate_keyword("Baden-Baden") == "Baden-Baden"


@pytest.mark.parametrize("raw", ["", "   ", None])
def test_validate_keyword_rejects_empty(raw) -> None:
    with pytest.raises(ValidationError, match="enter a destination"):
        validate_keyword(raw)


@pytest.mark.parametrize("raw", ["Par1s", "Paris!", "<script>", "São Paulo"])
def test_validate_keyword_rejects_other_characters(raw) -> None:
    with pytest.raises(ValidationError, match="letters, spaces and hyphens"):
        validate_keyword(raw)


def test_truncate_description_keeps_short_text() -> None:
    assert truncate_description("  A  small\ntown. ") == "A small town."


def test_truncate_description_cuts_at_limit_with_ellipsis() -> None:
    text = "x" * 200
    out = truncate_description(text)
    assert out == "x" * 150 + "..."


def test_truncate_description_exact_limit_is_untouched() -> None:
    text = "y" * 150
    assert truncate_description(text) == text


def test_truncate_description_custom_limit_strips_trailing_space() -> None:
    assert truncate_description("Hello brave new world", max_chars=6) == "Hello..."


def test_truncate_description_none_passthrough() -> None:
    assert truncate_description(None) is None


def test_split_paragraphs_breaks_on_whitespace() -> None:
    words = ["word"] * 100
    paragraphs = split_paragraphs(" ".join(words), width=50)

    assert all(len(p) <= 50 for p in paragraphs)
    assert " ".join(paragraphs) == " ".join(words)


def test_split_paragraphs_hard_wraps_long_words() -> None:
    assert split_paragraphs("a" * 25, width=10) == ["a" * 10, "a" * 10, "a" * 5]
