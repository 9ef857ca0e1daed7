import pytest

from kwsearch.keywords import get_keyword


@pytest.mark.parametrize(
    "token, expected",
    [
        ("word!!", "word"),
        ("word?!?!", "word"),
        ("Word.", "word"),
        ("WORD", "word"),
        ("word,;:", "word"),
        ("a", "a"),
    ],
)
def test_valid_keywords(token: str, expected: str) -> None:
    assert get_keyword(token) == expected


@pytest.mark.parametrize(
    "token",
    [
        "",
        "!!!",
        ".",
        "wor4d.",
        "it's",
        "well-known",
        "word)",
        "(word",
        "!word",
        "wo.rd",
        "word!x",
        "42",
    ],
)
def test_rejected_tokens(token: str) -> None:
    assert get_keyword(token) is None


def test_noise_word_rejected_after_normalizing() -> None:
    noise = frozenset({"the", "and"})
    assert get_keyword("The.", noise) is None
    assert get_keyword("AND", noise) is None
    assert get_keyword("cat", noise) == "cat"


def test_noise_words_compared_lower_case() -> None:
    # Noise words are loaded verbatim, so an upper-case entry never matches.
    assert get_keyword("The", frozenset({"The"})) == "the"


def test_other_punctuation_not_stripped() -> None:
    assert get_keyword("word'") is None
    assert get_keyword('word"') is None
    assert get_keyword("word-") is None


def test_non_ascii_letters_accepted() -> None:
    assert get_keyword("Café.") == "café"

