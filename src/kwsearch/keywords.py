"""Keyword normalization: raw token -> lower-case keyword, or None."""

from collections.abc import Collection

# Only these characters are stripped, and only from the end of a token.
PUNCTUATION = ".,?:;!"


def get_keyword(
    token: str, noise_words: Collection[str] = frozenset()
) -> str | None:
    """Return the keyword for token, or None if it is not one.

    get_keyword("word!!")    -> "word"
    get_keyword("Word.")     -> "word"
    get_keyword("!!!")       -> None
    get_keyword("wor4d.")    -> None
    get_keyword("it's")      -> None
    """
    stem = token.rstrip(PUNCTUATION)
    if not stem:
        return None
    if not all(ch.isalpha() for ch in stem):
        return None
    key = stem.lower()
    if key in noise_words:
        return None
    return key

