"""Turn one document's tokens into a keyword -> Occurrence table."""

from collections.abc import Collection, Iterable

from kwsearch.data_models.occurrence import Occurrence
from kwsearch.keywords import get_keyword


def load_keywords(
    doc_id: str, tokens: Iterable[str], noise_words: Collection[str] = frozenset()
) -> dict[str, Occurrence]:
    table: dict[str, Occurrence] = {}
    for token in tokens:
        key = get_keyword(token, noise_words)
        if key is None:
            continue
        existing = table.get(key)
        if existing is None:
            table[key] = Occurrence(doc_id=doc_id, frequency=1)
        else:
            table[key] = existing.bumped()
    return table
