"""In-memory keyword index: keyword -> occurrences ranked by frequency."""

from collections.abc import Iterable
from pathlib import Path

from kwsearch.data_models.occurrence import Occurrence
from kwsearch.index.insertion import insert_last_occurrence
from kwsearch.index.loader import load_keywords
from kwsearch.index.query import TOP_N, merge_ranked
from kwsearch.sources import (
    FileTokenSource,
    TokenSource,
    read_manifest,
    read_noise_words,
)


class KeywordIndex:
    def __init__(self) -> None:
        self._index: dict[str, list[Occurrence]] = {}
        self._noise_words: frozenset[str] = frozenset()
        self._built = False

    @classmethod
    def from_files(
        cls,
        docs_file: Path,
        noise_words_file: Path,
        source: TokenSource | None = None,
    ) -> "KeywordIndex":
        """Build from a manifest and a noise-word list.

        Doc ids are read as paths relative to the manifest's directory unless
        another source is given.
        """
        noise_words = read_noise_words(noise_words_file)
        doc_ids = read_manifest(docs_file)
        if source is None:
            source = FileTokenSource(docs_file.parent)
        index = cls()
        index.make_index(doc_ids, noise_words, source)
        return index

    @property
    def noise_words(self) -> frozenset[str]:
        """Noise words make_index filtered with; empty before the build."""
        return self._noise_words

    def load_keywords_from_document(
        self, doc_id: str, source: TokenSource, noise_words: Iterable[str] = ()
    ) -> dict[str, Occurrence]:
        return load_keywords(doc_id, source.tokens(doc_id), frozenset(noise_words))

    def merge_keywords(self, kws: dict[str, Occurrence]) -> None:
        _merge_into(self._index, kws)

    def make_index(
        self, doc_ids: Iterable[str], noise_words: Iterable[str], source: TokenSource
    ) -> None:
        """Index every document in doc_ids, in order.

        All or nothing: if any document cannot be loaded the error propagates
        and the index keeps its previous contents.
        """
        if self._built:
            raise RuntimeError("KeywordIndex has already been built")
        noise = frozenset(noise_words)
        index = {key: list(occs) for key, occs in self._index.items()}
        # a document listed twice is indexed once
        for doc_id in dict.fromkeys(doc_ids):
            kws = load_keywords(doc_id, source.tokens(doc_id), noise)
            _merge_into(index, kws)
        self._noise_words = noise
        self._index = index
        self._built = True

    def top5search(self, kw1: str, kw2: str) -> list[str]:
        """Doc ids containing kw1 or kw2, best first, at most five.

        Keywords are looked up as given; callers normalize them.
        """
        return merge_ranked(
            self._index.get(kw1, []), self._index.get(kw2, []), limit=TOP_N
        )

    def occurrences(self, keyword: str) -> list[Occurrence]:
        return list(self._index.get(keyword, []))

    def keywords(self) -> list[str]:
        return sorted(self._index)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._index

    def __len__(self) -> int:
        return len(self._index)


def _merge_into(
    index: dict[str, list[Occurrence]], kws: dict[str, Occurrence]
) -> None:
    for key, occ in kws.items():
        occs = index.get(key)
        if occs is None:
            index[key] = [occ]
            continue
        occs.append(occ)
        insert_last_occurrence(occs)
