"""Line-oriented readers that feed the index: manifests, noise words, documents."""

from pathlib import Path
from typing import Protocol

import polars as pl

from kwsearch.data_models.doc import Doc
from kwsearch.errors import DocumentNotFoundError, ResourceNotFoundError


def _read_words(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ResourceNotFoundError(f"Cannot read {path}") from e
    return text.split()


def read_manifest(path: Path) -> list[str]:
    """Return the document ids listed in path, in order."""
    return _read_words(path)


def read_noise_words(path: Path) -> frozenset[str]:
    """Return the noise words listed in path, exactly as written."""
    return frozenset(_read_words(path))


class TokenSource(Protocol):
    def tokens(self, doc_id: str) -> list[str]: ...


class FileTokenSource:
    """Each doc id names a text file, optionally relative to root."""

    def __init__(self, root: Path | None = None) -> None:
        self._root = root

    def _path(self, doc_id: str) -> Path:
        path = Path(doc_id)
        if self._root is not None and not path.is_absolute():
            path = self._root / path
        return path

    def read_text(self, doc_id: str) -> str:
        try:
            return self._path(doc_id).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentNotFoundError(doc_id) from e

    def tokens(self, doc_id: str) -> list[str]:
        return self.read_text(doc_id).split()


class MemoryTokenSource:
    def __init__(self, texts: dict[str, str]) -> None:
        self._texts = dict(texts)

    def tokens(self, doc_id: str) -> list[str]:
        if doc_id not in self._texts:
            raise DocumentNotFoundError(doc_id)
        return self._texts[doc_id].split()


class ParquetTokenSource:
    """Documents packed into a docs.parquet with doc_id and text columns."""

    def __init__(self, docs_path: Path) -> None:
        try:
            df = pl.read_parquet(docs_path)
        except OSError as e:
            raise ResourceNotFoundError(f"Cannot read {docs_path}") from e
        self._docs = {
            row["doc_id"]: Doc.model_validate(row) for row in df.iter_rows(named=True)
        }

    def doc_ids(self) -> list[str]:
        return list(self._docs)

    def get(self, doc_id: str) -> Doc:
        doc = self._docs.get(doc_id)
        if doc is None:
            raise DocumentNotFoundError(doc_id)
        return doc

    def tokens(self, doc_id: str) -> list[str]:
        return self.get(doc_id).text.split()
