from pathlib import Path

import polars as pl
import pytest

from kwsearch.errors import DocumentNotFoundError
from kwsearch.etl.text_to_parquet import collect_docs, docs_to_frame
from kwsearch.index.engine import KeywordIndex
from kwsearch.sources import ParquetTokenSource


def _corpus(tmp_path: Path) -> Path:
    (tmp_path / "a.txt").write_text("\n  Fish Tales\nred fish, blue fish.\n")
    (tmp_path / "b.txt").write_text("")
    return tmp_path


def test_collect_docs(tmp_path: Path) -> None:
    docs = collect_docs(["a.txt", "b.txt", "a.txt"], _corpus(tmp_path))
    assert [d.doc_id for d in docs] == ["a.txt", "b.txt"]
    assert docs[0].title == "Fish Tales"
    assert docs[1].title is None


def test_collect_docs_missing(tmp_path: Path) -> None:
    with pytest.raises(DocumentNotFoundError):
        collect_docs(["nope.txt"], tmp_path)


def test_docs_to_frame_empty() -> None:
    df = docs_to_frame([])
    assert len(df) == 0
    assert df.schema == {"doc_id": pl.String, "text": pl.String, "title": pl.String}


def test_parquet_round_trip_feeds_index(tmp_path: Path) -> None:
    out = tmp_path / "docs.parquet"
    docs_to_frame(collect_docs(["a.txt", "b.txt"], _corpus(tmp_path))).write_parquet(
        out
    )

    source = ParquetTokenSource(out)
    index = KeywordIndex()
    index.make_index(source.doc_ids(), set(), source)

    assert [(o.doc_id, o.frequency) for o in index.occurrences("fish")] == [
        ("a.txt", 3)
    ]
    assert index.top5search("red", "tales") == ["a.txt"]


def test_collect_docs_undecodable(tmp_path: Path) -> None:
    (tmp_path / "bad.txt").write_bytes(b"caf\xe9 ok")
    with pytest.raises(DocumentNotFoundError):
        collect_docs(["bad.txt"], tmp_path)
