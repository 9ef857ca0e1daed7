"""Pack the text files named in a manifest into one docs.parquet.

Usage:
    python -m kwsearch.etl.text_to_parquet \\
        --docs docs.txt --output docs.parquet [--root corpus/]
"""

import argparse
from pathlib import Path

import polars as pl

from kwsearch.data_models.doc import Doc
from kwsearch.sources import FileTokenSource, read_manifest

_SCHEMA = {"doc_id": pl.String, "text": pl.String, "title": pl.String}


def _title(text: str) -> str | None:
    for line in text.splitlines():
        if line.strip():
            return line.strip()[:80]
    return None


def collect_docs(doc_ids: list[str], root: Path) -> list[Doc]:
    source = FileTokenSource(root)
    docs = []
    for doc_id in dict.fromkeys(doc_ids):
        text = source.read_text(doc_id)
        docs.append(Doc(doc_id=doc_id, text=text, title=_title(text)))
    return docs


def docs_to_frame(docs: list[Doc]) -> pl.DataFrame:
    if not docs:
        return pl.DataFrame(schema=_SCHEMA)
    return pl.DataFrame([doc.model_dump() for doc in docs], schema=_SCHEMA)


def main() -> None:
    parser = argparse.ArgumentParser(description="Pack text documents into Parquet")
    parser.add_argument("--docs", required=True, help="Manifest of document files")
    parser.add_argument("--output", required=True, help="Output Parquet file path")
    parser.add_argument(
        "--root", default=None, help="Directory document ids are relative to"
    )
    args = parser.parse_args()

    manifest = Path(args.docs)
    root = Path(args.root) if args.root else manifest.parent
    doc_ids = read_manifest(manifest)
    print(f"Reading {len(doc_ids)} documents from {root}...")

    df = docs_to_frame(collect_docs(doc_ids, root))
    df.write_parquet(args.output)
    print(f"Wrote {len(df)} docs → {args.output} ({df.shape})")


if __name__ == "__main__":
    main()
