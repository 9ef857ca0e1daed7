"""Source flags shared by the command-line entry points."""

import argparse
from pathlib import Path

from kwsearch.index.engine import KeywordIndex
from kwsearch.sources import (
    FileTokenSource,
    ParquetTokenSource,
    TokenSource,
    read_manifest,
    read_noise_words,
)


def add_source_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--docs", default=None, help="Manifest listing one document id per line"
    )
    parser.add_argument(
        "--noise-words", default="noisewords.txt", help="Noise word list"
    )
    parser.add_argument(
        "--docs-parquet",
        default=None,
        help="Read document text from this docs.parquet instead of files",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Directory document ids are relative to (default: manifest's dir)",
    )


def build_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace, quiet: bool = False
) -> KeywordIndex:
    if not args.docs and not args.docs_parquet:
        parser.error("one of --docs or --docs-parquet is required")
    say = (lambda _msg: None) if quiet else print
    noise_words = read_noise_words(Path(args.noise_words))
    say(f"Loaded {len(noise_words)} noise words")

    source: TokenSource
    if args.docs_parquet:
        parquet_source = ParquetTokenSource(Path(args.docs_parquet))
        doc_ids = (
            read_manifest(Path(args.docs)) if args.docs else parquet_source.doc_ids()
        )
        source = parquet_source
    else:
        doc_ids = read_manifest(Path(args.docs))
        root = Path(args.root) if args.root else Path(args.docs).parent
        source = FileTokenSource(root)

    say(f"Indexing {len(doc_ids)} documents...")
    index = KeywordIndex()
    index.make_index(doc_ids, noise_words, source)
    say(f"Indexed {len(doc_ids)} documents, {len(index)} keywords")
    return index
