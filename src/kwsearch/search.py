"""Answer a two-keyword OR query against a freshly built index.

Usage:
    python -m kwsearch.search \\
        --docs docs.txt --noise-words noisewords.txt [kw1 kw2]

Without kw1/kw2 the keywords are prompted for on stdin.
"""

import argparse
import sys

from kwsearch.cli import add_source_args, build_from_args
from kwsearch.errors import DocumentNotFoundError, ResourceNotFoundError
from kwsearch.keywords import get_keyword


def query_term(raw: str) -> str:
    """Lower-case a typed keyword and drop trailing punctuation if it has any."""
    raw = raw.strip()
    return get_keyword(raw) or raw.lower()


def format_results(doc_ids: list[str]) -> list[str]:
    return [f"{rank}. {doc_id}" for rank, doc_id in enumerate(doc_ids, start=1)]


def main() -> None:
    parser = argparse.ArgumentParser(description="Search for kw1 OR kw2")
    add_source_args(parser)
    parser.add_argument("keywords", nargs="*", help="Two keywords (prompted if omitted)")
    args = parser.parse_args()

    if len(args.keywords) not in (0, 2):
        parser.error("expected exactly two keywords")

    try:
        index = build_from_args(parser, args)
    except (ResourceNotFoundError, DocumentNotFoundError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.keywords:
        kw1, kw2 = args.keywords
    else:
        kw1 = input("Enter the first keyword you would like to search for.\n")
        kw2 = input("Enter the second keyword you would like to search for.\n")

    results = index.top5search(query_term(kw1), query_term(kw2))
    if not results:
        print("No matching documents")
        return
    for line in format_results(results):
        print(line)


if __name__ == "__main__":
    main()
