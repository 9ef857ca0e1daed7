"""Dump the built keyword index as YAML for inspection.

Usage:
    python -m kwsearch.inspect_index \\
        --docs docs.txt --noise-words noisewords.txt \\
        [--keyword cat --keyword dog] [--output index.yaml]
"""

import argparse
from pathlib import Path

import yaml

from kwsearch.cli import add_source_args, build_from_args
from kwsearch.index.engine import KeywordIndex


def index_to_dict(
    index: KeywordIndex, keywords: list[str] | None = None
) -> dict[str, list[dict]]:  # type: ignore[type-arg]
    """keyword -> ranked [{doc_id, frequency}, ...]; unknown keywords map to []."""
    selected = keywords if keywords is not None else index.keywords()
    return {
        kw: [occ.model_dump() for occ in index.occurrences(kw)] for kw in selected
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the keyword index as YAML")
    add_source_args(parser)
    parser.add_argument(
        "--keyword", action="append", default=None, help="Keyword to include"
    )
    parser.add_argument("--output", default=None, help="YAML file (default: stdout)")
    args = parser.parse_args()

    # keep stdout clean when the YAML goes there
    index = build_from_args(parser, args, quiet=args.output is None)
    dumped = index_to_dict(index, args.keyword)
    text = yaml.dump(dumped, allow_unicode=True, sort_keys=False)
    if args.output:
        Path(args.output).write_text(text)
        print(f"Wrote {len(dumped)} keywords → {args.output}")
    else:
        print(text, end="")


if __name__ == "__main__":
    main()
