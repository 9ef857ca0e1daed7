"""Ranked OR-merge of two frequency-sorted occurrence lists."""

from collections.abc import Sequence

from kwsearch.data_models.occurrence import Occurrence

TOP_N = 5


def merge_ranked(
    first: Sequence[Occurrence], second: Sequence[Occurrence], limit: int = TOP_N
) -> list[str]:
    """Return up to limit doc ids from first OR second, highest frequency first.

    Both inputs must be sorted by non-increasing frequency. A document is
    emitted once even if it appears in both lists, and on equal frequencies
    the document from first wins.
    """
    result: list[str] = []
    seen: set[str] = set()
    i = j = 0
    while len(result) < limit:
        # drop heads that were already emitted from the other side
        if i < len(first) and first[i].doc_id in seen:
            i += 1
            continue
        if j < len(second) and second[j].doc_id in seen:
            j += 1
            continue

        if i < len(first) and j < len(second):
            if first[i].frequency >= second[j].frequency:
                pick = first[i]
                i += 1
            else:
                pick = second[j]
                j += 1
        elif i < len(first):
            pick = first[i]
            i += 1
        elif j < len(second):
            pick = second[j]
            j += 1
        else:
            break

        result.append(pick.doc_id)
        seen.add(pick.doc_id)
    return result
