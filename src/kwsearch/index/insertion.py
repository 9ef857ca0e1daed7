"""Binary-search placement of a new occurrence in a frequency-ranked list."""

from kwsearch.data_models.occurrence import Occurrence


def insert_last_occurrence(occs: list[Occurrence]) -> list[int] | None:
    """Move the last element of occs into rank position, in place.

    occs[:-1] must already be sorted by non-increasing frequency. When the
    search hits an entry with the same frequency, the new entry goes
    directly ahead of it.

    Returns the midpoints probed by the binary search, or None when occs
    has a single element and no search was needed.
    """
    if len(occs) == 1:
        return None

    last = occs[-1]
    target = last.frequency
    low, high = 0, len(occs) - 2
    midpoints: list[int] = []
    mid = -1
    mid_freq = -1
    while low <= high:
        mid = (low + high) // 2
        midpoints.append(mid)
        mid_freq = occs[mid].frequency
        if mid_freq == target:
            break
        if mid_freq < target:
            high = mid - 1
        else:
            low = mid + 1

    if mid_freq <= target:
        occs.insert(mid, last)
    else:
        occs.insert(mid + 1, last)
    occs.pop()
    return midpoints
