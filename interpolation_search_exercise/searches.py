from collections.abc import Sequence

from .utils import clamp

NOT_FOUND = -1


# --- Interpolation Search ---

def search_interpolation(data: Sequence[int], query: int) -> tuple[int, int]:
    """
    Interpolation search over a non-decreasing sequence.

    Instead of always probing the middle of the bracket, the probe position is
    estimated from where the query falls within the value range of the bracket.
    The input must be sorted ascending; this is not checked.

    With duplicate keys the returned index is whichever matching slot the
    narrowing lands on, not necessarily the leftmost or rightmost one.

    Returns the index of the element (or -1 if not found) and the number of comparisons.
    """
    low, high = 0, len(data) - 1
    comparisons = 0
    while low <= high and data[low] <= query <= data[high]:
        comparisons += 1
        if data[high] == data[low]:
            return (low if data[low] == query else NOT_FOUND), comparisons

        # Python ints so wide NumPy int64 ranges cannot overflow on subtraction
        low_val, high_val = int(data[low]), int(data[high])
        # True division before truncation, otherwise every estimate collapses to low
        pos = low + int((high - low) / (high_val - low_val) * (int(query) - low_val))
        pos = clamp(pos, low, high)

        if data[pos] == query:
            return pos, comparisons
        elif data[pos] < query:
            low = pos + 1
        else:
            high = pos - 1
    return NOT_FOUND, comparisons


def interpolation_search(data: Sequence[int], query: int) -> int:
    """Returns the index of query in the sorted data, or -1 if it is absent."""
    index, _ = search_interpolation(data, query)
    return index


# --- Baseline Search Algorithms (Provided for Benchmarking) ---

def search_full_scan(data: Sequence[int], query: int) -> tuple[int, int]:
    """
    Scans the entire array to find the element.
    Returns the index of the element and the number of comparisons.
    """
    comparisons = 0
    for i, val in enumerate(data):
        comparisons += 1
        if val == query:
            return i, comparisons
    return NOT_FOUND, comparisons


def search_binary(data: Sequence[int], query: int) -> tuple[int, int]:
    """
    Binary search algorithm.
    Returns the index of the element and the number of comparisons.
    """
    low, high = 0, len(data) - 1
    comparisons = 0
    while low <= high:
        comparisons += 1
        mid = (low + high) // 2
        if data[mid] == query:
            return mid, comparisons
        elif data[mid] < query:
            low = mid + 1
        else:
            high = mid - 1
    return NOT_FOUND, comparisons
