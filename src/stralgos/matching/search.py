from typing import Optional, Sequence

from stralgos.commons import check_sequence


def linear_search(values: Sequence, target) -> Optional[int]:
    """Index of the first element equal to target, None if absent."""
    check_sequence(values, "values")
    for i, value in enumerate(values):
        if value == target:
            return i
    return None


def binary_search(values: Sequence, target) -> Optional[int]:
    """
    Index of an element equal to target in an ascending sequence, None if absent.

    With duplicates, any one of the matching indices may be returned.
    """
    check_sequence(values, "values")
    lo, hi = 0, len(values) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            lo = mid + 1
        else:
            hi = mid - 1
    return None
