import math
from typing import Optional

from stralgos.commons import check_sequence
from stralgos.matching.kmp import kmp_search


def repeated_string_match(a, b) -> Optional[int]:
    """
    Minimum number of times ``a`` has to be repeated so that ``b`` is a substring of it.

    Returns None when no number of repetitions works. An empty ``b`` needs no
    repetition at all (0).

    Example:
    --------
    >>> repeated_string_match("abcd", "cdabcdab")
    3
    """
    check_sequence(a, "a")
    check_sequence(b, "b")
    if len(b) == 0:
        return 0
    if len(a) == 0:
        return None

    # b can only start inside the first copy, so one copy past ceil(|b|/|a|) suffices
    times = math.ceil(len(b) / len(a))
    for count in (times, times + 1):
        if kmp_search(b, a * count) is not None:
            return count
    return None
