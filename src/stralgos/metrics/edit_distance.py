from numba import jit
import numpy as np
from typing import Optional

from stralgos.commons import InvalidInputError, check_length, check_sequence, encode
from stralgos.config import MEMO_SENTINEL


@jit(nopython=True)
def _fill_edit_distance(s1: np.ndarray, s2: np.ndarray, m: int, n: int, memo: np.ndarray, sentinel: int) -> int:
    """
    Fill memo[0..m, 0..n] with Levenshtein distances of prefixes, bottom-up.

    Cells that already hold a value other than the sentinel are kept as they are.
    """
    for i in range(m + 1):
        for j in range(n + 1):
            if memo[i, j] != sentinel:
                continue
            if i == 0:
                memo[i, j] = j
            elif j == 0:
                memo[i, j] = i
            elif s1[i-1] == s2[j-1]:
                memo[i, j] = memo[i-1, j-1]
            else:
                memo[i, j] = 1 + min(
                    memo[i, j-1],    # insert
                    memo[i-1, j],    # delete
                    memo[i-1, j-1],  # substitute
                )
    return memo[m, n]


def new_memo(m: int, n: int) -> np.ndarray:
    """Allocate an (m+1) x (n+1) memo table with every cell marked uncomputed."""
    if m < 0 or n < 0:
        raise InvalidInputError(f"Table dimensions must be non-negative, got {m} x {n}")
    return np.full((m + 1, n + 1), MEMO_SENTINEL, dtype=np.int64)


def edit_distance(a, b, m: Optional[int] = None, n: Optional[int] = None, memo: Optional[np.ndarray] = None) -> int:
    """
    Levenshtein distance between the prefixes a[:m] and b[:n].

    Parameters
    ----------
    a, b : str or sequence
        Sequences to compare
    m, n : int, optional
        Prefix lengths, default to the full lengths
    memo : np.ndarray, optional
        Integer table of shape (m+1, n+1); cells equal to MEMO_SENTINEL are
        computed and stored, other cells are trusted as already computed.
        A fresh table is allocated when omitted.

    Returns
    -------
    int
        Minimum number of insertions, deletions and substitutions

    Example:
    --------
    >>> edit_distance("kitten", "sitting", 6, 7, new_memo(6, 7))
    3
    """
    check_sequence(a, "a")
    check_sequence(b, "b")
    m = check_length(m, a, "m")
    n = check_length(n, b, "n")

    if memo is None:
        memo = new_memo(m, n)
    elif not isinstance(memo, np.ndarray) or memo.dtype.kind != "i":
        raise InvalidInputError("memo must be an integer numpy array")
    elif memo.shape != (m + 1, n + 1):
        raise InvalidInputError(f"memo has shape {memo.shape}, expected {(m + 1, n + 1)}")

    s1, s2 = encode(a[:m], b[:n])
    return int(_fill_edit_distance(s1, s2, m, n, memo, MEMO_SENTINEL))
