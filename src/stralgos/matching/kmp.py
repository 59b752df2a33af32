from numba import jit
import numpy as np
from typing import Optional

from stralgos.commons import check_sequence, encode


@jit(nopython=True)
def _failure_function(pat: np.ndarray) -> np.ndarray:
    """fail[i] is the length of the longest proper prefix of pat[:i+1] that is also its suffix."""
    m = len(pat)
    fail = np.zeros(m, dtype=np.int64)
    length = 0
    i = 1
    while i < m:
        if pat[i] == pat[length]:
            length += 1
            fail[i] = length
            i += 1
        elif length != 0:
            length = fail[length - 1]
        else:
            fail[i] = 0
            i += 1
    return fail


@jit(nopython=True)
def _kmp_search(pat: np.ndarray, txt: np.ndarray, fail: np.ndarray) -> int:
    m, n = len(pat), len(txt)
    if m == 0:
        return 0
    j = 0
    for i in range(n):
        while j > 0 and txt[i] != pat[j]:
            j = fail[j - 1]
        if txt[i] == pat[j]:
            j += 1
            if j == m:
                return i - m + 1
    return -1


def compute_failure(pattern) -> np.ndarray:
    """
    Build the KMP failure function of a pattern.

    Example:
    --------
    >>> compute_failure("ABABCABAB")
    array([0, 0, 1, 2, 0, 1, 2, 3, 4])
    """
    check_sequence(pattern, "pattern")
    (pat,) = encode(pattern)
    return _failure_function(pat)


def kmp_search(pattern, text) -> Optional[int]:
    """
    Find the first occurrence of pattern in text with Knuth-Morris-Pratt.

    The text is read once; mismatches fall back through the failure function.

    Parameters
    ----------
    pattern : str or sequence
        Pattern to look for
    text : str or sequence
        Text to scan

    Returns
    -------
    int or None
        Index of the first match, None if the pattern does not occur

    Example:
    --------
    >>> kmp_search("ABABCABC", "ABABDABACDABABCABCABCABCABC")
    10
    """
    check_sequence(pattern, "pattern")
    check_sequence(text, "text")
    pat, txt = encode(pattern, text)
    if len(pat) > len(txt):
        return None
    pos = _kmp_search(pat, txt, _failure_function(pat))
    return None if pos < 0 else int(pos)


def longest_prefix_suffix(s) -> int:
    """Length of the longest proper prefix of s that is also a suffix of s."""
    check_sequence(s, "s")
    if len(s) == 0:
        return 0
    return int(compute_failure(s)[-1])
