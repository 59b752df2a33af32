from numba import jit
import numpy as np
from typing import Optional

from stralgos.commons import check_sequence, encode


@jit(nopython=True)
def _z_array(s: np.ndarray) -> np.ndarray:
    """
    Compute the Z-array of an encoded sequence.

    z[k] is the length of the longest substring starting at k that is also a
    prefix of s; z[0] is left at 0.
    """
    n = len(s)
    z = np.zeros(n, dtype=np.int64)
    left, right = 0, 0
    for k in range(1, n):
        if k < right:
            z[k] = min(right - k, z[k - left])
        while k + z[k] < n and s[z[k]] == s[k + z[k]]:
            z[k] += 1
        if k + z[k] > right:
            left, right = k, k + z[k]
    return z


@jit(nopython=True)
def _z_search(pat: np.ndarray, txt: np.ndarray) -> int:
    m, n = len(pat), len(txt)
    if m == 0:
        return 0
    concat = np.empty(m + 1 + n, dtype=np.int64)
    concat[:m] = pat
    concat[m] = -1  # separator, never a symbol code
    concat[m + 1:] = txt
    z = _z_array(concat)
    for k in range(m + 1, m + 1 + n):
        if z[k] == m:
            return k - m - 1
    return -1


def compute_z_array(s) -> np.ndarray:
    """Z-array of s: z[k] is the longest prefix match starting at k, z[0] is 0."""
    check_sequence(s, "s")
    (codes,) = encode(s)
    return _z_array(codes)


def z_search(text, pattern) -> Optional[int]:
    """
    Find the first occurrence of pattern in text using the Z-algorithm.

    Parameters
    ----------
    text : str or sequence
        Text to scan
    pattern : str or sequence
        Pattern to look for

    Returns
    -------
    int or None
        Index of the first match, None if the pattern does not occur
    """
    check_sequence(text, "text")
    check_sequence(pattern, "pattern")
    pat, txt = encode(pattern, text)
    if len(pat) > len(txt):
        return None
    pos = _z_search(pat, txt)
    return None if pos < 0 else int(pos)
