from numba import jit
import numpy as np
from typing import Optional

from stralgos.commons import alphabet_size, check_sequence, encode


@jit(nopython=True)
def _bad_character_table(pat: np.ndarray, size: int) -> np.ndarray:
    last = np.full(size, -1, dtype=np.int64)
    for i in range(len(pat)):
        last[pat[i]] = i
    return last


@jit(nopython=True)
def _boyer_moore(txt: np.ndarray, pat: np.ndarray, last: np.ndarray) -> int:
    m, n = len(pat), len(txt)
    if m == 0:
        return 0
    s = 0
    while s <= n - m:
        j = m - 1
        while j >= 0 and pat[j] == txt[s + j]:
            j -= 1
        if j < 0:
            return s
        s += max(1, j - last[txt[s + j]])
    return -1


def boyer_moore(text, pattern) -> Optional[int]:
    """
    Find the first occurrence of pattern in text with Boyer-Moore (bad-character rule).

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
    last = _bad_character_table(pat, alphabet_size(pat, txt))
    pos = _boyer_moore(txt, pat, last)
    return None if pos < 0 else int(pos)
