from numba import jit
import numpy as np
import logging
from typing import Optional

from stralgos.commons import InvalidInputError, check_sequence, encode
from stralgos.config import DEFAULT_PRIME, HASH_BASE, MAX_PRIME

logger = logging.getLogger(__name__)


@jit(nopython=True)
def _rabin_karp(pat: np.ndarray, txt: np.ndarray, d: int, q: int) -> int:
    """
    Rolling-hash scan returning the first confirmed match, or -1.

    Parameters
    ----------
    pat : np.ndarray
        Encoded pattern
    txt : np.ndarray
        Encoded text
    d : int
        Hash base
    q : int
        Modulus
    """
    m, n = len(pat), len(txt)
    if m == 0:
        return 0
    if m > n:
        return -1

    # h = d^(m-1) % q, weight of the high-order symbol
    h = 1
    for _ in range(m - 1):
        h = (h * d) % q

    p = 0
    t = 0
    for i in range(m):
        p = (d * p + pat[i]) % q
        t = (d * t + txt[i]) % q

    for s in range(n - m + 1):
        if p == t:
            # Hash hit, rule out collisions
            k = 0
            while k < m and txt[s + k] == pat[k]:
                k += 1
            if k == m:
                return s
        if s < n - m:
            t = (t - (txt[s] % q) * h % q) % q
            if t < 0:
                t += q
            t = (d * t + txt[s + m]) % q
    return -1


def rabin_karp(pattern, text, prime: int = DEFAULT_PRIME) -> Optional[int]:
    """
    Find the first occurrence of pattern in text with the Rabin-Karp algorithm.

    Parameters
    ----------
    pattern : str or sequence
        Pattern to look for
    text : str or sequence
        Text to scan
    prime : int
        Modulus of the rolling hash

    Returns
    -------
    int or None
        Index of the first match, None if the pattern does not occur

    Example:
    --------
    >>> rabin_karp("XYZOPQRS", "ABCFGHIJKLMNOPQRSTUVWXZXYZOPQRSTUWXYZ", 101)
    23
    """
    check_sequence(pattern, "pattern")
    check_sequence(text, "text")
    if isinstance(prime, bool) or not isinstance(prime, (int, np.integer)) or not 1 < prime < MAX_PRIME:
        raise InvalidInputError(f"prime must be an integer in (1, {MAX_PRIME}), got {prime!r}")

    pat, txt = encode(pattern, text)
    pos = _rabin_karp(pat, txt, HASH_BASE, int(prime))
    logger.debug(f"rabin_karp: pattern of length {len(pat)} -> {pos}")
    return None if pos < 0 else int(pos)
