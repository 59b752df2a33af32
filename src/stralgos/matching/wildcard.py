from numba import jit
import numpy as np

from stralgos.commons import check_length, check_sequence, encode
from stralgos.config import WILDCARD_ANY, WILDCARD_ONE


@jit(nopython=True)
def _wildcard_match(txt: np.ndarray, pat: np.ndarray, any_seq: np.ndarray, any_one: np.ndarray) -> bool:
    """
    dp[i, j] is True when txt[:i] is matched entirely by pat[:j].
    """
    n, m = len(txt), len(pat)
    dp = np.zeros((n + 1, m + 1), dtype=np.bool_)
    dp[0, 0] = True

    # Leading stars match the empty text
    for j in range(1, m + 1):
        if any_seq[j - 1]:
            dp[0, j] = dp[0, j - 1]

    for i in range(1, n + 1):
        for j in range(1, m + 1):
            if any_seq[j - 1]:
                dp[i, j] = dp[i, j - 1] or dp[i - 1, j]
            elif any_one[j - 1] or txt[i - 1] == pat[j - 1]:
                dp[i, j] = dp[i - 1, j - 1]

    return dp[n, m]


def wildcard_match(text, pattern, n=None, m=None) -> bool:
    """
    Glob-match text against a pattern with ``*`` and ``?`` wildcards.

    This is a full match, not containment: ``*`` covers any run of symbols
    (including none) and ``?`` exactly one.

    Parameters
    ----------
    text : str or sequence
        Text to match
    pattern : str or sequence
        Glob pattern
    n : int, optional
        Number of leading text symbols to match, defaults to len(text)
    m : int, optional
        Number of leading pattern symbols to use, defaults to len(pattern)

    Returns
    -------
    bool
        True if text[:n] is matched by pattern[:m]

    Example:
    --------
    >>> wildcard_match("abcdefghijk", "abc?ef*")
    True
    """
    check_sequence(text, "text")
    check_sequence(pattern, "pattern")
    n = check_length(n, text, "n")
    m = check_length(m, pattern, "m")

    text, pattern = text[:n], pattern[:m]
    any_seq = np.array([symbol == WILDCARD_ANY for symbol in pattern], dtype=np.bool_)
    any_one = np.array([symbol == WILDCARD_ONE for symbol in pattern], dtype=np.bool_)
    txt, pat = encode(text, pattern)
    return bool(_wildcard_match(txt, pat, any_seq, any_one))
