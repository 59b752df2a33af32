from numba import jit
import numpy as np
from typing import List, Optional

from stralgos.commons import check_length, check_sequence, encode


@jit(nopython=True)
def _lcs_matrix(s1: np.ndarray, s2: np.ndarray) -> np.ndarray:
    """
    Compute the dynamic programming matrix for LCS.

    Parameters
    ----------
    s1 : np.ndarray
        First encoded sequence
    s2 : np.ndarray
        Second encoded sequence

    Returns
    -------
    np.ndarray
        Matrix where dp[i,j] is the LCS length of s1[:i] and s2[:j]
    """
    m, n = len(s1), len(s2)
    dp = np.zeros((m + 1, n + 1), dtype=np.int32)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i-1] == s2[j-1]:
                dp[i][j] = dp[i-1][j-1] + 1
            else:
                dp[i][j] = max(dp[i-1][j], dp[i][j-1])
    return dp


@jit(nopython=True)
def _backtrack_lcs_2d(s1, s2, dp):
    m, n = len(s1), len(s2)
    pos1 = np.zeros(dp[m][n], dtype=np.int64)

    i, j = m, n
    k = dp[m][n] - 1

    while i > 0 and j > 0:
        if s1[i-1] == s2[j-1]:
            pos1[k] = i-1
            i -= 1
            j -= 1
            k -= 1
        elif dp[i-1][j] >= dp[i][j-1]:
            i -= 1
        else:
            j -= 1

    return pos1


@jit(nopython=True)
def _repeating_dp(s: np.ndarray) -> int:
    n = len(s)
    dp = np.zeros((n + 1, n + 1), dtype=np.int32)
    for i in range(1, n + 1):
        for j in range(1, n + 1):
            # a symbol must not be paired with itself
            if s[i-1] == s[j-1] and i != j:
                dp[i][j] = dp[i-1][j-1] + 1
            else:
                dp[i][j] = max(dp[i-1][j], dp[i][j-1])
    return dp[n][n]


def lcs_length(a, b, m: Optional[int] = None, n: Optional[int] = None) -> int:
    """
    Length of the longest common subsequence of a[:m] and b[:n].

    Example:
    --------
    >>> lcs_length("ABCDGH", "AEDFHR")
    3
    """
    check_sequence(a, "a")
    check_sequence(b, "b")
    m = check_length(m, a, "m")
    n = check_length(n, b, "n")
    s1, s2 = encode(a[:m], b[:n])
    dp = _lcs_matrix(s1, s2)
    return int(dp[m][n])


def lcs_sequence(a, b):
    """
    One longest common subsequence of a and b.

    Returns a string when a is a string, otherwise a list of symbols.
    """
    check_sequence(a, "a")
    check_sequence(b, "b")
    s1, s2 = encode(a, b)
    positions = _backtrack_lcs_2d(s1, s2, _lcs_matrix(s1, s2))
    symbols: List = [a[int(p)] for p in positions]
    return "".join(symbols) if isinstance(a, str) else symbols


def longest_repeating_subsequence(s) -> int:
    """
    Length of the longest subsequence occurring twice in s at different positions.

    Example:
    --------
    >>> longest_repeating_subsequence("aabb")
    2
    """
    check_sequence(s, "s")
    (codes,) = encode(s)
    return int(_repeating_dp(codes))
