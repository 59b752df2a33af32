from numba import jit
import numpy as np
from dataclasses import dataclass
from typing import Optional

from stralgos.commons import check_sequence, encode
from stralgos.config import GAP_SYMBOL, AlignmentConfig


@dataclass
class Alignment:
    """Optimal global alignment of two sequences."""
    cost: int
    aligned1: str
    aligned2: str

    def __repr__(self):
        return f"Alignment(cost={self.cost}, {self.aligned1!r} / {self.aligned2!r})"


@jit(nopython=True)
def _alignment_matrix(s1: np.ndarray, s2: np.ndarray, pxy: int, pgap: int) -> np.ndarray:
    m, n = len(s1), len(s2)
    dp = np.zeros((m + 1, n + 1), dtype=np.int64)
    for i in range(m + 1):
        dp[i, 0] = i * pgap
    for j in range(n + 1):
        dp[0, j] = j * pgap

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i-1] == s2[j-1]:
                dp[i, j] = dp[i-1, j-1]
            else:
                dp[i, j] = min(
                    dp[i-1, j-1] + pxy,
                    dp[i-1, j] + pgap,
                    dp[i, j-1] + pgap,
                )
    return dp


def sequence_alignment(a, b, mismatch_penalty: int, gap_penalty: int) -> int:
    """
    Minimum cost of aligning a and b with the given substitution and gap penalties.

    Example:
    --------
    >>> sequence_alignment("AGGGCT", "AGGCA", 3, 2)
    5
    """
    config = AlignmentConfig(mismatch_penalty=mismatch_penalty, gap_penalty=gap_penalty)
    return align(a, b, config).cost


def align(a, b, config: Optional[AlignmentConfig] = None) -> Alignment:
    """
    Optimal global alignment of a and b, gaps shown as ``_``.

    Parameters
    ----------
    a, b : str or sequence
        Sequences to align
    config : AlignmentConfig, optional
        Penalties, defaults to AlignmentConfig()

    Returns
    -------
    Alignment
        Cost and the two aligned rows of equal length
    """
    check_sequence(a, "a")
    check_sequence(b, "b")
    config = config or AlignmentConfig()
    pxy, pgap = config.mismatch_penalty, config.gap_penalty

    s1, s2 = encode(a, b)
    dp = _alignment_matrix(s1, s2, pxy, pgap)

    # Trace back from the bottom-right corner
    row1, row2 = [], []
    i, j = len(s1), len(s2)
    while i > 0 and j > 0:
        if s1[i-1] == s2[j-1] or dp[i, j] == dp[i-1, j-1] + pxy:
            row1.append(str(a[i-1]))
            row2.append(str(b[j-1]))
            i -= 1
            j -= 1
        elif dp[i, j] == dp[i-1, j] + pgap:
            row1.append(str(a[i-1]))
            row2.append(GAP_SYMBOL)
            i -= 1
        else:
            row1.append(GAP_SYMBOL)
            row2.append(str(b[j-1]))
            j -= 1
    while i > 0:
        row1.append(str(a[i-1]))
        row2.append(GAP_SYMBOL)
        i -= 1
    while j > 0:
        row1.append(GAP_SYMBOL)
        row2.append(str(b[j-1]))
        j -= 1

    return Alignment(
        cost=int(dp[len(s1), len(s2)]),
        aligned1="".join(reversed(row1)),
        aligned2="".join(reversed(row2)),
    )
