from numba import jit
import numpy as np

from stralgos.commons import CommonSubstring, _compute_dp_matrix_2d, check_sequence, encode


@jit(nopython=True)
def _find_longest_match(dp: np.ndarray):
    """
    Find the single longest match from the DP matrix directly.
    Returns (length, start_pos1, end_pos1, start_pos2, end_pos2)
    """
    m, n = dp.shape
    max_length = 0
    start_pos1 = end_pos1 = start_pos2 = end_pos2 = 0

    for i in range(1, m):
        for j in range(1, n):
            length = dp[i, j]
            if length > max_length:
                max_length = length
                end_pos1 = i
                end_pos2 = j
                start_pos1 = i - length
                start_pos2 = j - length

    return max_length, start_pos1, end_pos1, start_pos2, end_pos2


def longest_common_substring(a, b) -> CommonSubstring:
    """
    Locate the longest common substring between two sequences.

    The first maximum in row-major order wins. Positions are half-open.

    Example:
    --------
    >>> longest_common_substring("ABCDEF", "XBCDY")
    CommonSubstring(length=3, s1[1:4], s2[1:4])
    """
    check_sequence(a, "a")
    check_sequence(b, "b")
    s1, s2 = encode(a, b)
    length, start1, end1, start2, end2 = _find_longest_match(_compute_dp_matrix_2d(s1, s2))
    return CommonSubstring(
        length=int(length),
        start_pos1=int(start1),
        end_pos1=int(end1),
        start_pos2=int(start2),
        end_pos2=int(end2),
    )


def max_common_substring(a, b) -> int:
    """Length of the longest common substring of a and b."""
    return longest_common_substring(a, b).length
