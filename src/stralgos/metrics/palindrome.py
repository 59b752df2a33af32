"""
Palindrome analysis: detection, longest substring/subsequence, minimum
partitioning and palindrome pairs.
"""

from numba import jit
import numpy as np
from collections import defaultdict
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from stralgos.commons import InvalidInputError, check_integer, check_sequence, encode


@dataclass(frozen=True)
class PalindromeSpan:
    """Half-open window [start, end) of a palindrome inside a sequence."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@jit(nopython=True)
def _expand(s: np.ndarray, left: int, right: int):
    while left >= 0 and right < len(s) and s[left] == s[right]:
        left -= 1
        right += 1
    return left + 1, right


@jit(nopython=True)
def _longest_palindrome_window(s: np.ndarray):
    best_start, best_end = 0, 0
    for center in range(len(s)):
        # odd length first, then even; strict comparison keeps the first maximum
        start, end = _expand(s, center, center)
        if end - start > best_end - best_start:
            best_start, best_end = start, end
        start, end = _expand(s, center, center + 1)
        if end - start > best_end - best_start:
            best_start, best_end = start, end
    return best_start, best_end


@jit(nopython=True)
def _palindromic_subsequence(s: np.ndarray, lo: int, hi: int) -> int:
    if lo > hi:
        return 0
    size = hi - lo + 1
    dp = np.zeros((size, size), dtype=np.int64)
    for i in range(size - 1, -1, -1):
        dp[i, i] = 1
        for j in range(i + 1, size):
            if s[lo + i] == s[lo + j]:
                dp[i, j] = dp[i + 1, j - 1] + 2
            else:
                dp[i, j] = max(dp[i + 1, j], dp[i, j - 1])
    return dp[0, size - 1]


@jit(nopython=True)
def _min_cuts(s: np.ndarray) -> int:
    n = len(s)
    if n == 0:
        return 0
    is_pal = np.zeros((n, n), dtype=np.bool_)
    cuts = np.zeros(n, dtype=np.int64)
    for end in range(n):
        cuts[end] = end  # worst case: every symbol on its own
        for start in range(end + 1):
            if s[start] == s[end] and (end - start < 2 or is_pal[start + 1, end - 1]):
                is_pal[start, end] = True
                if start == 0:
                    cuts[end] = 0
                elif cuts[start - 1] + 1 < cuts[end]:
                    cuts[end] = cuts[start - 1] + 1
    return cuts[n - 1]


def is_palindrome(s) -> bool:
    """True if s reads the same in both directions (the empty sequence does)."""
    check_sequence(s, "s")
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return False
        i += 1
        j -= 1
    return True


def longest_palindrome_span(s) -> PalindromeSpan:
    check_sequence(s, "s")
    (codes,) = encode(s)
    start, end = _longest_palindrome_window(codes)
    return PalindromeSpan(int(start), int(end))


def longest_palindromic_substring(s):
    """
    Longest palindromic substring of s, by expansion around every center.

    When several windows share the maximal length the leftmost one is returned.

    Example:
    --------
    >>> longest_palindromic_substring("babad")
    'bab'
    """
    span = longest_palindrome_span(s)
    return s[span.start:span.end]


def longest_palindromic_subsequence(seq, i: int = 0, j: Optional[int] = None) -> int:
    """
    Length of the longest palindromic subsequence of seq[i..j] (inclusive bounds).

    Parameters
    ----------
    seq : str or sequence
        Symbols to inspect
    i : int
        First index of the range
    j : int, optional
        Last index of the range, defaults to len(seq) - 1

    Returns
    -------
    int
        Length of the subsequence, 0 for an empty range (i == j + 1)
    """
    check_sequence(seq, "seq")
    if j is None:
        j = len(seq) - 1
    i = check_integer(i, "i")
    j = check_integer(j, "j")
    if i < 0 or j >= len(seq) or i > j + 1:
        raise InvalidInputError(f"Invalid range [{i}, {j}] for a sequence of length {len(seq)}")
    (codes,) = encode(seq)
    return int(_palindromic_subsequence(codes, i, j))


def min_palindrome_partition(s) -> int:
    """
    Minimum number of cuts splitting s into palindromic pieces.

    Example:
    --------
    >>> min_palindrome_partition("ababbbabbababa")
    3
    """
    check_sequence(s, "s")
    (codes,) = encode(s)
    return int(_min_cuts(codes))


def palindrome_pairs(words: Sequence[str]) -> List[Tuple[int, int]]:
    """
    All ordered pairs (i, j), i != j, such that words[i] + words[j] is a palindrome.

    Each word is split at every position; a palindromic half lets the reverse of
    the other half, looked up in a reversed-word index, complete the pair.

    Example:
    --------
    >>> palindrome_pairs(["bat", "tab", "cat"])
    [(0, 1), (1, 0)]
    """
    check_sequence(words, "words")
    for pos, word in enumerate(words):
        check_sequence(word, f"words[{pos}]")

    reversed_index = defaultdict(list)
    for i, word in enumerate(words):
        reversed_index[word[::-1]].append(i)
    pairs = set()

    for i, word in enumerate(words):
        for k in range(len(word) + 1):
            head, tail = word[:k], word[k:]
            # word + reverse(head) when tail is a palindrome
            if is_palindrome(tail):
                for j in reversed_index.get(head, ()):
                    if j != i:
                        pairs.add((i, j))
            # reverse(tail) + word when head is a palindrome; k == 0 is covered above
            if k > 0 and is_palindrome(head):
                for j in reversed_index.get(tail, ()):
                    if j != i:
                        pairs.add((j, i))

    return sorted(pairs)
