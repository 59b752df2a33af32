import numpy as np
from numba import jit
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple


class InvalidInputError(ValueError):
    """Raised when an argument cannot describe a valid problem instance."""


@dataclass
class CommonSubstring:
    """Represents the longest common substring between two sequences."""
    length: int
    start_pos1: int
    end_pos1: int
    start_pos2: int
    end_pos2: int

    def __repr__(self):
        return (
            f"CommonSubstring(length={self.length}, "
            f"s1[{self.start_pos1}:{self.end_pos1}], "
            f"s2[{self.start_pos2}:{self.end_pos2}])"
        )


def check_sequence(seq, name: str = "sequence"):
    if seq is None:
        raise InvalidInputError(f"{name} must not be None")
    return seq


def check_integer(value, name: str = "value") -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise InvalidInputError(f"{name} must be an integer, got {type(value).__name__}")
    return int(value)


def check_length(length: Optional[int], seq, name: str = "length") -> int:
    """
    Resolve a prefix length against a sequence.

    ``None`` means the whole sequence; any other value must be an integer in
    ``[0, len(seq)]``.
    """
    if length is None:
        return len(seq)
    check_integer(length, name)
    if length < 0 or length > len(seq):
        raise InvalidInputError(f"{name}={length} is out of range [0, {len(seq)}]")
    return int(length)


def encode(*sequences: Sequence) -> Tuple[np.ndarray, ...]:
    """
    Map sequences of symbols onto dense integer codes sharing one vocabulary.

    Parameters
    ----------
    *sequences : Sequence
        Strings, lists/tuples of hashable symbols or 1-D arrays

    Returns
    -------
    tuple of np.ndarray
        One int64 array per input; equal symbols get equal codes across all
        inputs. Codes are assigned in order of first appearance, starting at 0.

    Example:
    --------
    >>> encode("abca", "cab")
    (array([0, 1, 2, 0]), array([2, 0, 1]))
    """
    vocab = {}
    encoded = []
    for pos, seq in enumerate(sequences):
        check_sequence(seq, f"sequence #{pos}")
        if isinstance(seq, np.ndarray):
            seq = seq.tolist()
        codes = np.fromiter(
            (vocab.setdefault(symbol, len(vocab)) for symbol in seq),
            dtype=np.int64,
            count=len(seq),
        )
        encoded.append(codes)
    return tuple(encoded)


def alphabet_size(*codes: np.ndarray) -> int:
    """Number of distinct codes needed to index a table over the given arrays."""
    sizes = [int(c.max()) + 1 for c in codes if len(c)]
    return max(sizes) if sizes else 1


@jit(nopython=True)
def _compute_dp_matrix_2d(s1: np.ndarray, s2: np.ndarray) -> np.ndarray:
    """
    Compute the dynamic programming matrix for substring matching.

    Parameters
    ----------
    s1 : np.ndarray
        First encoded sequence
    s2 : np.ndarray
        Second encoded sequence

    Returns
    -------
    np.ndarray
        Dynamic programming matrix where dp[i,j] represents the length of
        the common substring ending at s1[i-1] and s2[j-1]
    """
    m, n = len(s1), len(s2)
    dp = np.zeros((m + 1, n + 1), dtype=np.int32)

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if s1[i-1] == s2[j-1]:
                dp[i, j] = dp[i-1, j-1] + 1

    return dp
