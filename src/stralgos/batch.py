"""
Corpus-level helpers running the core algorithms over many inputs.
"""

from numba import jit, prange
import numpy as np
import pandas as pd
import logging
import time
from typing import Optional, Sequence, Tuple
from tqdm import tqdm

from stralgos.commons import InvalidInputError, check_sequence, encode
from stralgos.config import SEARCH_ALGORITHMS
from stralgos.matching import boyer_moore, kmp_search, rabin_karp, z_search
from stralgos.metrics.edit_distance import _fill_edit_distance

logger = logging.getLogger(__name__)

_SEARCHERS = {
    "rabin_karp": lambda text, pattern: rabin_karp(pattern, text),
    "kmp": lambda text, pattern: kmp_search(pattern, text),
    "z": z_search,
    "boyer_moore": boyer_moore,
}


@jit(nopython=True, parallel=True)
def _compute_batch_distances(s1_2d: np.ndarray, len1: np.ndarray, s2_2d: np.ndarray, len2: np.ndarray) -> np.ndarray:
    """Compute edit distances for all padded pairs in parallel."""
    batch_size = s1_2d.shape[0]
    distances = np.zeros(batch_size, dtype=np.int64)

    for b in prange(batch_size):
        m, n = len1[b], len2[b]
        memo = np.full((m + 1, n + 1), -1, dtype=np.int64)
        distances[b] = _fill_edit_distance(s1_2d[b, :m], s2_2d[b, :n], m, n, memo, -1)

    return distances


def _pad(codes: Sequence[np.ndarray]) -> Tuple[np.ndarray, np.ndarray]:
    lengths = np.array([len(c) for c in codes], dtype=np.int64)
    width = int(lengths.max()) if len(lengths) else 0
    padded = np.full((len(codes), width), -1, dtype=np.int64)
    for row, c in enumerate(codes):
        padded[row, :len(c)] = c
    return padded, lengths


def search_corpus(texts: Sequence, pattern, algorithm: str = "kmp", progress: bool = True) -> pd.DataFrame:
    """
    Search one pattern in every text of a corpus.

    Parameters
    ----------
    texts : sequence
        Texts to scan
    pattern : str or sequence
        Pattern to look for
    algorithm : str
        One of "rabin_karp", "kmp", "z", "boyer_moore"
    progress : bool
        Show a progress bar

    Returns
    -------
    pd.DataFrame
        Columns idx, position (nullable Int64, <NA> when absent), found
    """
    check_sequence(texts, "texts")
    check_sequence(pattern, "pattern")
    if algorithm not in SEARCH_ALGORITHMS:
        raise InvalidInputError(f"Unknown algorithm {algorithm!r}, expected one of {SEARCH_ALGORITHMS}")
    searcher = _SEARCHERS[algorithm]

    start = time.time()
    positions = [
        searcher(text, pattern)
        for text in tqdm(texts, desc=f"Searching ({algorithm})", unit="text", disable=not progress)
    ]
    logger.info(f"Searched {len(positions)} texts in {time.time() - start:.2f} seconds")

    return pd.DataFrame({
        "idx": np.arange(len(positions)),
        "position": pd.array(positions, dtype="Int64"),
        "found": [pos is not None for pos in positions],
    })


def batch_edit_distance(reference: Sequence, predicted: Sequence) -> pd.DataFrame:
    """
    Edit distances between paired sequences, computed in parallel.

    Parameters
    ----------
    reference : sequence
        Reference strings or symbol sequences
    predicted : sequence
        Sequences compared against reference, pairwise

    Returns
    -------
    pd.DataFrame
        Columns distance and normalized (distance divided by the longer length,
        0 for two empty sequences)

    Examples
    --------
    >>> batch_edit_distance(["kitten", "flaw"], ["sitting", "lawn"])["distance"].tolist()
    [3, 2]
    """
    check_sequence(reference, "reference")
    check_sequence(predicted, "predicted")
    if len(reference) != len(predicted):
        raise InvalidInputError("reference and predicted must have the same length")
    if len(reference) == 0:
        return pd.DataFrame({"distance": pd.Series(dtype=np.int64), "normalized": pd.Series(dtype=np.float64)})

    # One vocabulary for the whole batch keeps codes comparable across pairs
    codes = encode(*reference, *predicted)
    n_pairs = len(reference)
    s1_2d, len1 = _pad(codes[:n_pairs])
    s2_2d, len2 = _pad(codes[n_pairs:])

    start = time.time()
    distances = _compute_batch_distances(s1_2d, len1, s2_2d, len2)
    logger.info(f"Computed {n_pairs} edit distances in {time.time() - start:.2f} seconds")

    max_lengths = np.maximum(np.maximum(len1, len2), 1)
    return pd.DataFrame({
        "distance": distances,
        "normalized": distances / max_lengths,
    })


def closest_match(word, dictionary: Sequence) -> Optional[Tuple[str, int]]:
    """
    Dictionary entry with the smallest edit distance to word.

    Ties go to the entry listed first. Returns (entry, distance), or None for an
    empty dictionary.

    Example:
    --------
    >>> closest_match("helo", ["hello", "world", "help", "held", "hero"])
    ('hello', 1)
    """
    check_sequence(word, "word")
    check_sequence(dictionary, "dictionary")
    if len(dictionary) == 0:
        return None
    distances = batch_edit_distance([word] * len(dictionary), list(dictionary))["distance"]
    best = int(np.argmin(distances.to_numpy()))
    return dictionary[best], int(distances.iloc[best])
