from functools import lru_cache
from typing import AbstractSet, Iterable, List, Sequence

from stralgos.commons import check_sequence


def _as_dictionary(dictionary: Iterable[str]) -> frozenset:
    check_sequence(dictionary, "dictionary")
    return frozenset(word for word in dictionary if word)


def _breakable(s: str, words: AbstractSet[str], max_len: int) -> List[bool]:
    """ok[i] is True when s[:i] can be segmented into words."""
    ok = [False] * (len(s) + 1)
    ok[0] = True
    for end in range(1, len(s) + 1):
        for start in range(max(0, end - max_len), end):
            if ok[start] and s[start:end] in words:
                ok[end] = True
                break
    return ok


def word_break(s: str, dictionary: Iterable[str]) -> bool:
    """
    Whether s can be segmented into a space-free sequence of dictionary words.

    Words may be reused. The empty string is always breakable.

    Example:
        >>> word_break("catsanddog", ["cat", "cats", "and", "sand", "dog"])
        True
    """
    check_sequence(s, "s")
    words = _as_dictionary(dictionary)
    max_len = max(map(len, words), default=0)
    return _breakable(s, words, max_len)[len(s)]


def word_break_all(s: str, dictionary: Iterable[str]) -> List[str]:
    """
    Every segmentation of s into dictionary words, joined by single spaces.

    Example:
        >>> word_break_all("catsanddog", ["cat", "cats", "and", "sand", "dog"])
        ['cat sand dog', 'cats and dog']
    """
    check_sequence(s, "s")
    words = _as_dictionary(dictionary)
    if not s:
        return []
    max_len = max(map(len, words), default=0)
    if not _breakable(s, words, max_len)[len(s)]:
        return []

    @lru_cache(maxsize=None)
    def segmentations(start: int):
        if start == len(s):
            return [[]]
        found = []
        for end in range(start + 1, min(len(s), start + max_len) + 1):
            head = s[start:end]
            if head in words:
                found.extend([head] + rest for rest in segmentations(end))
        return found

    return sorted(" ".join(parts) for parts in segmentations(0))


def concatenated_words(words: Sequence[str]) -> List[str]:
    """
    Words that are a concatenation of at least two other words of the list.

    Words are checked from shortest to longest against the dictionary of
    words already seen, so a word never uses itself. Results keep input order.

    Example:
        >>> concatenated_words(["cat", "dog", "catdog"])
        ['catdog']
    """
    check_sequence(words, "words")
    found = set()
    seen = set()
    max_len = 0
    for word in sorted(set(w for w in words if w), key=len):
        if seen and _breakable(word, seen, max_len)[len(word)]:
            found.add(word)
        seen.add(word)
        max_len = max(max_len, len(word))
    return [word for word in words if word in found]
