from stralgos.commons import InvalidInputError, check_sequence
from stralgos.config import VOWELS


def _check_shift(s, d: int) -> int:
    if isinstance(d, bool) or not isinstance(d, int) or d < 0 or d > len(s):
        raise InvalidInputError(f"Shift {d!r} is out of range [0, {len(s)}]")
    return d


def left_rotate(s, d: int):
    """Move the first d symbols of s to its end."""
    check_sequence(s, "s")
    d = _check_shift(s, d)
    return s[d:] + s[:d]


def right_rotate(s, d: int):
    """Move the last d symbols of s to its front; undoes left_rotate(s, d)."""
    check_sequence(s, "s")
    d = _check_shift(s, d)
    return left_rotate(s, len(s) - d)


def reverse_vowels(s: str) -> str:
    """
    Reverse the order of the vowels in s, leaving every other symbol in place.

    Example:
        >>> reverse_vowels("hello")
        'holle'
    """
    check_sequence(s, "s")
    chars = list(s)
    i, j = 0, len(chars) - 1
    while i < j:
        if chars[i] not in VOWELS:
            i += 1
        elif chars[j] not in VOWELS:
            j -= 1
        else:
            chars[i], chars[j] = chars[j], chars[i]
            i += 1
            j -= 1
    return "".join(chars)
