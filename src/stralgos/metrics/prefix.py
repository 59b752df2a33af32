from typing import Sequence

from stralgos.commons import check_sequence


def longest_common_prefix(strings: Sequence[str]) -> str:
    """
    Longest prefix shared by every string.

    Args:
        strings: Strings to compare

    Returns:
        The common prefix, "" for an empty list

    Example:
        >>> longest_common_prefix(["flower", "flow", "flight"])
        'fl'
    """
    check_sequence(strings, "strings")
    if len(strings) == 0:
        return ""

    prefix = check_sequence(strings[0], "strings[0]")
    for pos, s in enumerate(strings[1:], start=1):
        check_sequence(s, f"strings[{pos}]")
        while not s.startswith(prefix):
            prefix = prefix[:-1]
        if not prefix:
            break
    return prefix
