"""
stralgos - Classical string-processing algorithms.

This package is organized into focused subpackages:

- matching/ Pattern-matching family
            - rabin_karp, kmp_search, z_search, boyer_moore: first occurrence or None
            - wildcard_match: full-string glob match with * and ?
            - longest_prefix_suffix, repeated_string_match
            - linear_search, binary_search

- metrics/  Sequence-metric family
            - edit_distance, lcs_length, sequence_alignment, align
            - longest_common_prefix, max_common_substring, longest_repeating_subsequence
            - palindromes: is_palindrome, longest_palindromic_substring,
              longest_palindromic_subsequence, min_palindrome_partition, palindrome_pairs
            - word_break, word_break_all, concatenated_words
            - left_rotate, right_rotate, reverse_vowels

- batch     Corpus helpers (requires pandas)
            - search_corpus, batch_edit_distance, closest_match

Usage:
    from stralgos import kmp_search, edit_distance
    from stralgos.metrics import palindrome_pairs
"""

__version__ = "0.1.0"

from stralgos.commons import InvalidInputError, CommonSubstring, encode
from stralgos.config import AlignmentConfig

from stralgos.matching import (
    rabin_karp,
    compute_failure,
    kmp_search,
    longest_prefix_suffix,
    compute_z_array,
    z_search,
    boyer_moore,
    wildcard_match,
    repeated_string_match,
    binary_search,
    linear_search,
)

from stralgos.metrics import (
    edit_distance,
    new_memo,
    lcs_length,
    lcs_sequence,
    longest_repeating_subsequence,
    Alignment,
    align,
    sequence_alignment,
    longest_common_substring,
    max_common_substring,
    longest_common_prefix,
    PalindromeSpan,
    is_palindrome,
    longest_palindrome_span,
    longest_palindromic_substring,
    longest_palindromic_subsequence,
    min_palindrome_partition,
    palindrome_pairs,
    concatenated_words,
    word_break,
    word_break_all,
    left_rotate,
    right_rotate,
    reverse_vowels,
)

from stralgos.batch import (
    search_corpus,
    batch_edit_distance,
    closest_match,
)

__all__ = [
    "__version__",
    # commons / config
    "InvalidInputError",
    "CommonSubstring",
    "encode",
    "AlignmentConfig",
    # matching
    "rabin_karp",
    "compute_failure",
    "kmp_search",
    "longest_prefix_suffix",
    "compute_z_array",
    "z_search",
    "boyer_moore",
    "wildcard_match",
    "repeated_string_match",
    "binary_search",
    "linear_search",
    # metrics
    "edit_distance",
    "new_memo",
    "lcs_length",
    "lcs_sequence",
    "longest_repeating_subsequence",
    "Alignment",
    "align",
    "sequence_alignment",
    "longest_common_substring",
    "max_common_substring",
    "longest_common_prefix",
    "PalindromeSpan",
    "is_palindrome",
    "longest_palindrome_span",
    "longest_palindromic_substring",
    "longest_palindromic_subsequence",
    "min_palindrome_partition",
    "palindrome_pairs",
    "concatenated_words",
    "word_break",
    "word_break_all",
    "left_rotate",
    "right_rotate",
    "reverse_vowels",
    # batch
    "search_corpus",
    "batch_edit_distance",
    "closest_match",
]
