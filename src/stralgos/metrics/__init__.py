"""
Sequence-metric family: dynamic-programming string metrics, palindrome
analysis, word segmentation and simple transforms.
"""

from stralgos.metrics.edit_distance import edit_distance, new_memo
from stralgos.metrics.lcs import lcs_length, lcs_sequence, longest_repeating_subsequence
from stralgos.metrics.alignment import Alignment, align, sequence_alignment
from stralgos.metrics.common_substring import longest_common_substring, max_common_substring
from stralgos.metrics.prefix import longest_common_prefix
from stralgos.metrics.palindrome import (
    PalindromeSpan,
    is_palindrome,
    longest_palindrome_span,
    longest_palindromic_substring,
    longest_palindromic_subsequence,
    min_palindrome_partition,
    palindrome_pairs,
)
from stralgos.metrics.word_break import concatenated_words, word_break, word_break_all
from stralgos.metrics.transform import left_rotate, reverse_vowels, right_rotate

__all__ = [
    # edit_distance
    "edit_distance",
    "new_memo",
    # lcs
    "lcs_length",
    "lcs_sequence",
    "longest_repeating_subsequence",
    # alignment
    "Alignment",
    "align",
    "sequence_alignment",
    # common_substring
    "longest_common_substring",
    "max_common_substring",
    # prefix
    "longest_common_prefix",
    # palindrome
    "PalindromeSpan",
    "is_palindrome",
    "longest_palindrome_span",
    "longest_palindromic_substring",
    "longest_palindromic_subsequence",
    "min_palindrome_partition",
    "palindrome_pairs",
    # word_break
    "concatenated_words",
    "word_break",
    "word_break_all",
    # transform
    "left_rotate",
    "right_rotate",
    "reverse_vowels",
]
