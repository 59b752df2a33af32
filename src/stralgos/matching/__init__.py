"""
Pattern-matching family: exact substring search, glob matching and search primitives.
"""

from stralgos.matching.rabin_karp import rabin_karp
from stralgos.matching.kmp import compute_failure, kmp_search, longest_prefix_suffix
from stralgos.matching.z_algorithm import compute_z_array, z_search
from stralgos.matching.boyer_moore import boyer_moore
from stralgos.matching.wildcard import wildcard_match
from stralgos.matching.repeated import repeated_string_match
from stralgos.matching.search import binary_search, linear_search

__all__ = [
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
]
