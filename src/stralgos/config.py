from dataclasses import dataclass
import logging

from stralgos.commons import InvalidInputError, check_integer

# Constants
HASH_BASE = 256
DEFAULT_PRIME = 101
# keeps rolling-hash products within int64
MAX_PRIME = 2 ** 31
MEMO_SENTINEL = -1

VOWELS = frozenset("aeiouAEIOU")

WILDCARD_ANY = "*"
WILDCARD_ONE = "?"
GAP_SYMBOL = "_"

SEARCH_ALGORITHMS = ("rabin_karp", "kmp", "z", "boyer_moore")


@dataclass
class AlignmentConfig:
    mismatch_penalty: int = 3
    gap_penalty: int = 2

    @classmethod
    def dna(cls) -> "AlignmentConfig":
        """Penalties commonly used for nucleotide alignment (mismatch 3, gap 2)."""
        return cls(mismatch_penalty=3, gap_penalty=2)

    def __post_init__(self):
        # costs are accumulated in an integer table
        self.mismatch_penalty = check_integer(self.mismatch_penalty, "mismatch_penalty")
        self.gap_penalty = check_integer(self.gap_penalty, "gap_penalty")
        if self.mismatch_penalty < 0 or self.gap_penalty < 0:
            raise InvalidInputError(
                f"Penalties must be non-negative, got mismatch={self.mismatch_penalty}, gap={self.gap_penalty}"
            )
        logging.getLogger(__name__).debug(
            f"Alignment penalties: mismatch={self.mismatch_penalty}, gap={self.gap_penalty}"
        )
