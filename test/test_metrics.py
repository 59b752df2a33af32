import pytest
import numpy as np

from stralgos import AlignmentConfig, InvalidInputError, encode
from stralgos.config import MEMO_SENTINEL
from stralgos.metrics import (
    align,
    edit_distance,
    lcs_length,
    lcs_sequence,
    longest_common_prefix,
    longest_common_substring,
    longest_repeating_subsequence,
    max_common_substring,
    new_memo,
    sequence_alignment,
)


WORD_PAIRS = [
    ("kitten", "sitting"),
    ("flaw", "lawn"),
    ("intention", "execution"),
    ("sunday", "saturday"),
    ("", "abc"),
    ("quick", "quack"),
    ("publicvoidmainstring", "privatevoidteststring"),
]


class TestEncode:
    def test_shared_vocabulary(self):
        a, b = encode("abca", "cab")
        np.testing.assert_array_equal(a, [0, 1, 2, 0])
        np.testing.assert_array_equal(b, [2, 0, 1])

    def test_mixed_containers(self):
        a, b = encode(["x", "y"], ("y", "z"))
        assert a[1] == b[0]
        assert a.dtype == np.int64

    def test_none(self):
        with pytest.raises(InvalidInputError):
            encode("abc", None)


class TestEditDistance:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("kitten", "sitting", 3),
            ("flaw", "lawn", 2),
            ("intention", "execution", 5),
            ("sunday", "saturday", 3),
            ("", "abc", 3),
            ("abc", "", 3),
            ("", "", 0),
        ],
    )
    def test_known_distances(self, a, b, expected):
        assert edit_distance(a, b) == expected

    def test_caller_supplied_memo(self):
        memo = new_memo(6, 7)
        assert (memo == MEMO_SENTINEL).all()

        assert edit_distance("kitten", "sitting", 6, 7, memo) == 3
        assert memo[6, 7] == 3
        assert not (memo == MEMO_SENTINEL).any(), "every cell should be filled"

    def test_computed_cells_are_not_recomputed(self):
        memo = new_memo(2, 2)
        memo[2, 2] = 7
        assert edit_distance("ab", "ab", memo=memo) == 7

    def test_prefix_lengths(self):
        # "kit" vs "sit"
        assert edit_distance("kitten", "sitting", 3, 3) == 1
        assert edit_distance("kitten", "sitting", 0, 4) == 4

    @pytest.mark.parametrize("a,b", WORD_PAIRS)
    def test_identity_and_length_bound(self, a, b):
        assert edit_distance(a, a) == 0
        assert edit_distance(a, b) >= abs(len(a) - len(b))
        assert edit_distance(a, b) <= max(len(a), len(b))
        assert edit_distance(a, b) == edit_distance(b, a)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"m": 7},
            {"n": -1},
            {"m": 2.0},
            {"memo": np.full((3, 3), -1)},
            {"memo": np.full((7, 8), -1.0)},
            {"memo": [[-1] * 8] * 7},
        ],
        ids=["m_too_large", "negative_n", "float_m", "wrong_shape", "float_memo", "list_memo"],
    )
    def test_invalid_input(self, kwargs):
        with pytest.raises(InvalidInputError):
            edit_distance("kitten", "sitting", **kwargs)

    def test_new_memo_rejects_negative(self):
        with pytest.raises(InvalidInputError):
            new_memo(-1, 3)


class TestLCS:
    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("ABCDGH", "AEDFHR", 3),
            ("AGGTAB", "GXTXAYB", 4),
            ("abc", "def", 0),
            ("", "abc", 0),
            ("helo", "hello", 4),
        ],
    )
    def test_length(self, a, b, expected):
        assert lcs_length(a, b) == expected

    def test_identity(self):
        text = "AABAACAADAABAABA"
        assert lcs_length(text, text, len(text), len(text)) == len(text)

    def test_prefix_lengths(self):
        # "ABCD" vs "AED"
        assert lcs_length("ABCDGH", "AEDFHR", 4, 3) == 2

    def test_sequence(self):
        assert lcs_sequence("AGGTAB", "GXTXAYB") == "GTAB"
        assert lcs_sequence([1, 2, 3, 4], [2, 4, 5]) == [2, 4]
        assert lcs_sequence("", "abc") == ""

    @pytest.mark.parametrize(
        "s,expected",
        [("aabb", 2), ("abc", 0), ("aab", 1), ("axxxy", 2), ("", 0), ("P@ssw0rd123", 1)],
    )
    def test_longest_repeating_subsequence(self, s, expected):
        assert longest_repeating_subsequence(s) == expected


class TestAlignment:
    def test_known_cost(self):
        assert sequence_alignment("AGGGCT", "AGGCA", 3, 2) == 5

    def test_trivial_cases(self):
        assert sequence_alignment("abc", "abc", 3, 2) == 0
        assert sequence_alignment("", "abc", 3, 2) == 6
        assert sequence_alignment("AGGTC", "AGGCA", 3, 2) >= 0

    def test_unit_penalties_match_edit_distance(self):
        for a, b in WORD_PAIRS:
            assert sequence_alignment(a, b, 1, 1) == edit_distance(a, b)

    @pytest.mark.parametrize(
        "a,b",
        [("AGGGCT", "AGGCA"), ("ATCGATCGATCG", "ATCGATGGGATCG"), ("", "AC"), ("GATTACA", "GCATGCU")],
    )
    def test_traceback_is_consistent(self, a, b):
        config = AlignmentConfig.dna()
        result = align(a, b, config)
        assert len(result.aligned1) == len(result.aligned2)
        assert result.aligned1.replace("_", "") == a
        assert result.aligned2.replace("_", "") == b

        cost = 0
        for x, y in zip(result.aligned1, result.aligned2):
            if x == "_" or y == "_":
                cost += config.gap_penalty
            elif x != y:
                cost += config.mismatch_penalty
        assert cost == result.cost

    def test_negative_penalty(self):
        with pytest.raises(InvalidInputError):
            sequence_alignment("a", "b", -1, 2)
        with pytest.raises(InvalidInputError):
            AlignmentConfig(gap_penalty=-3)

    @pytest.mark.parametrize(
        "mismatch,gap",
        [(1.5, 2), (2.5, 1.2), (3, 2.0), (True, 2), ("3", 2)],
        ids=lambda x: repr(x),
    )
    def test_non_integer_penalty(self, mismatch, gap):
        # fractional costs would be truncated by the integer table
        with pytest.raises(InvalidInputError):
            sequence_alignment("ab", "ba", mismatch, gap)
        with pytest.raises(InvalidInputError):
            AlignmentConfig(mismatch_penalty=mismatch, gap_penalty=gap)

    def test_numpy_integer_penalties(self):
        assert sequence_alignment("AGGGCT", "AGGCA", np.int64(3), np.int32(2)) == 5


class TestPrefixAndSubstring:
    @pytest.mark.parametrize(
        "strings,expected",
        [
            (["flower", "flow", "flight"], "fl"),
            (["dog", "racecar", "car"], ""),
            (["algorithm", "algorithmic", "algorithms"], "algorithm"),
            (["the", "they", "them"], "the"),
            (["", "a"], ""),
            (["solo"], "solo"),
            ([], ""),
        ],
    )
    def test_longest_common_prefix(self, strings, expected):
        assert longest_common_prefix(strings) == expected

    def test_longest_common_prefix_rejects_none(self):
        with pytest.raises(InvalidInputError):
            longest_common_prefix(None)
        with pytest.raises(InvalidInputError):
            longest_common_prefix(["a", None])

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("ABCDEF", "XBCDY", 3),
            ("abcxyzabc", "xyzabc", 6),
            ("abc", "def", 0),
            ("", "abc", 0),
            ("ATCGATCGATCG", "ATCGATGGGATCG", 6),
        ],
    )
    def test_max_common_substring(self, a, b, expected):
        assert max_common_substring(a, b) == expected

    def test_longest_common_substring_positions(self):
        match = longest_common_substring("ABCDEF", "XBCDY")
        assert (match.length, match.start_pos1, match.end_pos1, match.start_pos2, match.end_pos2) == (3, 1, 4, 1, 4)
        assert "ABCDEF"[match.start_pos1:match.end_pos1] == "XBCDY"[match.start_pos2:match.end_pos2]
