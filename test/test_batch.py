import pytest
import numpy as np
import pandas as pd

from stralgos import InvalidInputError
from stralgos.batch import batch_edit_distance, closest_match, search_corpus
from stralgos.config import SEARCH_ALGORITHMS


DOCUMENTS = [
    "Machine learning is a subset of artificial intelligence",
    "Deep learning is a subset of machine learning",
    "Artificial intelligence is transforming the world",
]


class TestSearchCorpus:
    @pytest.mark.parametrize("algorithm", SEARCH_ALGORITHMS, ids=lambda x: f"algo_{x}")
    def test_positions(self, algorithm):
        df = search_corpus(DOCUMENTS, "learning", algorithm=algorithm, progress=False)

        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["idx", "position", "found"]
        assert df["found"].tolist() == [True, True, False]
        assert df["position"].iloc[0] == 8
        assert df["position"].iloc[1] == 5
        assert df["position"].isna().tolist() == [False, False, True]

    def test_unknown_algorithm(self):
        with pytest.raises(InvalidInputError):
            search_corpus(DOCUMENTS, "learning", algorithm="grep")

    def test_empty_corpus(self):
        df = search_corpus([], "x", progress=False)
        assert len(df) == 0


class TestBatchEditDistance:
    def test_distances(self):
        df = batch_edit_distance(["kitten", "flaw", ""], ["sitting", "lawn", ""])
        assert df["distance"].tolist() == [3, 2, 0]
        np.testing.assert_allclose(df["normalized"].to_numpy(), [3 / 7, 0.5, 0.0])

    def test_token_sequences(self):
        df = batch_edit_distance([[1, 2, 3, 4]], [[1, 3, 4, 5]])
        assert df["distance"].tolist() == [2]

    def test_length_mismatch(self):
        with pytest.raises(InvalidInputError):
            batch_edit_distance(["a", "b"], ["a"])

    def test_empty_batch(self):
        df = batch_edit_distance([], [])
        assert list(df.columns) == ["distance", "normalized"]
        assert len(df) == 0


class TestClosestMatch:
    def test_spell_check(self):
        dictionary = ["hello", "world", "help", "held", "hero"]
        word, distance = closest_match("helo", dictionary)
        assert word == "hello"
        assert distance == 1

    def test_empty_dictionary(self):
        assert closest_match("helo", []) is None
