# tests/test_distance.py
import itertools
from unittest.mock import patch

import Levenshtein as lev
import pytest

from correct_word.scoring.distance import (
    StringDistance,
    levenshtein_distance,
    levenshtein_similarity,
)
from .test_utils import print_test_name, print_test_result

WORDS = ["", "a", "he", "hi", "hilo", "hello", "world", "kitten", "sitting", "flaw", "lawn", "café", "cafe"]


class TestLevenshteinDistance:
    """Propriétés de la distance d'édition."""

    @pytest.mark.parametrize("a,b,expected", [
        ("kitten", "sitting", 3),
        ("hilo", "hello", 2),
        ("flaw", "lawn", 2),
        ("he", "hi", 1),
        ("he", "hello", 3),
        ("abc", "xyz", 3),
        ("", "", 0),
    ])
    def test_known_distances(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected

    @pytest.mark.parametrize("word", WORDS)
    def test_identity(self, word):
        assert levenshtein_distance(word, word) == 0

    def test_symmetry(self):
        for a, b in itertools.product(WORDS, repeat=2):
            assert levenshtein_distance(a, b) == levenshtein_distance(b, a)

    @pytest.mark.parametrize("word", WORDS)
    def test_distance_to_empty_is_length(self, word):
        assert levenshtein_distance(word, "") == len(word)
        assert levenshtein_distance("", word) == len(word)

    def test_triangle_inequality(self):
        for a, b, c in itertools.product(WORDS, repeat=3):
            assert levenshtein_distance(a, c) <= levenshtein_distance(a, b) + levenshtein_distance(b, c)

    def test_agrees_with_reference_implementation(self):
        test_name = "test_agrees_with_reference_implementation"
        print_test_name(test_name)
        try:
            for a, b in itertools.product(WORDS, repeat=2):
                assert levenshtein_distance(a, b) == lev.distance(a, b), (a, b)
            print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    @pytest.mark.parametrize("a,b,expected", [
        ("café", "cafe", 1),
        ("日本語", "日本", 1),
        ("\U0001F600a", "a", 1),
        ("naïve", "naive", 1),
    ])
    def test_compares_code_points_not_bytes(self, a, b, expected):
        assert levenshtein_distance(a, b) == expected


class TestLevenshteinSimilarity:
    """Similarité normalisée dans [0, 1]."""

    @pytest.mark.parametrize("word", WORDS)
    def test_identity_is_one(self, word):
        assert levenshtein_similarity(word, word) == 1.0

    def test_both_empty_is_one(self):
        assert levenshtein_similarity("", "") == 1.0

    def test_one_empty_is_zero(self):
        assert levenshtein_similarity("abc", "") == 0.0
        assert levenshtein_similarity("", "abc") == 0.0

    def test_completely_different(self):
        assert levenshtein_similarity("abc", "xyz") == 0.0

    def test_consistent_with_distance(self):
        for a, b in itertools.product(WORDS, repeat=2):
            if not a and not b:
                continue
            expected = 1 - levenshtein_distance(a, b) / max(len(a), len(b))
            assert levenshtein_similarity(a, b) == pytest.approx(expected)
            assert 0.0 <= levenshtein_similarity(a, b) <= 1.0

    def test_known_value(self):
        assert levenshtein_similarity("hilo", "hello") == pytest.approx(0.6)


class TestStringDistance:
    """Wrapper avec cache LRU."""

    def test_max_distance_caps_result(self):
        sd = StringDistance()
        assert sd.distance("kitten", "sitting", 2) == 3
        assert sd.distance("kitten", "sitting", 5) == 3
        assert sd.distance("kitten", "sitting", 1) == 2

    def test_similarity_matches_module_function(self):
        sd = StringDistance()
        assert sd.similarity("hilo", "hello") == pytest.approx(levenshtein_similarity("hilo", "hello"))
        assert sd.similarity("", "") == 1.0

    def test_string_distance_lru_cache(self):
        test_name = "test_string_distance_lru_cache"
        print_test_name(test_name)
        try:
            """
            Vérifie que le calcul de distance n'est fait qu'une seule fois
            pour les mêmes arguments.
            """
            with patch('correct_word.scoring.distance.levenshtein_distance') as mock_distance:
                mock_distance.return_value = 5
                sd = StringDistance()

                sd.distance("test", "text")
                sd.distance("test", "text")

                mock_distance.assert_called_once_with("test", "text")
                print_test_result(test_name, passed=True)
        except Exception as e:
            print_test_result(test_name, passed=False)
            raise e

    def test_clear_cache(self):
        with patch('correct_word.scoring.distance.levenshtein_distance') as mock_distance:
            mock_distance.return_value = 1
            sd = StringDistance()

            sd.distance("a", "b")
            sd.clear_cache()
            sd.distance("a", "b")

            assert mock_distance.call_count == 2
