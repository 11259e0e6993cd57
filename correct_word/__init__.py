"""Edit-distance based word correction ("did you mean...")."""

from correct_word.correction import Corrector, correct, suggest
from correct_word.models import CorrectionResult, ScoredCandidate
from correct_word.scoring.algorithms import Algorithm
from correct_word.scoring.distance import levenshtein_distance as distance
from correct_word.scoring.distance import levenshtein_similarity as similarity

__all__ = [
    "Algorithm",
    "CorrectionResult",
    "Corrector",
    "ScoredCandidate",
    "correct",
    "distance",
    "similarity",
    "suggest",
]
