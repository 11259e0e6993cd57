"""Sélection du meilleur candidat ("did you mean...")."""
import sys
from typing import Iterable, List, Optional, Union

from correct_word.config import default_threshold, settings
from correct_word.exceptions import UnknownAlgorithmError
from correct_word.logger import logger
from correct_word.models import CorrectionResult, Score, ScoredCandidate
from correct_word.scoring.algorithms import Algorithm
from correct_word.scoring.distance import string_distance
from correct_word.scoring.ranking import Ranker

# Meilleure distance initiale, supérieure à toute distance réelle
DISTANCE_SENTINEL = sys.maxsize

AlgorithmLike = Union[Algorithm, str]


def _score(algorithm: Algorithm, query: str, candidate: str) -> Score:
    """Score d'un candidat selon l'algorithme."""
    if algorithm is Algorithm.LEVENSHTEIN:
        return string_distance.distance(query, candidate)
    if algorithm is Algorithm.LEVENSHTEIN_SIMILARITY:
        return string_distance.similarity(query, candidate)
    raise UnknownAlgorithmError(algorithm)


def _initial_best(algorithm: Algorithm) -> Score:
    if algorithm.lower_is_better:
        return DISTANCE_SENTINEL
    return 0.0


def _is_better(algorithm: Algorithm, score: Score, best: Score) -> bool:
    # Comparaison stricte : à égalité, le premier candidat est conservé
    if algorithm.lower_is_better:
        return score < best
    return score > best


def _passes(algorithm: Algorithm, score: Score, threshold: Score) -> bool:
    if algorithm.lower_is_better:
        return score <= threshold
    return score >= threshold


def correct(
    algorithm: AlgorithmLike,
    query: str,
    candidates: Iterable[str],
    threshold: Optional[Score] = None,
) -> CorrectionResult:
    """
    Corrige un mot à partir d'une liste de candidats.

    Args:
        algorithm: Algorithme de scoring (membre de `Algorithm` ou sa valeur)
        query: Le mot à corriger
        candidates: Candidats, parcourus une seule fois dans l'ordre
        threshold: Distance maximale (levenshtein) ou similarité minimale
            (levenshtein_similarity). Par défaut : 0 ou 0.5 (voir Settings).

    Returns:
        CorrectionResult avec le meilleur candidat s'il passe le seuil, et le
        score du meilleur candidat dans tous les cas.

    Raises:
        UnknownAlgorithmError: si `algorithm` n'est pas un algorithme connu.
    """
    algorithm = Algorithm.parse(algorithm)
    if threshold is None:
        threshold = default_threshold(algorithm)

    best_word: Optional[str] = None
    best_score = _initial_best(algorithm)

    for candidate in candidates:
        score = _score(algorithm, query, candidate)
        if _is_better(algorithm, score, best_score):
            best_word = candidate
            best_score = score

    if best_word is None or not _passes(algorithm, best_score, threshold):
        logger.debug(
            "No correction for {query!r} ({algorithm}): best score {score}, threshold {threshold}",
            query=query, algorithm=algorithm.value, score=best_score, threshold=threshold,
        )
        return CorrectionResult(word=None, confidence=best_score)

    logger.debug(
        "Corrected {query!r} -> {word!r} ({algorithm}): score {score}",
        query=query, word=best_word, algorithm=algorithm.value, score=best_score,
    )
    return CorrectionResult(word=best_word, confidence=best_score)


def suggest(
    algorithm: AlgorithmLike,
    query: str,
    candidates: Iterable[str],
    limit: Optional[int] = None,
    threshold: Optional[Score] = None,
) -> List[ScoredCandidate]:
    """
    Liste des candidats qui passent le seuil, du meilleur au moins bon.

    À score égal l'ordre d'entrée est conservé, donc le premier élément est
    le mot que `correct` renverrait.
    """
    algorithm = Algorithm.parse(algorithm)
    if threshold is None:
        threshold = default_threshold(algorithm)

    scored = []
    for index, candidate in enumerate(candidates):
        score = _score(algorithm, query, candidate)
        if _passes(algorithm, score, threshold):
            scored.append(ScoredCandidate(word=candidate, score=score, index=index))

    ranked = Ranker().rank(scored, lower_is_better=algorithm.lower_is_better)
    if limit is not None:
        ranked = ranked[:limit]
    return ranked


class Corrector:
    """Correcteur lié à un algorithme et un seuil."""

    def __init__(
        self,
        algorithm: AlgorithmLike = settings.DEFAULT_ALGORITHM,
        threshold: Optional[Score] = None,
    ):
        self.algorithm = Algorithm.parse(algorithm)
        self.threshold = default_threshold(self.algorithm) if threshold is None else threshold

    def correct(self, query: str, candidates: Iterable[str]) -> CorrectionResult:
        return correct(self.algorithm, query, candidates, self.threshold)

    def suggest(
        self, query: str, candidates: Iterable[str], limit: Optional[int] = None
    ) -> List[ScoredCandidate]:
        if limit is None:
            limit = settings.SUGGESTION_LIMIT
        return suggest(self.algorithm, query, candidates, limit, self.threshold)
