"""Modèles Pydantic pour les résultats et l'API."""
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from correct_word.scoring.algorithms import Algorithm

Score = Union[int, float]


class CorrectionResult(BaseModel): # pylint: disable=too-few-public-methods
    """
    Résultat d'une correction.

    `word` n'est présent que si le meilleur candidat passe le seuil ;
    `confidence` est le score du meilleur candidat trouvé dans tous les cas
    (distance en mode levenshtein, similarité en mode levenshtein_similarity).
    """
    word: Optional[str] = None
    confidence: Score

    model_config = ConfigDict(frozen=True)

    @property
    def matched(self) -> bool:
        """True si un candidat a passé le seuil."""
        return self.word is not None


class ScoredCandidate(BaseModel): # pylint: disable=too-few-public-methods
    """Un candidat et son score, avec sa position d'origine."""
    word: str
    score: Score
    index: int

    model_config = ConfigDict(frozen=True)


class CorrectRequest(BaseModel): # pylint: disable=too-few-public-methods
    """Requête de correction."""
    input: str
    candidates: List[str] = Field(default_factory=list)
    algorithm: Optional[Algorithm] = None
    threshold: Optional[float] = None
    # Nombre de suggestions à renvoyer (0 = aucune)
    limit: Optional[int] = Field(default=None, ge=0)


class CorrectResponse(BaseModel): # pylint: disable=too-few-public-methods
    """Réponse de correction."""
    word: Optional[str] = None
    confidence: Score
    algorithm: Algorithm
    threshold: Score
    suggestions: List[ScoredCandidate] = Field(default_factory=list)
