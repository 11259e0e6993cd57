"""Algorithmes de scoring disponibles."""
from enum import Enum

from correct_word.exceptions import UnknownAlgorithmError


class Algorithm(str, Enum):
    """
    Algorithmes supportés par le sélecteur.

    - LEVENSHTEIN : distance brute, plus bas = meilleur, seuil = distance max.
    - LEVENSHTEIN_SIMILARITY : similarité normalisée dans [0, 1],
      plus haut = meilleur, seuil = similarité minimale.

    Ajouter un algorithme = ajouter un membre ici et une branche dans
    `correct_word.correction._score`.
    """

    LEVENSHTEIN = "levenshtein"
    LEVENSHTEIN_SIMILARITY = "levenshtein_similarity"

    @property
    def lower_is_better(self) -> bool:
        """True si le score est une distance (mode distance)."""
        return self is Algorithm.LEVENSHTEIN

    @classmethod
    def parse(cls, value) -> "Algorithm":
        """Convertit une valeur (membre ou chaîne) en Algorithm."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise UnknownAlgorithmError(value) from e
