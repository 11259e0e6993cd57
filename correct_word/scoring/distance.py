"""Calcul de distance et de similarité Levenshtein."""
from functools import lru_cache
from typing import Optional

from correct_word.config import settings


def levenshtein_distance(a: str, b: str) -> int:
    """
    Distance de Levenshtein entre deux chaînes.

    Nombre minimal d'insertions, suppressions ou substitutions d'un caractère
    (point de code) pour passer de `a` à `b`. Programmation dynamique sur deux
    lignes glissantes dimensionnées par la chaîne la plus courte.

    Args:
        a: Première chaîne
        b: Deuxième chaîne

    Returns:
        Distance de Levenshtein (0 si les chaînes sont identiques)
    """
    # La plus courte sert de colonne : mémoire O(min(len(a), len(b)))
    if len(a) < len(b):
        a, b = b, a

    if not b:
        return len(a)

    previous_row = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current_row = [i]
        for j, char_b in enumerate(b, start=1):
            deletion = previous_row[j] + 1
            insertion = current_row[j - 1] + 1
            substitution = previous_row[j - 1] + (char_a != char_b)
            current_row.append(min(deletion, insertion, substitution))
        previous_row = current_row

    return previous_row[-1]


def levenshtein_similarity(a: str, b: str) -> float:
    """
    Similarité normalisée dans [0, 1] : 1 - distance / max(len(a), len(b)).

    Deux chaînes vides sont identiques : retourne 1.0.
    """
    longest = max(len(a), len(b))
    if longest == 0:
        return 1.0
    return 1.0 - levenshtein_distance(a, b) / longest


class StringDistance:
    """Classe pour calculer les distances entre chaînes, avec cache LRU."""

    @lru_cache(maxsize=settings.DISTANCE_CACHE_SIZE)
    def distance(self, s1: str, s2: str, max_distance: Optional[int] = None) -> int:
        """
        Calcule la distance de Levenshtein entre deux chaînes.

        Args:
            s1: Première chaîne
            s2: Deuxième chaîne
            max_distance: Distance maximale (si dépassée, retourne max_distance + 1)

        Returns:
            Distance de Levenshtein
        """
        dist = levenshtein_distance(s1, s2)

        if max_distance is not None and dist > max_distance:
            return max_distance + 1

        return dist

    def similarity(self, s1: str, s2: str) -> float:
        """Similarité normalisée, calculée à partir de la distance en cache."""
        longest = max(len(s1), len(s2))
        if longest == 0:
            return 1.0
        return 1.0 - self.distance(s1, s2) / longest

    def clear_cache(self) -> None:
        """Vide le cache des distances."""
        StringDistance.distance.cache_clear()


# Instance globale réutilisable
string_distance = StringDistance()
