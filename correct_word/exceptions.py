"""Exceptions du module de correction."""


class CorrectWordError(Exception):
    """Erreur de base de correct-word."""


class UnknownAlgorithmError(CorrectWordError, ValueError):
    """Nom d'algorithme inconnu (ni `levenshtein` ni `levenshtein_similarity`)."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown correction algorithm: {name!r}")
