"""Configuration de correct-word."""
from typing import Optional, Union

from pydantic_settings import BaseSettings, SettingsConfigDict

from correct_word.scoring.algorithms import Algorithm


class Settings(BaseSettings):
    """Configuration de l'application (surchargeable via CORRECT_WORD_*)."""

    model_config = SettingsConfigDict(env_prefix="CORRECT_WORD_")

    # Algorithme par défaut de l'API et de la CLI
    DEFAULT_ALGORITHM: Algorithm = Algorithm.LEVENSHTEIN_SIMILARITY

    # Seuils par défaut quand l'appelant n'en fournit pas
    DISTANCE_THRESHOLD: int = 0
    SIMILARITY_THRESHOLD: float = 0.5

    # Cache LRU des distances
    DISTANCE_CACHE_SIZE: int = 4096

    # Nombre de suggestions "did you mean" par défaut
    SUGGESTION_LIMIT: int = 5

    # Logs
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None


settings = Settings()


def default_threshold(algorithm: Algorithm) -> Union[int, float]:
    """Seuil par défaut associé à un algorithme."""
    if algorithm.lower_is_better:
        return settings.DISTANCE_THRESHOLD
    return settings.SIMILARITY_THRESHOLD
