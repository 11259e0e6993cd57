# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from correct_word.correction import Corrector
from correct_word.scoring.algorithms import Algorithm
from correct_word.scoring.distance import string_distance


@pytest.fixture(autouse=True)
def clear_distance_cache():
    """Chaque test part d'un cache de distances vide."""
    string_distance.clear_cache()
    yield
    string_distance.clear_cache()


@pytest.fixture
def distance_corrector():
    """Correcteur en mode distance, tolérant jusqu'à 5 éditions."""
    return Corrector(algorithm=Algorithm.LEVENSHTEIN, threshold=5)


@pytest.fixture
def similarity_corrector():
    """Correcteur en mode similarité avec le seuil par défaut."""
    return Corrector(algorithm=Algorithm.LEVENSHTEIN_SIMILARITY)


@pytest.fixture
def api_client():
    """Client HTTP sur l'application FastAPI."""
    from correct_word.main import app

    with TestClient(app) as client:
        yield client
