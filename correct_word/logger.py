'''
Module de configuration pour le logger centralisé de correct-word.

Ce module utilise Loguru pour fournir un logger pré-configuré avec une sortie
console (avec couleurs) et, si CORRECT_WORD_LOG_DIR est défini, des fichiers
rotatifs.
'''

import os
import sys

from loguru import logger

from correct_word.config import settings

# ==============================================================================
# Configuration de Loguru
# ==============================================================================

# 1. Supprimer le handler par défaut pour éviter les doublons
logger.remove()

# 2. Définir les formats pour les logs
LOG_FORMAT_CONSOLE = (
    "<white>{time:YYYY-MM-DD HH:mm:ss.SSS}</white> | "
    "<level>{level: <8}</level> | "
    "<light-black>{name}:{function}:{line}</light-black> - "
    "<level><b>{message}</b></level>"
)
LOG_FORMAT_FILE = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
    "{level: <8} | "
    "{name}:{function}:{line} - "
    "{message}"
)

# 3. Handler console (stderr)
logger.add(
    sys.stderr,
    level=settings.LOG_LEVEL,
    format=LOG_FORMAT_CONSOLE,
    colorize=True,
    backtrace=True,
    diagnose=False
)


def add_file_sinks(log_dir: str) -> None:
    """Ajoute les handlers fichiers (rotation journalière, 30 jours, zip)."""
    os.makedirs(log_dir, exist_ok=True)

    logger.add(
        os.path.join(log_dir, "debug.log"),
        level="DEBUG",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        filter=lambda record: record["level"].name == "DEBUG"
    )
    logger.add(
        os.path.join(log_dir, "info.log"),
        level="INFO",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        filter=lambda record: record["level"].name in ("INFO", "WARNING")
    )
    logger.add(
        os.path.join(log_dir, "error.log"),
        level="ERROR",
        format=LOG_FORMAT_FILE,
        rotation="00:00",
        retention="30 days",
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=True
    )


# 4. Fichiers de log, seulement si un dossier est configuré
if settings.LOG_DIR:
    add_file_sinks(settings.LOG_DIR)

# Exemple d'utilisation :
# from correct_word.logger import logger
# logger.debug("Ceci est un message de débogage.")
