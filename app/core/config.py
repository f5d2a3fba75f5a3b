# app/core/config.py
import pathlib
import logging
from typing import Dict
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from app.models.enums import ScoringMode

logger = logging.getLogger("app.core.config")  # Logger for this module

BASE_DIR = pathlib.Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"

class Settings(BaseSettings):
    PROJECT_NAME: str = "Word Scramble"
    LANGUAGE: str = "en"  # Language tag passed through to the dictionary

    MIN_WORD_LENGTH: int = 3
    SCORING_MODE: ScoringMode = ScoringMode.CUMULATIVE

    # The bundled list of root words, one per line
    ROOT_WORDS_FILE: pathlib.Path = DATA_DIR / "start.txt"
    # Word lists used to decide whether a submission is a real word, keyed by language
    DICTIONARY_FILES: Dict[str, pathlib.Path] = {
        "en": DATA_DIR / "words_en.txt",
    }

    # Only used when explicitly enabled; a missing root word list is otherwise an error
    USE_FALLBACK_ROOT_WORD: bool = False
    FALLBACK_ROOT_WORD: str = "silkworm"

    LOG_CONFIG_FILE: pathlib.Path = BASE_DIR / "logging_config.json"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

@lru_cache()
def get_settings():
    settings_instance = Settings()
    logger.info(f"Root words file set to: {settings_instance.ROOT_WORDS_FILE}")
    return settings_instance

settings = get_settings()
