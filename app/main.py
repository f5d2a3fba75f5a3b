# app/main.py
# Build a ready-to-play engine with: python -c "from app.main import bootstrap; bootstrap()"
import json
import logging
import logging.config
import pathlib
from typing import Optional

from app.core.config import Settings, settings
from app.core.exceptions import ConfigurationError
from app.services.dictionary import WordListDictionary
from app.services.game_service import WordGameEngine
from app.services.root_words import load_root_words

logger = logging.getLogger("app.main")  # Logger for this module


def configure_logging_from_file(config_file: Optional[pathlib.Path] = None):
    """Loads logging configuration from the JSON file, falling back to basic stdout logging."""
    config_file = config_file or settings.LOG_CONFIG_FILE
    try:
        with open(config_file) as f_in:
            config = json.load(f_in)
        logging.config.dictConfig(config)
    except FileNotFoundError:
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("app.main.logging_setup_fallback").error(
            f"Logging configuration file not found at {config_file}.", exc_info=True
        )
    except json.JSONDecodeError:
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("app.main.logging_setup_fallback").error(
            f"Failed to parse logging configuration file {config_file}.", exc_info=True
        )
    except (ValueError, TypeError, AttributeError, ImportError):
        # dictConfig rejected the file contents
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("app.main.logging_setup_fallback").error(
            "General logging configuration failed.", exc_info=True
        )


def create_engine(app_settings: Settings) -> WordGameEngine:
    """Builds an engine from settings. Raises ConfigurationError if a word list cannot be loaded."""
    dictionary = WordListDictionary.from_files(app_settings.DICTIONARY_FILES)
    fallback = app_settings.FALLBACK_ROOT_WORD if app_settings.USE_FALLBACK_ROOT_WORD else None
    return WordGameEngine(
        word_checker=dictionary,
        language=app_settings.LANGUAGE,
        min_word_length=app_settings.MIN_WORD_LENGTH,
        scoring_mode=app_settings.SCORING_MODE,
        fallback_root_word=fallback,
    )


def bootstrap(app_settings: Optional[Settings] = None, rng_seed: Optional[int] = None) -> Optional[WordGameEngine]:
    """
    Creates an engine and starts its first round.
    Returns None, after logging the problem, when the game data is missing,
    so the caller can show a setup error instead of crashing.
    """
    app_settings = app_settings or settings
    try:
        engine = create_engine(app_settings)
        try:
            root_words = load_root_words(app_settings.ROOT_WORDS_FILE)
        except ConfigurationError:
            if not engine.fallback_root_word:
                raise
            root_words = []
        engine.start_round(root_words, rng_seed=rng_seed)
    except ConfigurationError as e:
        logger.error(f"{app_settings.PROJECT_NAME} cannot start: {e}")
        return None

    logger.info(f"{app_settings.PROJECT_NAME} ready. Root word: '{engine.root_word}'")
    return engine


if __name__ == "__main__":
    configure_logging_from_file()
    bootstrap()
