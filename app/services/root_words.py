# app/services/root_words.py
import logging
import pathlib
import random
from typing import Iterable, List, Optional

from app.core.exceptions import ConfigurationError

logger = logging.getLogger("app.services.root_words")  # Logger for this module


def parse_root_words(candidates: Iterable[str]) -> List[str]:
    """
    Normalizes candidate root words: trims, lowercases and drops anything that
    is blank or not purely alphabetic (word files usually end with a newline).
    """
    words = []
    for candidate in candidates:
        word = candidate.strip().lower()
        if word and word.isalpha():
            words.append(word)
    return words


def load_root_words(path: pathlib.Path) -> List[str]:
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not load root words from {path}: {e}")
        raise ConfigurationError(f"Could not load root words from {path}.") from e

    words = parse_root_words(text.split("\n"))
    logger.info(f"Loaded {len(words)} root words from {path}")
    return words


def choose_root_word(candidates: Iterable[str], rng_seed: Optional[int] = None) -> str:
    """
    Picks one usable candidate uniformly at random.
    With `rng_seed` the choice is reproducible.
    Raises ConfigurationError if there is nothing to choose from.
    """
    words = parse_root_words(candidates)
    if not words:
        raise ConfigurationError("No usable root words were supplied.")

    rng = random.Random(rng_seed) if rng_seed is not None else random
    return rng.choice(words)
