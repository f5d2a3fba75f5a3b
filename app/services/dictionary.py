# app/services/dictionary.py
import logging
import pathlib
from typing import Dict, Iterable, Mapping, Optional, Protocol, Set, runtime_checkable

from app.core.exceptions import ConfigurationError

logger = logging.getLogger("app.services.dictionary")  # Logger for this module


@runtime_checkable
class WordChecker(Protocol):
    def is_known_word(self, word: str, locale: str) -> bool: ...


@runtime_checkable
class AsyncWordChecker(Protocol):
    async def is_known_word(self, word: str, locale: str) -> bool: ...


def read_word_file(path: pathlib.Path) -> Set[str]:
    """Reads a UTF-8 file with one word per line. Blank lines are skipped."""
    try:
        text = pathlib.Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Could not load word list from {path}: {e}") from e
    return {line.strip().lower() for line in text.splitlines() if line.strip()}


class WordListDictionary:
    """
    Spell checker backed by in-memory word lists, one per language tag.
    Lookups are case-insensitive.
    """

    def __init__(self, words_by_locale: Optional[Mapping[str, Iterable[str]]] = None):
        self._words: Dict[str, Set[str]] = {}
        for locale, words in (words_by_locale or {}).items():
            self.add_words(locale, words)

    @classmethod
    def from_files(cls, files_by_locale: Mapping[str, pathlib.Path]) -> "WordListDictionary":
        dictionary = cls()
        for locale, path in files_by_locale.items():
            words = read_word_file(path)
            dictionary.add_words(locale, words)
            logger.info(f"Loaded {len(words)} '{locale}' dictionary words from {path}")
        return dictionary

    @property
    def locales(self) -> Set[str]:
        return set(self._words)

    def add_words(self, locale: str, words: Iterable[str]) -> None:
        bucket = self._words.setdefault(locale.lower(), set())
        bucket.update(w.strip().lower() for w in words if w.strip())

    def is_known_word(self, word: str, locale: str) -> bool:
        if not word:
            return False
        words = self._words.get(locale.lower())
        if words is None:
            logger.warning(f"No dictionary loaded for language '{locale}'. Treating '{word}' as unknown.")
            return False
        return word.lower() in words
