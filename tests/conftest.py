# tests/conftest.py
import pytest
import logging

from app.services.dictionary import WordListDictionary
from app.services.game_service import WordGameEngine

KNOWN_WORDS = [
    "silk", "milk", "worm", "worms", "work", "slim", "soil", "silo", "rows", "mow",
    "owl", "owls", "skim", "wok", "slow", "kilo", "kilos", "swirl", "moss",
    "silent", "listen", "tilsen", "inlet", "tile", "lens", "line", "list", "nest", "tins",
]

class RecordingDictionary:
    """Fake spell checker that remembers every lookup."""

    def __init__(self, words):
        self.words = set(words)
        self.calls = []

    def is_known_word(self, word: str, locale: str) -> bool:
        self.calls.append((word, locale))
        return word in self.words

@pytest.fixture
def dictionary():
    return RecordingDictionary(KNOWN_WORDS)

@pytest.fixture
def word_list_dictionary():
    return WordListDictionary({"en": KNOWN_WORDS})

@pytest.fixture
def engine(dictionary) -> WordGameEngine:
    """An engine with a round on 'silkworm' already started."""
    game = WordGameEngine(word_checker=dictionary, language="en", min_word_length=3)
    game.start_round(["silkworm"])
    return game

def pytest_configure(config):
    """
    Hook to configure logging levels before tests are run.
    Keeps engine debug output visible when a test fails.
    """
    logging.getLogger("app").setLevel(logging.DEBUG)
