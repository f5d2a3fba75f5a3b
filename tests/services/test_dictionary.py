# tests/services/test_dictionary.py
import pytest

from app.core.exceptions import ConfigurationError
from app.services.dictionary import WordChecker, WordListDictionary, read_word_file


def test_is_known_word_case_insensitive(word_list_dictionary):
    assert word_list_dictionary.is_known_word("silk", "en")
    assert word_list_dictionary.is_known_word("SILK", "EN")
    assert not word_list_dictionary.is_known_word("wormkil", "en")
    assert not word_list_dictionary.is_known_word("", "en")

def test_unknown_locale_is_not_known(word_list_dictionary, caplog):
    assert not word_list_dictionary.is_known_word("silk", "fr")
    assert "No dictionary loaded for language 'fr'" in caplog.text

def test_add_words():
    dictionary = WordListDictionary()
    dictionary.add_words("es", ["Seda", "  gusano ", ""])
    assert dictionary.locales == {"es"}
    assert dictionary.is_known_word("seda", "es")
    assert dictionary.is_known_word("gusano", "es")

def test_satisfies_word_checker_protocol(word_list_dictionary):
    assert isinstance(word_list_dictionary, WordChecker)

def test_from_files(tmp_path):
    en_file = tmp_path / "en.txt"
    en_file.write_text("silk\nWorm\n\n", encoding="utf-8")
    es_file = tmp_path / "es.txt"
    es_file.write_text("seda\n", encoding="utf-8")

    dictionary = WordListDictionary.from_files({"en": en_file, "es": es_file})

    assert dictionary.locales == {"en", "es"}
    assert dictionary.is_known_word("worm", "en")
    assert dictionary.is_known_word("seda", "es")
    assert not dictionary.is_known_word("seda", "en")

def test_read_word_file_missing(tmp_path):
    with pytest.raises(ConfigurationError):
        read_word_file(tmp_path / "missing.txt")

def test_bundled_english_dictionary():
    from app.core.config import get_settings

    dictionary = WordListDictionary.from_files(get_settings().DICTIONARY_FILES)
    assert dictionary.is_known_word("silk", "en")
    assert not dictionary.is_known_word("wormkil", "en")
