# app/services/word_validator.py
from typing import Optional, Sequence

from app.models.enums import RejectionReason
from app.models.validation import ValidationOutcome
from app.services.dictionary import WordChecker


def normalize_word(raw: str) -> str:
    return raw.strip().lower()


def count_characters(word: str) -> int:
    """Number of characters in the word, not counting spaces."""
    return len(word) - word.count(" ")


def is_long_enough(word: str, min_word_length: int) -> bool:
    return len(word) >= min_word_length


def is_not_root(word: str, root_word: str) -> bool:
    return word != root_word


def is_original(word: str, used_words: Sequence[str]) -> bool:
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    True if every letter of `word` can be taken from `root_word`, each root
    letter used at most once.
    """
    remaining = list(root_word)
    for letter in word:
        try:
            remaining.remove(letter)
        except ValueError:
            return False
    return True


def is_real(word: str, word_checker: WordChecker, language: str) -> bool:
    return word_checker.is_known_word(word, language)


def build_rejection(reason: RejectionReason, word: str, root_word: str, min_word_length: int) -> ValidationOutcome:
    if reason is RejectionReason.TOO_SHORT:
        title = "Word too short"
        message = f"Words need at least {min_word_length} letters."
    elif reason is RejectionReason.MATCHES_ROOT:
        title = "Word is the root word"
        message = f"'{root_word}' is the word you started with. Find a new one!"
    elif reason is RejectionReason.ALREADY_USED:
        title = "Word used already"
        message = "Be more original"
    elif reason is RejectionReason.NOT_CONSTRUCTIBLE:
        title = "Word not possible"
        message = f"You can't spell that word from '{root_word}'!"
    else:
        title = "Word not recognized"
        message = "You can't just make them up, you know!"
    return ValidationOutcome(accepted=False, word=word, reason=reason, title=title, message=message)


def check_word_shape(
    word: str,
    root_word: str,
    used_words: Sequence[str],
    min_word_length: int,
) -> Optional[ValidationOutcome]:
    """
    Runs the rules that only look at the session state (1-4), in order.
    Returns the first rejection, or None if the word may go to the dictionary.
    """
    if not is_long_enough(word, min_word_length):
        reason = RejectionReason.TOO_SHORT
    elif not is_not_root(word, root_word):
        reason = RejectionReason.MATCHES_ROOT
    elif not is_original(word, used_words):
        reason = RejectionReason.ALREADY_USED
    elif not is_possible(word, root_word):
        reason = RejectionReason.NOT_CONSTRUCTIBLE
    else:
        return None

    return build_rejection(reason, word, root_word, min_word_length)


def validate_candidate(
    word: str,
    root_word: str,
    used_words: Sequence[str],
    min_word_length: int,
    word_checker: WordChecker,
    language: str = "en",
) -> Optional[ValidationOutcome]:
    """
    Applies every rule in order and stops at the first failure:
    1. minimum length
    2. not the root word
    3. not used already
    4. spellable from the root word
    5. known to the dictionary

    Returns the rejection outcome, or None when the word passes all rules.
    `word` is expected to be normalized already.
    """
    rejection = check_word_shape(word, root_word, used_words, min_word_length)
    if rejection is not None:
        return rejection

    if not is_real(word, word_checker, language):
        return build_rejection(RejectionReason.NOT_A_REAL_WORD, word, root_word, min_word_length)
    return None
