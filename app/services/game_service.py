# app/services/game_service.py
import inspect
import logging
from typing import Callable, Iterable, List, Optional, Union

from app.core.exceptions import ConfigurationError
from app.models.enums import RejectionReason, ScoringMode
from app.models.game import GameStateSnapshot
from app.models.validation import ValidationOutcome
from app.services.dictionary import AsyncWordChecker, WordChecker
from app.services.root_words import choose_root_word, parse_root_words
from app.services.word_validator import (
    build_rejection,
    check_word_shape,
    count_characters,
    normalize_word,
    validate_candidate,
)

logger = logging.getLogger("app.services.game_service")  # Logger for this module

DEFAULT_MIN_WORD_LENGTH = 3


class WordGameEngine:
    """
    Session state for one player: the root word of the current round, the
    words accepted so far (most recent first) and the score.

    Not thread-safe; callers must serialize access to an instance.
    """

    def __init__(
        self,
        word_checker: WordChecker,
        language: str = "en",
        min_word_length: int = DEFAULT_MIN_WORD_LENGTH,
        scoring_mode: ScoringMode = ScoringMode.CUMULATIVE,
        score_word: Callable[[str], int] = count_characters,
        fallback_root_word: Optional[str] = None,
    ):
        if min_word_length < 1:
            raise ValueError(f"min_word_length must be at least 1, got {min_word_length}")
        if fallback_root_word is not None and not parse_root_words([fallback_root_word]):
            raise ValueError(f"Fallback root word '{fallback_root_word}' is not a single alphabetic word")

        self.word_checker = word_checker
        self.language = language
        self.min_word_length = min_word_length
        self.scoring_mode = ScoringMode(scoring_mode)
        self.score_word = score_word
        self.fallback_root_word = normalize_word(fallback_root_word) if fallback_root_word else None

        self.root_word: str = ""
        self.used_words: List[str] = []
        self.score: int = 0
        self.pending_input: str = ""

    @property
    def round_started(self) -> bool:
        return bool(self.root_word)

    def start_round(self, candidate_root_words: Iterable[str], rng_seed: Optional[int] = None) -> str:
        """
        Picks a new root word and discards the previous round's words and score.
        Raises ConfigurationError, leaving the state untouched, when no usable
        candidate exists and no fallback root word was configured.
        """
        try:
            root_word = choose_root_word(candidate_root_words, rng_seed=rng_seed)
        except ConfigurationError:
            if not self.fallback_root_word:
                logger.error("Cannot start a round: no usable root words were supplied.")
                raise
            logger.warning(f"No usable root words supplied, falling back to '{self.fallback_root_word}'.")
            root_word = self.fallback_root_word

        self.root_word = root_word
        self.used_words = []
        self.score = 0
        self.pending_input = ""
        logger.info(f"New round started with root word '{root_word}' (language: {self.language}).")
        return root_word

    def update_pending_input(self, text: str) -> None:
        self.pending_input = text

    def submit_word(self, raw: Optional[str] = None) -> ValidationOutcome:
        """
        Validates a candidate (the pending input when `raw` is None) and, if
        every rule passes, records it and updates the score.
        Rejections are returned, never raised, and leave the state unchanged.
        """
        word = self._prepare_submission(raw)
        rejection = validate_candidate(
            word=word,
            root_word=self.root_word,
            used_words=self.used_words,
            min_word_length=self.min_word_length,
            word_checker=self.word_checker,
            language=self.language,
        )
        if rejection is not None:
            return self._reject(rejection)
        return self._accept(word)

    async def submit_word_async(
        self,
        raw: Optional[str] = None,
        word_checker: Optional[Union[AsyncWordChecker, WordChecker]] = None,
    ) -> ValidationOutcome:
        """
        Same as submit_word, but the dictionary lookup may be a coroutine.
        The rules run in the same order; the dictionary is only consulted when
        the other rules pass.
        """
        checker = word_checker or self.word_checker
        word = self._prepare_submission(raw)

        rejection = check_word_shape(word, self.root_word, self.used_words, self.min_word_length)
        if rejection is not None:
            return self._reject(rejection)

        is_known = checker.is_known_word(word, self.language)
        if inspect.isawaitable(is_known):
            is_known = await is_known
        if not is_known:
            return self._reject(
                build_rejection(RejectionReason.NOT_A_REAL_WORD, word, self.root_word, self.min_word_length)
            )
        return self._accept(word)

    def current_state(self) -> GameStateSnapshot:
        return GameStateSnapshot(
            root_word=self.root_word,
            used_words=list(self.used_words),
            score=self.score,
            language=self.language,
            min_word_length=self.min_word_length,
            scoring_mode=self.scoring_mode,
        )

    def _prepare_submission(self, raw: Optional[str]) -> str:
        if not self.round_started:
            raise ConfigurationError("No round in progress. Call start_round() first.")
        return normalize_word(self.pending_input if raw is None else raw)

    def _reject(self, rejection: ValidationOutcome) -> ValidationOutcome:
        logger.debug(f"Submission '{rejection.word}' rejected: {rejection.reason.value}")
        return rejection

    def _accept(self, word: str) -> ValidationOutcome:
        points = self.score_word(word)
        if self.scoring_mode is ScoringMode.PER_WORD:
            self.score = 0
        self.score += points
        self.used_words.insert(0, word)
        self.pending_input = ""
        logger.debug(f"Accepted '{word}' for root '{self.root_word}'. +{points} points, score is now {self.score}.")
        return ValidationOutcome(accepted=True, word=word, score_delta=points)
