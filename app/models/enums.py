from enum import Enum

class RejectionReason(Enum):
    TOO_SHORT = "too_short"
    MATCHES_ROOT = "matches_root"
    ALREADY_USED = "already_used"
    NOT_CONSTRUCTIBLE = "not_constructible"
    NOT_A_REAL_WORD = "not_a_real_word"

class ScoringMode(str, Enum):
    CUMULATIVE = "cumulative"  # Score is the running total for the round
    PER_WORD = "per_word"  # Score only reflects the most recently accepted word
