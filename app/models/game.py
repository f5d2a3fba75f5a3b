# app/models/game.py
from pydantic import BaseModel, Field
from typing import List

from app.models.enums import ScoringMode

class GameStateSnapshot(BaseModel):
    root_word: str
    used_words: List[str] = Field(default_factory=list, description="Accepted words, most recent first.")
    score: int = 0
    language: str = "en"
    min_word_length: int = 3
    scoring_mode: ScoringMode = ScoringMode.CUMULATIVE
