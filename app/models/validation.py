# app/models/validation.py
from typing import Optional
from pydantic import BaseModel

from app.models.enums import RejectionReason

class ValidationOutcome(BaseModel):
    accepted: bool
    word: str  # The normalized candidate
    reason: Optional[RejectionReason] = None
    title: Optional[str] = None  # Short heading suitable for an alert
    message: Optional[str] = None  # Human readable explanation
    score_delta: int = 0  # Points added to the score if accepted
