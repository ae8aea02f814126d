"""
Pydantic schemas for Expense entity.
"""
from pydantic import BaseModel, field_validator
from typing import List, Optional
from datetime import datetime
from decimal import Decimal


class Expense(BaseModel):
    """A single shared cost paid by one participant and split evenly."""
    id: str
    description: Optional[str] = None
    amount: Decimal
    paid_by: str  # Participant ID who paid
    participant_ids: List[str]  # Participant IDs who share this expense
    date: Optional[datetime] = None

    @field_validator("amount")
    @classmethod
    def check_amount(cls, v):
        """Reject zero and negative amounts."""
        if v <= 0:
            raise ValueError("amount must be greater than zero")
        return v

    @field_validator("participant_ids")
    @classmethod
    def check_participant_ids(cls, v):
        """Drop duplicate IDs and require at least one participant."""
        unique_ids = list(dict.fromkeys(v))
        if not unique_ids:
            raise ValueError("at least one participant must share the expense")
        return unique_ids
