"""
Pydantic schemas for Trip entity.
"""
from pydantic import BaseModel
from typing import List, Optional
from app.schemas.expense import Expense


class Participant(BaseModel):
    """A member of a trip."""
    id: str
    name: str


class Trip(BaseModel):
    """Trip aggregate supplied by the caller: participants and their expenses."""
    id: Optional[str] = None
    name: Optional[str] = None
    participants: List[Participant] = []
    expenses: List[Expense] = []
