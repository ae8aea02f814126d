"""
Pydantic schemas for derived balance results.
"""
from pydantic import BaseModel
from typing import List
from decimal import Decimal
import enum
from app.schemas.expense import Expense
from app.schemas.settlement import Settlement


class BalanceStatus(str, enum.Enum):
    """Where a participant stands once all settlements are paid."""
    OWED = "owed"
    OWES = "owes"
    SETTLED = "settled"


class Balance(BaseModel):
    """Schema for one participant's totals."""
    user_id: str
    user_name: str
    total_paid: Decimal = Decimal(0)
    total_owed: Decimal = Decimal(0)
    net_balance: Decimal = Decimal(0)  # positive = is owed, negative = owes


class CombinationGroup(BaseModel):
    """Expenses sharing an identical participant set, balanced on their own."""
    participant_ids: List[str]  # Sorted, deduplicated
    participant_names: List[str]
    expenses: List[Expense]
    balances: List[Balance]
    settlements: List[Settlement]
    total_amount: Decimal


class BalanceSummary(BaseModel):
    """Schema for the full balance snapshot of a trip."""
    balances: List[Balance]
    settlements: List[Settlement]
    combination_balances: List[CombinationGroup]
    total_expenses: Decimal


class ParticipantView(BaseModel):
    """Schema for a single participant's slice of a summary."""
    balance: Balance
    settlements: List[Settlement]  # Transfers this participant pays or receives
    status: BalanceStatus
