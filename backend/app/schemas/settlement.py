"""
Pydantic schemas for Settlement entity.
"""
from pydantic import BaseModel
from decimal import Decimal


class Settlement(BaseModel):
    """Schema for a single suggested transfer from a debtor to a creditor."""
    from_user_id: str
    from_user_name: str
    to_user_id: str
    to_user_name: str
    amount: Decimal  # Rounded to the configured decimal places
