"""
Balance service for folding expenses into per-participant totals.
"""
import logging
from typing import Dict, List
from decimal import Decimal
from app.core.exceptions import InvalidExpenseError
from app.schemas.balance import Balance
from app.schemas.expense import Expense
from app.schemas.trip import Participant

logger = logging.getLogger(__name__)


def compute_balances(participants: List[Participant], expenses: List[Expense]) -> List[Balance]:
    """
    Calculate total paid, total owed and net balance for each participant.

    Each expense is split evenly between its participants. Payer or
    participant IDs that are not in ``participants`` are skipped, so a
    member removed after incurring expenses does not break the calculation.
    Returns one balance per participant, in input order.
    """
    total_paid: Dict[str, Decimal] = {p.id: Decimal(0) for p in participants}
    total_owed: Dict[str, Decimal] = {p.id: Decimal(0) for p in participants}

    for expense in expenses:
        if not expense.participant_ids:
            logger.warning(f"Expense {expense.id} has no participants to split between")
            raise InvalidExpenseError(expense.id, "no participants to split between")

        # Add what payer paid
        if expense.paid_by in total_paid:
            total_paid[expense.paid_by] += expense.amount
        else:
            logger.debug(f"Payer {expense.paid_by} of expense {expense.id} is not a participant, skipping")

        # Add each participant's share
        split_share = expense.amount / len(expense.participant_ids)
        for participant_id in expense.participant_ids:
            if participant_id in total_owed:
                total_owed[participant_id] += split_share
            else:
                logger.debug(f"Participant {participant_id} of expense {expense.id} is unknown, skipping")

    return [
        Balance(
            user_id=p.id,
            user_name=p.name,
            total_paid=total_paid[p.id],
            total_owed=total_owed[p.id],
            net_balance=total_paid[p.id] - total_owed[p.id]
        )
        for p in participants
    ]
