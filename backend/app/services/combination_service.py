"""
Combination service: balances broken down by the exact set of people sharing expenses.
"""
import logging
from typing import Dict, List, Tuple
from decimal import Decimal
from app.schemas.balance import CombinationGroup
from app.schemas.expense import Expense
from app.schemas.trip import Participant, Trip
from app.services.balance_service import compute_balances
from app.services.settlement_service import compute_settlements

logger = logging.getLogger(__name__)


def group_expenses_by_participants(expenses: List[Expense]) -> Dict[Tuple[str, ...], List[Expense]]:
    """Group expenses whose participant sets are identical, in first-seen order."""
    groups: Dict[Tuple[str, ...], List[Expense]] = {}
    for expense in expenses:
        key = tuple(sorted(set(expense.participant_ids)))
        groups.setdefault(key, []).append(expense)
    return groups


def compute_combination_balances(trip: Trip) -> List[CombinationGroup]:
    """
    Calculate balances and settlements separately for each participant combination.

    Only the expenses of a combination and its own members are considered,
    so every group settles independently. Groups are ordered by total amount,
    largest first.
    """
    participant_names = {p.id: p.name for p in trip.participants}

    combination_balances = []
    for participant_ids, expenses in group_expenses_by_participants(trip.expenses).items():
        members = [
            Participant(id=pid, name=participant_names.get(pid, pid))
            for pid in participant_ids
        ]
        balances = compute_balances(members, expenses)

        combination_balances.append(CombinationGroup(
            participant_ids=list(participant_ids),
            participant_names=[m.name for m in members],
            expenses=list(expenses),
            balances=balances,
            settlements=compute_settlements(balances),
            total_amount=sum((e.amount for e in expenses), Decimal(0))
        ))

    logger.debug(f"Trip {trip.id} has {len(combination_balances)} participant combinations")

    # Sort by total amount descending
    combination_balances.sort(key=lambda c: c.total_amount, reverse=True)
    return combination_balances
