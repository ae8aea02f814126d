"""
Settlement service for suggesting the payments that settle a trip.
"""
import logging
from typing import List
from decimal import Decimal
from app.core.config import settings
from app.core.utils import round_money
from app.schemas.balance import Balance
from app.schemas.settlement import Settlement

logger = logging.getLogger(__name__)


def compute_settlements(balances: List[Balance], tolerance: Decimal = None) -> List[Settlement]:
    """
    Minimize the number of transfers needed to settle debts.

    Uses a greedy algorithm: the largest debtor pays the largest creditor
    until one of them is settled, then the next one in line takes over.
    Balances within the tolerance of zero are treated as settled. The input
    balances are not modified.
    """
    if tolerance is None:
        tolerance = settings.SETTLEMENT_TOLERANCE

    # Separate creditors (positive balance) and debtors (negative balance)
    creditors = [
        (b.user_id, b.user_name, b.net_balance)
        for b in balances if b.net_balance > tolerance
    ]
    debtors = [
        (b.user_id, b.user_name, -b.net_balance)  # Store as positive for easier calculation
        for b in balances if b.net_balance < -tolerance
    ]

    # Sort in descending order
    creditors.sort(key=lambda x: x[2], reverse=True)
    debtors.sort(key=lambda x: x[2], reverse=True)

    transfers = []
    cred_idx = 0
    debt_idx = 0

    while cred_idx < len(creditors) and debt_idx < len(debtors):
        creditor_id, creditor_name, cred_amount = creditors[cred_idx]
        debtor_id, debtor_name, debt_amount = debtors[debt_idx]

        # Transfer the minimum of what's owed and what's needed
        transfer_amount = min(cred_amount, debt_amount)
        if transfer_amount > tolerance:
            transfers.append(Settlement(
                from_user_id=debtor_id,
                from_user_name=debtor_name,
                to_user_id=creditor_id,
                to_user_name=creditor_name,
                amount=round_money(transfer_amount)
            ))

        # Remainders keep full precision, rounding is only applied on emission
        creditors[cred_idx] = (creditor_id, creditor_name, cred_amount - transfer_amount)
        debtors[debt_idx] = (debtor_id, debtor_name, debt_amount - transfer_amount)

        if creditors[cred_idx][2] < tolerance:
            cred_idx += 1
        if debtors[debt_idx][2] < tolerance:
            debt_idx += 1

    logger.debug(
        f"Settled {len(creditors)} creditors and {len(debtors)} debtors "
        f"with {len(transfers)} transfers"
    )
    return transfers
