"""
Summary service combining balances, settlements and combinations for a trip.
"""
import logging
from decimal import Decimal
from app.core.config import settings
from app.core.exceptions import ParticipantNotFoundError
from app.core.utils import round_money
from app.schemas.balance import BalanceStatus, BalanceSummary, ParticipantView
from app.schemas.trip import Trip
from app.services.balance_service import compute_balances
from app.services.combination_service import compute_combination_balances
from app.services.settlement_service import compute_settlements

logger = logging.getLogger(__name__)


def calculate_balance_summary(trip: Trip) -> BalanceSummary:
    """
    Calculate balances and settlements for a trip.
    Returns a fresh BalanceSummary; the trip itself is left untouched.
    """
    balances = compute_balances(trip.participants, trip.expenses)
    settlements = compute_settlements(balances)
    combination_balances = compute_combination_balances(trip)
    total_expenses = sum((e.amount for e in trip.expenses), Decimal(0))

    logger.info(
        f"Trip {trip.id}: {len(trip.expenses)} expenses, "
        f"{len(settlements)} settlements, {len(combination_balances)} combinations"
    )

    return BalanceSummary(
        balances=balances,
        settlements=settlements,
        combination_balances=combination_balances,
        total_expenses=total_expenses
    )


def get_balance_status(net_balance: Decimal, tolerance: Decimal = None) -> BalanceStatus:
    """Classify a net balance as owed, owes or settled."""
    if tolerance is None:
        tolerance = settings.SETTLEMENT_TOLERANCE
    if net_balance > tolerance:
        return BalanceStatus.OWED
    if net_balance < -tolerance:
        return BalanceStatus.OWES
    return BalanceStatus.SETTLED


def get_participant_view(summary: BalanceSummary, participant_id: str) -> ParticipantView:
    """Get one participant's balance and the settlements they pay or receive."""
    balance = next((b for b in summary.balances if b.user_id == participant_id), None)
    if balance is None:
        raise ParticipantNotFoundError(participant_id)

    settlements = [
        s for s in summary.settlements
        if participant_id in (s.from_user_id, s.to_user_id)
    ]
    return ParticipantView(
        balance=balance,
        settlements=settlements,
        status=get_balance_status(balance.net_balance)
    )


def format_summary(summary: BalanceSummary, currency: str = None) -> str:
    """Create a human-readable summary text of balances and transfers."""
    currency = currency or settings.CURRENCY_LABEL

    summary_lines = []
    summary_lines.append(f"Total expenses: {round_money(summary.total_expenses):.2f} {currency}")
    summary_lines.append(f"Participants: {len(summary.balances)}")
    summary_lines.append("\nNet balances:")
    for balance in summary.balances:
        net = balance.net_balance
        if get_balance_status(net) == BalanceStatus.SETTLED:
            net = Decimal(0)
        summary_lines.append(f"  {balance.user_name}: {round_money(net):+.2f} {currency}")
    summary_lines.append("\nTransfers:")
    for settlement in summary.settlements:
        summary_lines.append(
            f"  {settlement.from_user_name} -> {settlement.to_user_name}: "
            f"{settlement.amount:.2f} {currency}"
        )
    return "\n".join(summary_lines)
