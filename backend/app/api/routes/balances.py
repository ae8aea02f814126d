"""
Balance and settlement routes.
"""
import logging
from fastapi import APIRouter, HTTPException, status
from typing import List, Optional
from app.core.exceptions import InvalidExpenseError, ParticipantNotFoundError
from app.core.utils import format_response
from app.schemas.balance import BalanceSummary, CombinationGroup, ParticipantView
from app.schemas.settlement import Settlement
from app.schemas.trip import Trip
from app.services.summary_service import (
    calculate_balance_summary, get_participant_view, format_summary
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/balances", tags=["balances"])


def summarize_trip(trip: Trip) -> BalanceSummary:
    """Calculate the balance summary, mapping invalid expenses to 422."""
    try:
        return calculate_balance_summary(trip)
    except InvalidExpenseError as e:
        logger.warning(f"Rejected trip {trip.id}: {e}")
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e)
        )


@router.post("", response_model=BalanceSummary)
async def get_balance_summary(trip: Trip):
    """Get balances, settlements and combination breakdown for a trip."""
    return summarize_trip(trip)


@router.post("/settlements", response_model=List[Settlement])
async def get_settlements(trip: Trip):
    """Get the suggested transfers that settle the whole trip."""
    return summarize_trip(trip).settlements


@router.post("/combinations", response_model=List[CombinationGroup])
async def get_combination_balances(trip: Trip):
    """Get balances grouped by the exact set of people sharing expenses."""
    return summarize_trip(trip).combination_balances


@router.post("/participants/{participant_id}", response_model=ParticipantView)
async def get_participant_balance(participant_id: str, trip: Trip):
    """Get a single participant's balance and their settlements."""
    summary = summarize_trip(trip)
    try:
        return get_participant_view(summary, participant_id)
    except ParticipantNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )


@router.post("/summary")
async def get_summary_text(trip: Trip, currency: Optional[str] = None):
    """Get a plain-text report of balances and transfers."""
    summary = summarize_trip(trip)
    return format_response(format_summary(summary, currency), message="Summary generated")
