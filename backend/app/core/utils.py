"""
Utility functions for the application.
"""
from typing import Any, Dict
from decimal import Decimal, ROUND_HALF_UP, localcontext
from app.core.config import settings


def round_money(amount: Decimal, decimals: int = None) -> Decimal:
    """Round a money amount half-up to the configured number of decimal places."""
    if decimals is None:
        decimals = settings.SETTLEMENT_DECIMALS
    amount = Decimal(amount)
    quantum = Decimal(1).scaleb(-decimals)
    # Quantizing needs room for every integer digit plus the decimals
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + decimals + 2)
        return amount.quantize(quantum, rounding=ROUND_HALF_UP)


def format_response(data: Any, message: str = "Success") -> Dict[str, Any]:
    """Format API response."""
    return {
        "message": message,
        "data": data
    }
