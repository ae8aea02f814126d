"""
Domain errors raised by the balance and settlement services.
"""


class SplittingError(ValueError):
    """Base error for balance calculation failures."""


class InvalidExpenseError(SplittingError):
    """Raised when an expense cannot be split (e.g. nobody shares it)."""

    def __init__(self, expense_id: str, reason: str):
        self.expense_id = expense_id
        self.reason = reason
        super().__init__(f"Expense '{expense_id}' is invalid: {reason}")


class ParticipantNotFoundError(SplittingError):
    """Raised when a participant id is not part of the trip."""

    def __init__(self, participant_id: str):
        self.participant_id = participant_id
        super().__init__(f"Participant '{participant_id}' not found in trip")
