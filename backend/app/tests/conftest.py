"""
Shared fixtures for balance and settlement tests.
"""
import pytest
from app.schemas.expense import Expense
from app.schemas.trip import Participant, Trip


def make_trip(names, expenses):
    """Build a trip from {id: name} and (amount, paid_by, participant_ids) tuples."""
    return Trip(
        id="trip1",
        name="Test trip",
        participants=[Participant(id=pid, name=name) for pid, name in names.items()],
        expenses=[
            Expense(id=f"e{i}", amount=amount, paid_by=paid_by, participant_ids=participant_ids)
            for i, (amount, paid_by, participant_ids) in enumerate(expenses, start=1)
        ]
    )


@pytest.fixture
def trip_factory():
    """Factory for ad-hoc trips."""
    return make_trip


@pytest.fixture
def three_way_trip():
    """A paid 90 split between A, B and C."""
    return make_trip(
        {"A": "Alice", "B": "Bob", "C": "Carol"},
        [(90, "A", ["A", "B", "C"])]
    )


@pytest.fixture
def even_trip():
    """A and B each paid 50 for both of them."""
    return make_trip(
        {"A": "Alice", "B": "Bob"},
        [(50, "A", ["A", "B"]), (50, "B", ["A", "B"])]
    )


@pytest.fixture
def disjoint_trip():
    """Two pairs that never share an expense."""
    return make_trip(
        {"A": "Alice", "B": "Bob", "C": "Carol", "D": "Dave"},
        [(100, "A", ["A", "B"]), (60, "C", ["C", "D"])]
    )


@pytest.fixture
def tie_trip():
    """B owes 15 to each of A and C."""
    return make_trip(
        {"A": "Alice", "B": "Bob", "C": "Carol"},
        [(30, "A", ["A", "B"]), (30, "C", ["B", "C"])]
    )


@pytest.fixture
def mixed_trip():
    """A larger trip with overlapping combinations and uneven splits."""
    return make_trip(
        {"A": "Alice", "B": "Bob", "C": "Carol", "D": "Dave", "E": "Eve"},
        [
            (100, "A", ["A", "B", "C"]),
            (45.5, "B", ["B", "C"]),
            (12.34, "C", ["A", "B", "C", "D", "E"]),
            (80, "D", ["C", "B", "A"]),
            (33.33, "E", ["D", "E"]),
            (7, "A", ["E"]),
        ]
    )
