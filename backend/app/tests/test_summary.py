"""
Tests for the trip summary, participant view and summary text.
"""
import pytest
from decimal import Decimal
from app.core.exceptions import ParticipantNotFoundError
from app.schemas.balance import BalanceStatus
from app.services.summary_service import (
    calculate_balance_summary, get_participant_view, get_balance_status, format_summary
)


def test_summary_combines_all_results(disjoint_trip):
    summary = calculate_balance_summary(disjoint_trip)

    assert summary.total_expenses == Decimal(160)
    assert len(summary.balances) == 4
    assert len(summary.combination_balances) == 2
    assert {(s.from_user_id, s.to_user_id, s.amount) for s in summary.settlements} == {
        ("B", "A", Decimal("50.00")),
        ("D", "C", Decimal("30.00")),
    }


def test_summary_is_json_serializable(mixed_trip):
    data = calculate_balance_summary(mixed_trip).model_dump(mode="json")
    assert set(data) == {"balances", "settlements", "combination_balances", "total_expenses"}


def test_participant_view_for_creditor(three_way_trip):
    summary = calculate_balance_summary(three_way_trip)
    view = get_participant_view(summary, "A")

    assert view.status == BalanceStatus.OWED
    assert view.balance.net_balance == Decimal(60)
    assert len(view.settlements) == 2


def test_participant_view_for_debtor(three_way_trip):
    view = get_participant_view(calculate_balance_summary(three_way_trip), "C")

    assert view.status == BalanceStatus.OWES
    assert [(s.from_user_id, s.to_user_id) for s in view.settlements] == [("C", "A")]


def test_participant_view_when_settled(even_trip):
    view = get_participant_view(calculate_balance_summary(even_trip), "B")

    assert view.status == BalanceStatus.SETTLED
    assert view.settlements == []


def test_participant_view_unknown_id(even_trip):
    with pytest.raises(ParticipantNotFoundError):
        get_participant_view(calculate_balance_summary(even_trip), "nobody")


@pytest.mark.parametrize("net,expected", [
    ("5", BalanceStatus.OWED),
    ("-5", BalanceStatus.OWES),
    ("0.009", BalanceStatus.SETTLED),
    ("-0.01", BalanceStatus.SETTLED),
])
def test_balance_status(net, expected):
    assert get_balance_status(Decimal(net)) == expected


def test_format_summary(three_way_trip):
    text = format_summary(calculate_balance_summary(three_way_trip), currency="EUR")
    lines = text.splitlines()

    assert lines[0] == "Total expenses: 90.00 EUR"
    assert lines[1] == "Participants: 3"
    assert "  Alice: +60.00 EUR" in lines
    assert "  Bob: -30.00 EUR" in lines
    assert "  Bob -> Alice: 30.00 EUR" in lines
    assert "  Carol -> Alice: 30.00 EUR" in lines


def test_format_summary_settled_balances_show_zero(even_trip):
    text = format_summary(calculate_balance_summary(even_trip))

    assert "  Alice: +0.00 USD" in text
    assert text.endswith("Transfers:")
