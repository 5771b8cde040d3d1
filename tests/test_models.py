from tripsplit.models.balance import TransactionSuggestion
from tripsplit.models.expense import Expense, SplitType
from tripsplit.models.settlement import Settlement, SettlementStatus
from tripsplit.utils.money import approx_equal, is_negligible, money_sum, round_money


def test_share_for_fair_split_uses_stored_amount():
    # per_person_amount is not recomputed from split_between
    expense = Expense(amount=90.0, paid_by="A", split_between=["A", "B"], per_person_amount=30.0)

    assert expense.share_for("B") == 30.0


def test_share_for_custom_without_splits_falls_back_to_stored_amount():
    expense = Expense(amount=90.0, paid_by="A", split_between=["A", "B"], split_type=SplitType.CUSTOM)

    assert expense.share_for("B") == 0.0


def test_settlement_aliases_round_trip():
    settlement = Settlement.model_validate({"from": "Bob", "to": "Alice", "amount": 12.0})

    assert settlement.from_user == "Bob"
    assert settlement.status == SettlementStatus.PENDING
    dumped = settlement.model_dump(by_alias=True)
    assert dumped["from"] == "Bob"
    assert dumped["to"] == "Alice"


def test_suggestion_serializes_from_and_to():
    txn = TransactionSuggestion(from_user="Bob", to_user="Alice", amount=5.0)

    assert txn.model_dump(by_alias=True) == {"from": "Bob", "to": "Alice", "amount": 5.0}


def test_money_helpers():
    assert money_sum([0.1] * 10) == 1.0
    assert is_negligible(0.009)
    assert not is_negligible(-0.01)
    assert approx_equal(100.0, 100.009)
    assert not approx_equal(100.0, 100.02)
    assert round_money(10.005 + 0.001) == 10.01
