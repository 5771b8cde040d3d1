import logging
from typing import Iterable, List, Optional, Sequence

from tripsplit.models.balance import TransactionSuggestion
from tripsplit.models.expense import Expense
from tripsplit.models.settlement import Settlement
from tripsplit.models.trip import Trip
from tripsplit.schemas.plan import SettlementPlan
from tripsplit.schemas.settlement import SettlementCreate
from tripsplit.services.balance_service import BalanceEngine
from tripsplit.services.debt_simplifier import DebtSimplifier
from tripsplit.services.outstanding_service import OutstandingNetter
from tripsplit.utils.money import approx_equal, money_sum, round_money
from tripsplit.utils.validation import validate_settlement

logger = logging.getLogger(__name__)


class SettlementService:
    @staticmethod
    def create(trip: Trip, settlement_in: SettlementCreate) -> Settlement:
        """Validate and build a settlement, pending or already paid."""
        validate_settlement(settlement_in, trip.participants)

        settlement = Settlement(
            trip_id=trip.id,
            from_user=settlement_in.from_user,
            to_user=settlement_in.to_user,
            amount=settlement_in.amount,
            proof_image_url=settlement_in.proof_image_url,
        )
        if settlement_in.is_paid:
            settlement = settlement.mark_paid()
        return settlement

    @staticmethod
    def mark_as_paid(settlement: Settlement, proof_image_url: Optional[str] = None) -> Settlement:
        """Pending -> paid. Raises SettlementStateError if already paid."""
        paid = settlement.mark_paid(proof_image_url)
        logger.info("Settlement %s paid: %s -> %s %.2f", paid.id, paid.from_user, paid.to_user, paid.amount)
        return paid

    @staticmethod
    def untracked_suggestions(
        suggestions: Iterable[TransactionSuggestion],
        settlements: Iterable[Settlement],
    ) -> List[TransactionSuggestion]:
        """Drop suggestions already covered by a matching pending settlement."""
        pending = [s for s in settlements if not s.is_paid]
        return [
            txn for txn in suggestions
            if not any(
                s.from_user == txn.from_user
                and s.to_user == txn.to_user
                and approx_equal(s.amount, txn.amount)
                for s in pending
            )
        ]

    @staticmethod
    def build_plan(
        participants: Sequence[str],
        expenses: Iterable[Expense],
        settlements: Iterable[Settlement],
    ) -> SettlementPlan:
        """Balances, suggested and outstanding payments for one trip snapshot."""
        expenses = list(expenses)
        settlements = list(settlements)

        balances = BalanceEngine.compute_balances(participants, expenses, settlements)
        suggested = SettlementService.untracked_suggestions(DebtSimplifier.simplify(balances), settlements)
        outstanding = OutstandingNetter.net_outstanding(expenses, settlements)

        pending = [s for s in settlements if not s.is_paid]
        paid = [s for s in settlements if s.is_paid]

        return SettlementPlan(
            balances=balances,
            suggested=suggested,
            outstanding=outstanding,
            pending=pending,
            paid=paid,
            total_spent=round_money(money_sum(exp.amount for exp in expenses)),
            is_settled=not suggested and not pending and not paid,
        )
