import logging
from typing import Iterable, List, Sequence

from tripsplit.models.balance import Balance
from tripsplit.models.expense import Expense
from tripsplit.models.settlement import Settlement
from tripsplit.utils.money import money_sum

logger = logging.getLogger(__name__)


class BalanceEngine:
    @staticmethod
    def compute_balances(
        participants: Sequence[str],
        expenses: Iterable[Expense],
        settlements: Iterable[Settlement],
    ) -> List[Balance]:
        """
        Compute paid / owed / net for every participant, in input order.

        A paid settlement counts as an extra payment made by its sender and
        an extra liability of its receiver. Pending settlements are ignored.
        """
        expenses = list(expenses)
        paid_settlements = [s for s in settlements if s.is_paid]

        balances: List[Balance] = []
        for name in participants:
            paid_parts = [exp.amount for exp in expenses if exp.paid_by == name]
            owed_parts = [exp.share_for(name) for exp in expenses if name in exp.split_between]

            for settlement in paid_settlements:
                if settlement.from_user == name:
                    paid_parts.append(settlement.amount)
                if settlement.to_user == name:
                    owed_parts.append(settlement.amount)

            paid = money_sum(paid_parts)
            owed = money_sum(owed_parts)
            balances.append(Balance(name=name, paid=paid, owed=owed, net=paid - owed))

        logger.debug(
            "Computed %d balances from %d expenses and %d paid settlements",
            len(balances), len(expenses), len(paid_settlements)
        )
        return balances
