"""
Outstanding amounts between specific people.

Unlike DebtSimplifier this keeps who actually paid for whom:

1. Every non-payer in an expense owes the payer their share.
2. Tracked settlements (paid or pending) between the same ordered pair
   are subtracted, never below zero.
3. Opposite directions of a pair are netted into a single direction.
"""

import logging
from typing import Dict, Iterable, List, Tuple

from tripsplit.models.balance import TransactionSuggestion
from tripsplit.models.expense import Expense
from tripsplit.models.settlement import Settlement
from tripsplit.utils.money import SHARE_EPSILON

logger = logging.getLogger(__name__)


class OutstandingNetter:
    @staticmethod
    def net_outstanding(
        expenses: Iterable[Expense],
        settlements: Iterable[Settlement],
    ) -> List[TransactionSuggestion]:
        # (debtor, creditor) -> amount
        outstanding: Dict[Tuple[str, str], float] = {}

        for exp in expenses:
            for name in exp.split_between:
                if name == exp.paid_by:
                    continue  # no self-transfer
                share = exp.share_for(name)
                if share > SHARE_EPSILON:
                    key = (name, exp.paid_by)
                    outstanding[key] = outstanding.get(key, 0.0) + share

        for settlement in settlements:
            key = (settlement.from_user, settlement.to_user)
            if key not in outstanding:
                continue
            remaining = outstanding[key] - settlement.amount
            outstanding[key] = remaining if remaining > SHARE_EPSILON else 0.0

        # (lower, higher) -> signed amount, positive when lower owes higher
        pair_totals: Dict[Tuple[str, str], float] = {}
        for (debtor, creditor), amount in outstanding.items():
            if amount <= SHARE_EPSILON:
                continue
            lower, higher = sorted((debtor, creditor))
            delta = amount if debtor == lower else -amount
            pair_totals[(lower, higher)] = pair_totals.get((lower, higher), 0.0) + delta

        netted: List[TransactionSuggestion] = []
        for (lower, higher), total in pair_totals.items():
            if abs(total) <= SHARE_EPSILON:
                continue
            if total > 0:
                netted.append(TransactionSuggestion(from_user=lower, to_user=higher, amount=total))
            else:
                netted.append(TransactionSuggestion(from_user=higher, to_user=lower, amount=-total))

        netted.sort(key=lambda txn: txn.amount, reverse=True)

        logger.debug("Netted %d ordered pairs into %d outstanding payments", len(outstanding), len(netted))
        return netted
