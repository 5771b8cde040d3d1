import logging
from typing import Iterable, List

from tripsplit.models.balance import Balance, TransactionSuggestion
from tripsplit.utils.money import EPSILON

logger = logging.getLogger(__name__)


class DebtSimplifier:
    @staticmethod
    def simplify(balances: Iterable[Balance]) -> List[TransactionSuggestion]:
        """
        Turn net balances into a short list of payments that zero them.

        Greedy two-pointer matching of debtors against creditors, both kept
        in input order. Emits at most len(debtors) + len(creditors) - 1
        payments. Leftovers under EPSILON are dropped as rounding noise.
        An empty result means everyone is settled.
        """
        debtors = []
        creditors = []

        for balance in balances:
            if balance.net < 0:
                debtors.append([balance.name, -balance.net])  # Store positive debt amount
            elif balance.net > 0:
                creditors.append([balance.name, balance.net])

        transactions: List[TransactionSuggestion] = []

        i = 0
        j = 0

        while i < len(debtors) and j < len(creditors):
            debtor = debtors[i]
            creditor = creditors[j]

            settle_amount = min(debtor[1], creditor[1])

            if settle_amount > EPSILON:
                transactions.append(TransactionSuggestion(
                    from_user=debtor[0],
                    to_user=creditor[0],
                    amount=settle_amount
                ))

            debtor[1] -= settle_amount
            creditor[1] -= settle_amount

            if debtor[1] < EPSILON:
                i += 1
            if creditor[1] < EPSILON:
                j += 1

        logger.debug(
            "Simplified %d debtors / %d creditors into %d transactions",
            len(debtors), len(creditors), len(transactions)
        )
        return transactions
