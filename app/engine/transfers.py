import logging
from decimal import Decimal
from typing import List, Sequence

from app.core.utils import TOLERANCE, to_decimal
from app.schemas.balances import Balance, SuggestedTransfer

logger = logging.getLogger(__name__)


def suggest_transfers(
    balances: Sequence[Balance],
    tolerance: Decimal = TOLERANCE,
) -> List[SuggestedTransfer]:
    """
    Greedy algorithm to minimize number of transactions.

    Repeatedly matches the largest creditor with the largest debtor and
    moves min(credit, debt) between them. Balances within `tolerance` of
    zero count as settled, which absorbs the residue left by equal splits.

    An empty list means everyone is settled up.
    """
    # [id, name, remaining]; debtors hold the magnitude of what they owe
    creditors = [[b.person_id, b.person_name, to_decimal(b.balance)] for b in balances if b.balance > tolerance]
    debtors = [[b.person_id, b.person_name, -to_decimal(b.balance)] for b in balances if b.balance < -tolerance]

    transfers: List[SuggestedTransfer] = []

    while creditors and debtors:
        # amounts shrink every round, so re-sort each time; sort() is stable
        creditors.sort(key=lambda x: x[2], reverse=True)
        debtors.sort(key=lambda x: x[2], reverse=True)

        creditor = creditors[0]
        debtor = debtors[0]

        amount = min(creditor[2], debtor[2])
        transfers.append(SuggestedTransfer(
            from_id=debtor[0],
            from_name=debtor[1],
            to_id=creditor[0],
            to_name=creditor[1],
            amount=amount,
        ))

        creditor[2] -= amount
        debtor[2] -= amount

        if creditor[2] < tolerance:
            creditors.pop(0)
        if debtor[2] < tolerance:
            debtors.pop(0)

    logger.debug("Suggested %d transfers for %d balances", len(transfers), len(balances))
    return transfers
