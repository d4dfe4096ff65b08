import logging
from decimal import Decimal
from typing import Dict, List, Mapping, Optional, Sequence

from app.core.utils import ZERO, to_decimal
from app.schemas.balances import Balance

logger = logging.getLogger(__name__)

SubgroupMembers = Mapping[int, Sequence[int]]


def _attribute_to_subgroup(
    acc: Dict[int, Decimal],
    subgroup_id: int,
    amount: Decimal,
    subgroup_members: Optional[SubgroupMembers],
) -> bool:
    """
    Spread `amount` evenly over the members of a subgroup that are present
    in `acc`. Returns False when the subgroup can't be resolved.
    """
    if subgroup_members is None:
        return False

    members = [pid for pid in subgroup_members.get(subgroup_id, ()) if pid in acc]
    if not members:
        return False

    share = amount / len(members)
    for pid in members:
        acc[pid] += share
    return True


def compute_balances(
    people: Sequence,
    expenses: Sequence,
    splits: Sequence,
    settlements: Sequence,
    subgroup_members: Optional[SubgroupMembers] = None,
) -> List[Balance]:
    """
    Reduce an occasion's history to one signed balance per person.

    balance = paid - owed + settled_out - settled_in

    Positive means the person is owed money. Every person in `people` shows
    up exactly once, sorted by balance descending (stable, so ties keep
    input order).

    References to people outside `people` are ignored. Subgroup payers and
    subgroup settlement parties are ignored too unless `subgroup_members`
    (subgroup_id -> [person_id, ...]) is given, in which case the amount is
    attributed evenly to the members.
    """
    acc: Dict[int, Decimal] = {}
    names: Dict[int, str] = {}
    for person in people:
        acc[person.id] = ZERO
        names[person.id] = person.name

    # paid
    for exp in expenses:
        amount = to_decimal(exp.amount)
        payer_id = getattr(exp, "payer_person_id", None)
        payer_subgroup_id = getattr(exp, "payer_subgroup_id", None)

        if payer_id is not None:
            if payer_id in acc:
                acc[payer_id] += amount
            else:
                logger.debug("Expense %s paid by unknown person %s, skipped", exp.id, payer_id)
        elif payer_subgroup_id is not None:
            if not _attribute_to_subgroup(acc, payer_subgroup_id, amount, subgroup_members):
                logger.warning(
                    "Expense %s paid by subgroup %s not attributed to any balance",
                    exp.id, payer_subgroup_id,
                )

    # owed
    for s in splits:
        if s.person_id in acc:
            acc[s.person_id] -= to_decimal(s.amount)
        else:
            logger.debug("Split %s for unknown person %s, skipped", getattr(s, "id", None), s.person_id)

    # settlements: paying raises your balance, receiving lowers it
    for st in settlements:
        amount = to_decimal(st.amount)

        from_id = getattr(st, "from_person_id", None)
        from_subgroup_id = getattr(st, "from_subgroup_id", None)
        if from_id is not None:
            if from_id in acc:
                acc[from_id] += amount
            else:
                logger.debug("Settlement %s from unknown person %s, skipped", st.id, from_id)
        elif from_subgroup_id is not None:
            if not _attribute_to_subgroup(acc, from_subgroup_id, amount, subgroup_members):
                logger.warning("Settlement %s from subgroup %s ignored", st.id, from_subgroup_id)

        to_id = getattr(st, "to_person_id", None)
        to_subgroup_id = getattr(st, "to_subgroup_id", None)
        if to_id is not None:
            if to_id in acc:
                acc[to_id] -= amount
            else:
                logger.debug("Settlement %s to unknown person %s, skipped", st.id, to_id)
        elif to_subgroup_id is not None:
            if not _attribute_to_subgroup(acc, to_subgroup_id, -amount, subgroup_members):
                logger.warning("Settlement %s to subgroup %s ignored", st.id, to_subgroup_id)

    balances = [
        Balance(person_id=pid, person_name=names[pid], balance=bal)
        for pid, bal in acc.items()
    ]
    balances.sort(key=lambda b: b.balance, reverse=True)

    return balances
