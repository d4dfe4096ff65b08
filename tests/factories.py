from decimal import Decimal
from itertools import count
from types import SimpleNamespace

from app.core.utils import split_equally

_ids = count(1)


def person(pid, name):
    return SimpleNamespace(id=pid, name=name)


def expense(payer, amount, between, subgroup=None, category="general"):
    """Expense plus its equal splits, shaped like the ORM rows."""
    exp = SimpleNamespace(
        id=next(_ids),
        payer_person_id=None if subgroup else payer,
        payer_subgroup_id=subgroup,
        amount=Decimal(str(amount)),
        category=category,
    )
    splits = [
        SimpleNamespace(id=next(_ids), expense_id=exp.id, person_id=pid, amount=share)
        for pid, share in zip(between, split_equally(amount, len(between)))
    ]
    return exp, splits


def settlement(from_id, to_id, amount, from_subgroup=None, to_subgroup=None):
    return SimpleNamespace(
        id=next(_ids),
        from_person_id=from_id,
        from_subgroup_id=from_subgroup,
        to_person_id=to_id,
        to_subgroup_id=to_subgroup,
        amount=Decimal(str(amount)),
    )
