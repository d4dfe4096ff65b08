from typing import Optional, Sequence
from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.dependencies import get_person_or_404, get_subgroup_or_404
from app.models.expense import Expense
from app.models.expense_split import ExpenseSplit
from app.models.settlement import Settlement
from app.schemas.activity import PersonActivityOut, SubgroupActivityOut


async def _expenses_involving(
    db: AsyncSession,
    occasion_id: int,
    person_ids: Sequence[int],
    subgroup_id: Optional[int] = None,
):
    """Expenses paid by, or split with, any of `person_ids` (or paid by the subgroup)."""
    involved = [
        Expense.payer_person_id.in_(person_ids),
        ExpenseSplit.person_id.in_(person_ids),
    ]
    if subgroup_id is not None:
        involved.append(Expense.payer_subgroup_id == subgroup_id)

    q = (
        select(Expense)
        .outerjoin(ExpenseSplit, Expense.id == ExpenseSplit.expense_id)
        .where(Expense.occasion_id == occasion_id, or_(*involved))
        .order_by(Expense.date.desc(), Expense.id.desc())
        .distinct()
    )
    res = await db.execute(q)
    return res.scalars().all()


async def _settlements_involving(
    db: AsyncSession,
    occasion_id: int,
    person_ids: Sequence[int],
    subgroup_id: Optional[int] = None,
):
    involved = [
        Settlement.from_person_id.in_(person_ids),
        Settlement.to_person_id.in_(person_ids),
    ]
    if subgroup_id is not None:
        involved += [
            Settlement.from_subgroup_id == subgroup_id,
            Settlement.to_subgroup_id == subgroup_id,
        ]

    q = (
        select(Settlement)
        .where(Settlement.occasion_id == occasion_id, or_(*involved))
        .order_by(Settlement.date.desc(), Settlement.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()


async def list_person_activity(db: AsyncSession, person_id: int):
    person = await get_person_or_404(db, person_id)

    return PersonActivityOut(
        person_id=person_id,
        expenses=await _expenses_involving(db, person.occasion_id, [person_id]),
        settlements=await _settlements_involving(db, person.occasion_id, [person_id]),
    )


async def list_subgroup_activity(db: AsyncSession, subgroup_id: int):
    subgroup = await get_subgroup_or_404(db, subgroup_id)
    member_ids = [m.person_id for m in subgroup.members]

    return SubgroupActivityOut(
        subgroup_id=subgroup_id,
        member_ids=member_ids,
        expenses=await _expenses_involving(db, subgroup.occasion_id, member_ids, subgroup_id),
        settlements=await _settlements_involving(db, subgroup.occasion_id, member_ids, subgroup_id),
    )
