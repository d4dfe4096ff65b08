import logging
from typing import Dict, List
from fastapi import HTTPException
from sqlalchemy import select, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.dependencies import (
    get_occasion_or_404,
    get_person_or_404,
    get_subgroup_or_404,
    ensure_people_in_occasion,
)
from app.models.subgroup import Subgroup, SubgroupMember
from app.models.expense import Expense
from app.models.expense_split import ExpenseSplit
from app.models.settlement import Settlement

logger = logging.getLogger(__name__)


async def create_subgroup(db: AsyncSession, occasion_id: int, name: str, person_ids: List[int]):
    await get_occasion_or_404(db, occasion_id)

    if len(person_ids) != len(set(person_ids)):
        raise HTTPException(400, "Duplicate people in subgroup")

    await ensure_people_in_occasion(db, occasion_id, person_ids)

    subgroup = Subgroup(
        occasion_id=occasion_id,
        name=name.strip(),
        members=[SubgroupMember(person_id=pid) for pid in person_ids]
    )
    db.add(subgroup)
    await db.commit()
    await db.refresh(subgroup)
    return subgroup


async def list_subgroups(db: AsyncSession, occasion_id: int):
    q = (
        select(Subgroup)
        .where(Subgroup.occasion_id == occasion_id)
        .order_by(Subgroup.name, Subgroup.id)
    )
    res = await db.execute(q)
    return res.scalars().all()


async def get_subgroup_member_map(db: AsyncSession, occasion_id: int) -> Dict[int, List[int]]:
    """
    Returns:
        {
            subgroup_id: [person_id, ...]
        }
    """
    q = (
        select(SubgroupMember.subgroup_id, SubgroupMember.person_id)
        .join(Subgroup, Subgroup.id == SubgroupMember.subgroup_id)
        .where(Subgroup.occasion_id == occasion_id)
        .order_by(SubgroupMember.subgroup_id, SubgroupMember.id)
    )
    res = await db.execute(q)

    members: Dict[int, List[int]] = {}
    for subgroup_id, person_id in res.all():
        members.setdefault(subgroup_id, []).append(person_id)
    return members


async def rename_subgroup(db: AsyncSession, subgroup_id: int, name: str):
    subgroup = await get_subgroup_or_404(db, subgroup_id)
    subgroup.name = name.strip()

    await db.commit()
    await db.refresh(subgroup)
    return subgroup


async def add_subgroup_member(db: AsyncSession, subgroup_id: int, person_id: int):
    subgroup = await get_subgroup_or_404(db, subgroup_id)
    person = await get_person_or_404(db, person_id)

    if person.occasion_id != subgroup.occasion_id:
        raise HTTPException(400, "Person is not part of this occasion")

    q = select(SubgroupMember).where(
        SubgroupMember.subgroup_id == subgroup_id,
        SubgroupMember.person_id == person_id
    )
    if await db.scalar(q):
        raise HTTPException(400, "Person is already in this subgroup")

    member = SubgroupMember(subgroup_id=subgroup_id, person_id=person_id)
    db.add(member)
    await db.commit()
    await db.refresh(member)
    return member


async def remove_subgroup_member(db: AsyncSession, subgroup_id: int, person_id: int):
    q = select(SubgroupMember).where(
        SubgroupMember.subgroup_id == subgroup_id,
        SubgroupMember.person_id == person_id
    )
    member = await db.scalar(q)

    if not member:
        raise HTTPException(404, "Person is not in this subgroup")

    await db.delete(member)
    await db.commit()
    return {"status": "removed"}


async def delete_subgroup(db: AsyncSession, subgroup_id: int):
    await get_subgroup_or_404(db, subgroup_id)

    paid_expense_ids = select(Expense.id).where(Expense.payer_subgroup_id == subgroup_id)

    await db.execute(delete(ExpenseSplit).where(ExpenseSplit.expense_id.in_(paid_expense_ids)))
    await db.execute(delete(Expense).where(Expense.payer_subgroup_id == subgroup_id))
    await db.execute(delete(Settlement).where(
        or_(Settlement.from_subgroup_id == subgroup_id, Settlement.to_subgroup_id == subgroup_id)
    ))
    await db.execute(delete(SubgroupMember).where(SubgroupMember.subgroup_id == subgroup_id))
    await db.execute(delete(Subgroup).where(Subgroup.id == subgroup_id))

    await db.commit()
    db.expunge_all()

    logger.info("Deleted subgroup %s", subgroup_id)
    return {"status": "deleted"}
