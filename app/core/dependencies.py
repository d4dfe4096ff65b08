from typing import Iterable
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.models.occasion import Occasion
from app.models.person import Person
from app.models.subgroup import Subgroup

__all__ = [
    "get_db",
    "get_occasion_or_404",
    "get_person_or_404",
    "get_subgroup_or_404",
    "ensure_people_in_occasion",
    "ensure_subgroup_in_occasion",
]


async def get_occasion_or_404(db: AsyncSession, occasion_id: int) -> Occasion:
    occasion = await db.get(Occasion, occasion_id)
    if not occasion:
        raise HTTPException(404, "Occasion does not exist")
    return occasion


async def get_person_or_404(db: AsyncSession, person_id: int) -> Person:
    person = await db.get(Person, person_id)
    if not person:
        raise HTTPException(404, "Person not found")
    return person


async def get_subgroup_or_404(db: AsyncSession, subgroup_id: int) -> Subgroup:
    subgroup = await db.get(Subgroup, subgroup_id)
    if not subgroup:
        raise HTTPException(404, "Subgroup not found")
    return subgroup


async def ensure_people_in_occasion(db: AsyncSession, occasion_id: int, person_ids: Iterable[int]):
    person_ids = set(person_ids)
    if not person_ids:
        return

    q = select(Person.id).where(
        Person.occasion_id == occasion_id,
        Person.id.in_(person_ids)
    )
    res = await db.execute(q)
    found = {row[0] for row in res.all()}

    if found != person_ids:
        raise HTTPException(400, "One or more people are not part of this occasion")


async def ensure_subgroup_in_occasion(db: AsyncSession, occasion_id: int, subgroup_id: int):
    q = select(Subgroup.id).where(
        Subgroup.occasion_id == occasion_id,
        Subgroup.id == subgroup_id
    )
    if not await db.scalar(q):
        raise HTTPException(400, "Subgroup is not part of this occasion")
