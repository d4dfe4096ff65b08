import logging
from datetime import date
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.config import settings
from app.core.dependencies import (
    get_occasion_or_404,
    ensure_people_in_occasion,
    ensure_subgroup_in_occasion,
)
from app.core.utils import is_settled, qround
from app.engine import compute_balances, suggest_transfers
from app.models.settlement import Settlement
from app.schemas.balances import AcceptSuggestion, OccasionBalancesOut
from app.schemas.settlements import SettlementCreate
from app.services.expense_services import list_expenses, list_expense_splits
from app.services.person_services import list_people
from app.services.subgroup_services import get_subgroup_member_map

logger = logging.getLogger(__name__)


async def record_settlement(db: AsyncSession, occasion_id: int, data: SettlementCreate):
    await get_occasion_or_404(db, occasion_id)

    people = [pid for pid in (data.from_person_id, data.to_person_id) if pid is not None]
    await ensure_people_in_occasion(db, occasion_id, people)

    for subgroup_id in (data.from_subgroup_id, data.to_subgroup_id):
        if subgroup_id is not None:
            await ensure_subgroup_in_occasion(db, occasion_id, subgroup_id)

    settlement = Settlement(
        occasion_id=occasion_id,
        from_person_id=data.from_person_id,
        from_subgroup_id=data.from_subgroup_id,
        to_person_id=data.to_person_id,
        to_subgroup_id=data.to_subgroup_id,
        amount=qround(data.amount),
        date=data.date or date.today()
    )

    db.add(settlement)
    await db.commit()
    await db.refresh(settlement)

    logger.info("Settlement %s recorded in occasion %s", settlement.id, occasion_id)
    return settlement


async def list_settlements(db: AsyncSession, occasion_id: int):
    q = (
        select(Settlement)
        .where(Settlement.occasion_id == occasion_id)
        .order_by(Settlement.date.desc(), Settlement.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()


async def delete_settlement(db: AsyncSession, settlement_id: int):
    settlement = await db.get(Settlement, settlement_id)

    if not settlement:
        raise HTTPException(404, "Settlement entry not found")

    await db.delete(settlement)
    await db.commit()

    return {"status": "undo successful"}


async def get_occasion_balances(db: AsyncSession, occasion_id: int) -> OccasionBalancesOut:
    """
    Fetch a fresh snapshot of the occasion and run the settlement engine on it.
    """
    await get_occasion_or_404(db, occasion_id)

    people = await list_people(db, occasion_id)
    expenses = await list_expenses(db, occasion_id)
    splits = await list_expense_splits(db, occasion_id)
    settlements = await list_settlements(db, occasion_id)

    subgroup_members = None
    if settings.SUBGROUP_PAYER_POLICY == "members":
        subgroup_members = await get_subgroup_member_map(db, occasion_id)

    balances = compute_balances(people, expenses, splits, settlements, subgroup_members)
    suggestions = suggest_transfers(balances, settings.SETTLEMENT_TOLERANCE)

    return OccasionBalancesOut(
        occasion_id=occasion_id,
        balances=balances,
        suggestions=suggestions,
        settled=is_settled((b.balance for b in balances), settings.SETTLEMENT_TOLERANCE),
    )


async def get_settlement_suggestions(db: AsyncSession, occasion_id: int):
    result = await get_occasion_balances(db, occasion_id)
    return result.suggestions


async def is_occasion_settled(db: AsyncSession, occasion_id: int) -> bool:
    result = await get_occasion_balances(db, occasion_id)
    return result.settled


async def accept_suggestion(db: AsyncSession, occasion_id: int, data: AcceptSuggestion):
    """Turn a suggested transfer into a recorded settlement."""
    if data.from_person_id == data.to_person_id:
        raise HTTPException(400, "A person can't settle with themselves")

    amount = qround(data.amount)
    if amount <= 0:
        raise HTTPException(400, "Settlement amount must be positive")

    return await record_settlement(db, occasion_id, SettlementCreate(
        from_person_id=data.from_person_id,
        to_person_id=data.to_person_id,
        amount=amount,
    ))
