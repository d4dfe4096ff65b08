import logging
from datetime import date
from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.dependencies import (
    get_occasion_or_404,
    ensure_people_in_occasion,
    ensure_subgroup_in_occasion,
)
from app.core.utils import split_equally, qround
from app.models.expense import Expense
from app.models.expense_split import ExpenseSplit
from app.schemas.expense import ExpenseCreate, ExpenseUpdate

logger = logging.getLogger(__name__)


async def create_expense(db: AsyncSession, occasion_id: int, data: ExpenseCreate):
    await get_occasion_or_404(db, occasion_id)

    # -----------------------------------
    # 1. Validate payer
    # -----------------------------------
    if data.payer_person_id is not None:
        await ensure_people_in_occasion(db, occasion_id, [data.payer_person_id])
    else:
        await ensure_subgroup_in_occasion(db, occasion_id, data.payer_subgroup_id)

    # -----------------------------------
    # 2. Validate the people it's split between
    # -----------------------------------
    person_ids = data.person_ids

    if len(person_ids) != len(set(person_ids)):
        raise HTTPException(400, "Duplicate people found in splits")

    await ensure_people_in_occasion(db, occasion_id, person_ids)

    # -----------------------------------
    # 3. Create expense with equal splits
    # -----------------------------------
    amount = qround(data.amount)
    shares = split_equally(amount, len(person_ids))

    expense = Expense(
        occasion_id=occasion_id,
        payer_person_id=data.payer_person_id,
        payer_subgroup_id=data.payer_subgroup_id,
        amount=amount,
        description=data.description.strip(),
        category=data.category or "general",
        note=data.note,
        date=data.date or date.today(),
        splits=[
            ExpenseSplit(person_id=pid, amount=share)
            for pid, share in zip(person_ids, shares)
        ]
    )

    db.add(expense)
    await db.commit()
    await db.refresh(expense)

    logger.info(
        "Expense %s (%s) added to occasion %s, split %d ways",
        expense.id, amount, occasion_id, len(person_ids),
    )
    return expense


async def list_expenses(db: AsyncSession, occasion_id: int):
    q = (
        select(Expense)
        .where(Expense.occasion_id == occasion_id)
        .order_by(Expense.date.desc(), Expense.id.desc())
    )
    res = await db.execute(q)
    return res.scalars().all()


async def list_all_expense_splits(db: AsyncSession):
    res = await db.execute(select(ExpenseSplit).order_by(ExpenseSplit.id))
    return res.scalars().all()


async def list_expense_splits(db: AsyncSession, occasion_id: int):
    q = (
        select(ExpenseSplit)
        .join(Expense, Expense.id == ExpenseSplit.expense_id)
        .where(Expense.occasion_id == occasion_id)
        .order_by(ExpenseSplit.id)
    )
    res = await db.execute(q)
    return res.scalars().all()


async def get_expense_detail(db: AsyncSession, expense_id: int):
    expense = await db.get(Expense, expense_id)

    if not expense:
        raise HTTPException(404, "Expense not found")

    return expense


async def update_expense(db: AsyncSession, expense_id: int, data: ExpenseUpdate):
    expense = await get_expense_detail(db, expense_id)
    occasion_id = expense.occasion_id
    fields = data.model_fields_set

    # -----------------------------------
    # 1. Payer
    # -----------------------------------
    if data.payer_person_id is not None:
        await ensure_people_in_occasion(db, occasion_id, [data.payer_person_id])
        expense.payer_person_id = data.payer_person_id
        expense.payer_subgroup_id = None
    elif data.payer_subgroup_id is not None:
        await ensure_subgroup_in_occasion(db, occasion_id, data.payer_subgroup_id)
        expense.payer_subgroup_id = data.payer_subgroup_id
        expense.payer_person_id = None

    # -----------------------------------
    # 2. People it is split between
    # -----------------------------------
    if data.person_ids is not None:
        person_ids = data.person_ids
        if len(person_ids) != len(set(person_ids)):
            raise HTTPException(400, "Duplicate people found in splits")
        await ensure_people_in_occasion(db, occasion_id, person_ids)
    else:
        person_ids = [s.person_id for s in sorted(expense.splits, key=lambda s: s.id)]

    # -----------------------------------
    # 3. Details
    # -----------------------------------
    if data.amount is not None:
        expense.amount = qround(data.amount)
    if data.description is not None:
        expense.description = data.description.strip()
    if data.category is not None:
        expense.category = data.category or "general"
    if "note" in fields:
        expense.note = data.note
    if data.date is not None:
        expense.date = data.date

    # -----------------------------------
    # 4. Fresh equal splits (old ones are orphaned and deleted)
    # -----------------------------------
    shares = split_equally(expense.amount, len(person_ids))
    expense.splits = [
        ExpenseSplit(person_id=pid, amount=share)
        for pid, share in zip(person_ids, shares)
    ]

    await db.commit()
    await db.refresh(expense)

    logger.info("Expense %s updated, split %d ways", expense_id, len(person_ids))
    return expense


async def delete_expense(db: AsyncSession, expense_id: int):
    expense = await get_expense_detail(db, expense_id)

    # splits go with it (delete-orphan)
    await db.delete(expense)
    await db.commit()

    logger.info("Deleted expense %s", expense_id)
    return {"status": "deleted"}
