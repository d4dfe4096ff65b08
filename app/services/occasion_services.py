import logging
from sqlalchemy import select, delete, or_
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.dependencies import get_occasion_or_404
from app.models.occasion import Occasion
from app.models.person import Person
from app.models.subgroup import Subgroup, SubgroupMember
from app.models.expense import Expense
from app.models.expense_split import ExpenseSplit
from app.models.settlement import Settlement

logger = logging.getLogger(__name__)


async def create_occasion(db: AsyncSession, name: str):
    occasion = Occasion(name=name.strip())
    db.add(occasion)
    await db.commit()
    await db.refresh(occasion)

    logger.info("Created occasion %s (%s)", occasion.id, occasion.name)
    return occasion


async def list_occasions(db: AsyncSession):
    q = select(Occasion).order_by(Occasion.created_at.desc(), Occasion.id.desc())
    res = await db.execute(q)
    return res.scalars().all()


async def get_occasion(db: AsyncSession, occasion_id: int):
    return await get_occasion_or_404(db, occasion_id)


async def rename_occasion(db: AsyncSession, occasion_id: int, name: str):
    occasion = await get_occasion_or_404(db, occasion_id)
    occasion.name = name.strip()

    await db.commit()
    await db.refresh(occasion)
    return occasion


async def delete_occasion(db: AsyncSession, occasion_id: int):
    await get_occasion_or_404(db, occasion_id)

    expense_ids = select(Expense.id).where(Expense.occasion_id == occasion_id)
    subgroup_ids = select(Subgroup.id).where(Subgroup.occasion_id == occasion_id)

    # children first so FK checks hold without ON DELETE support
    await db.execute(delete(ExpenseSplit).where(ExpenseSplit.expense_id.in_(expense_ids)))
    await db.execute(delete(Expense).where(Expense.occasion_id == occasion_id))
    await db.execute(delete(Settlement).where(Settlement.occasion_id == occasion_id))
    await db.execute(delete(SubgroupMember).where(SubgroupMember.subgroup_id.in_(subgroup_ids)))
    await db.execute(delete(Subgroup).where(Subgroup.occasion_id == occasion_id))
    await db.execute(delete(Person).where(Person.occasion_id == occasion_id))
    await db.execute(delete(Occasion).where(Occasion.id == occasion_id))

    await db.commit()
    db.expunge_all()

    logger.info("Deleted occasion %s", occasion_id)
    return {"status": "deleted"}


async def delete_rows_for_person(db: AsyncSession, person_id: int):
    """Remove everything that references a person: paid expenses, splits, settlements, memberships."""
    paid_expense_ids = select(Expense.id).where(Expense.payer_person_id == person_id)

    await db.execute(delete(ExpenseSplit).where(
        or_(ExpenseSplit.person_id == person_id, ExpenseSplit.expense_id.in_(paid_expense_ids))
    ))
    await db.execute(delete(Expense).where(Expense.payer_person_id == person_id))
    await db.execute(delete(Settlement).where(
        or_(Settlement.from_person_id == person_id, Settlement.to_person_id == person_id)
    ))
    await db.execute(delete(SubgroupMember).where(SubgroupMember.person_id == person_id))
