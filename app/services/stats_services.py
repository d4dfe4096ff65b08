from sqlalchemy.ext.asyncio import AsyncSession
from app.core.dependencies import get_occasion_or_404, get_person_or_404, get_subgroup_or_404
from app.engine import compute_occasion_stats, compute_person_stats, compute_subgroup_stats
from app.schemas.stats import OccasionStatsOut, PersonStatsOut, SubgroupStatsOut
from app.services.expense_services import list_expenses, list_expense_splits
from app.services.person_services import list_people
from app.services.settlement_service import list_settlements


async def get_occasion_stats(db: AsyncSession, occasion_id: int):
    await get_occasion_or_404(db, occasion_id)

    people = await list_people(db, occasion_id)
    expenses = await list_expenses(db, occasion_id)

    return OccasionStatsOut(occasion_id=occasion_id, **compute_occasion_stats(people, expenses))


async def get_person_stats(db: AsyncSession, person_id: int):
    person = await get_person_or_404(db, person_id)

    expenses = await list_expenses(db, person.occasion_id)
    splits = await list_expense_splits(db, person.occasion_id)
    settlements = await list_settlements(db, person.occasion_id)

    return PersonStatsOut(
        person_id=person_id,
        **compute_person_stats(person_id, expenses, splits, settlements)
    )


async def get_subgroup_stats(db: AsyncSession, subgroup_id: int):
    subgroup = await get_subgroup_or_404(db, subgroup_id)
    member_ids = [m.person_id for m in subgroup.members]

    expenses = await list_expenses(db, subgroup.occasion_id)
    splits = await list_expense_splits(db, subgroup.occasion_id)
    settlements = await list_settlements(db, subgroup.occasion_id)

    return SubgroupStatsOut(
        subgroup_id=subgroup_id,
        **compute_subgroup_stats(member_ids, expenses, splits, settlements)
    )
