import logging
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession
from app.core.dependencies import get_occasion_or_404, get_person_or_404
from app.models.person import Person
from app.services.occasion_services import delete_rows_for_person

logger = logging.getLogger(__name__)


async def create_person(db: AsyncSession, occasion_id: int, name: str):
    await get_occasion_or_404(db, occasion_id)

    person = Person(occasion_id=occasion_id, name=name.strip())
    db.add(person)
    await db.commit()
    await db.refresh(person)
    return person


async def list_people(db: AsyncSession, occasion_id: int):
    q = (
        select(Person)
        .where(Person.occasion_id == occasion_id)
        .order_by(Person.id)
    )
    res = await db.execute(q)
    return res.scalars().all()


async def get_person(db: AsyncSession, person_id: int):
    return await get_person_or_404(db, person_id)


async def rename_person(db: AsyncSession, person_id: int, name: str):
    person = await get_person_or_404(db, person_id)
    person.name = name.strip()

    await db.commit()
    await db.refresh(person)
    return person


async def delete_person(db: AsyncSession, person_id: int):
    await get_person_or_404(db, person_id)

    await delete_rows_for_person(db, person_id)
    await db.execute(delete(Person).where(Person.id == person_id))

    await db.commit()
    db.expunge_all()

    logger.info("Deleted person %s and everything referencing them", person_id)
    return {"status": "deleted"}
