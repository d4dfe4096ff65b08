from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.person import PersonCreate, PersonUpdate, PersonOut
from app.schemas.activity import PersonActivityOut
from app.schemas.stats import PersonStatsOut
from app.services.person_services import create_person, list_people, rename_person, delete_person
from app.services.activity_services import list_person_activity
from app.services.stats_services import get_person_stats

router = APIRouter()

@router.post("/occasions/{occasion_id}/people", response_model=PersonOut, status_code=201)
async def add_person(occasion_id: int, data: PersonCreate, db: AsyncSession = Depends(get_db)):
    return await create_person(db, occasion_id, data.name)

@router.get("/occasions/{occasion_id}/people", response_model=list[PersonOut])
async def all_people(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await list_people(db, occasion_id)

@router.patch("/people/{person_id}", response_model=PersonOut)
async def edit_person(person_id: int, data: PersonUpdate, db: AsyncSession = Depends(get_db)):
    return await rename_person(db, person_id, data.name)

@router.delete("/people/{person_id}")
async def del_person(person_id: int, db: AsyncSession = Depends(get_db)):
    return await delete_person(db, person_id)

@router.get("/people/{person_id}/stats", response_model=PersonStatsOut)
async def person_stats(person_id: int, db: AsyncSession = Depends(get_db)):
    return await get_person_stats(db, person_id)

# expenses they paid or share in, and their settlements
@router.get("/people/{person_id}/activity", response_model=PersonActivityOut)
async def person_activity(person_id: int, db: AsyncSession = Depends(get_db)):
    return await list_person_activity(db, person_id)
