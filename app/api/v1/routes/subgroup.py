from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.subgroup import SubgroupCreate, SubgroupUpdate, SubgroupOut, SubgroupMemberOut
from app.schemas.activity import SubgroupActivityOut
from app.schemas.stats import SubgroupStatsOut
from app.services.subgroup_services import (
    create_subgroup,
    list_subgroups,
    rename_subgroup,
    add_subgroup_member,
    remove_subgroup_member,
    delete_subgroup,
)
from app.services.activity_services import list_subgroup_activity
from app.services.stats_services import get_subgroup_stats

router = APIRouter()

@router.post("/occasions/{occasion_id}/subgroups", response_model=SubgroupOut, status_code=201)
async def add_subgroup(occasion_id: int, data: SubgroupCreate, db: AsyncSession = Depends(get_db)):
    return await create_subgroup(db, occasion_id, data.name, data.person_ids)

@router.get("/occasions/{occasion_id}/subgroups", response_model=list[SubgroupOut])
async def all_subgroups(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await list_subgroups(db, occasion_id)

@router.post("/subgroups/{subgroup_id}/members/{person_id}", response_model=SubgroupMemberOut, status_code=201)
async def add_member(subgroup_id: int, person_id: int, db: AsyncSession = Depends(get_db)):
    return await add_subgroup_member(db, subgroup_id, person_id)

@router.delete("/subgroups/{subgroup_id}/members/{person_id}")
async def remove_member(subgroup_id: int, person_id: int, db: AsyncSession = Depends(get_db)):
    return await remove_subgroup_member(db, subgroup_id, person_id)

@router.delete("/subgroups/{subgroup_id}")
async def del_subgroup(subgroup_id: int, db: AsyncSession = Depends(get_db)):
    return await delete_subgroup(db, subgroup_id)

@router.get("/subgroups/{subgroup_id}/stats", response_model=SubgroupStatsOut)
async def subgroup_stats(subgroup_id: int, db: AsyncSession = Depends(get_db)):
    return await get_subgroup_stats(db, subgroup_id)

@router.patch("/subgroups/{subgroup_id}", response_model=SubgroupOut)
async def edit_subgroup(subgroup_id: int, data: SubgroupUpdate, db: AsyncSession = Depends(get_db)):
    return await rename_subgroup(db, subgroup_id, data.name)

@router.get("/subgroups/{subgroup_id}/activity", response_model=SubgroupActivityOut)
async def subgroup_activity(subgroup_id: int, db: AsyncSession = Depends(get_db)):
    return await list_subgroup_activity(db, subgroup_id)
