from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.occasion import OccasionCreate, OccasionUpdate, OccasionOut
from app.schemas.balances import OccasionBalancesOut, AcceptSuggestion
from app.schemas.settlements import SettlementOut
from app.schemas.stats import OccasionStatsOut
from app.services.occasion_services import create_occasion, list_occasions, get_occasion, rename_occasion, delete_occasion
from app.services.settlement_service import get_occasion_balances, accept_suggestion
from app.services.stats_services import get_occasion_stats

router = APIRouter()

@router.post("/", response_model=OccasionOut, status_code=201)
async def create_new_occasion(data: OccasionCreate, db: AsyncSession = Depends(get_db)):
    return await create_occasion(db, data.name)

@router.get("/", response_model=list[OccasionOut])
async def all_occasions(db: AsyncSession = Depends(get_db)):
    return await list_occasions(db)

@router.get("/{occasion_id}", response_model=OccasionOut)
async def fetch_occasion(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await get_occasion(db, occasion_id)

@router.patch("/{occasion_id}", response_model=OccasionOut)
async def edit_occasion(occasion_id: int, data: OccasionUpdate, db: AsyncSession = Depends(get_db)):
    return await rename_occasion(db, occasion_id, data.name)

@router.delete("/{occasion_id}")
async def del_occasion(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await delete_occasion(db, occasion_id)

@router.get("/{occasion_id}/balances", response_model=OccasionBalancesOut)
async def occasion_balances(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await get_occasion_balances(db, occasion_id)

@router.post("/{occasion_id}/suggestions/accept", response_model=SettlementOut, status_code=201)
async def accept(occasion_id: int, data: AcceptSuggestion, db: AsyncSession = Depends(get_db)):
    return await accept_suggestion(db, occasion_id, data)

@router.get("/{occasion_id}/stats", response_model=OccasionStatsOut)
async def occasion_stats(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await get_occasion_stats(db, occasion_id)
