from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.settlements import SettlementCreate, SettlementOut
from app.services.settlement_service import record_settlement, list_settlements, delete_settlement

router = APIRouter()

@router.post("/occasions/{occasion_id}/settlements", response_model=SettlementOut, status_code=201)
async def add_settlement(occasion_id: int, data: SettlementCreate, db: AsyncSession = Depends(get_db)):
    return await record_settlement(db, occasion_id, data)

@router.get("/occasions/{occasion_id}/settlements", response_model=list[SettlementOut])
async def settlement_history(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await list_settlements(db, occasion_id)

@router.delete("/settlements/{settlement_id}")
async def undo(settlement_id: int, db: AsyncSession = Depends(get_db)):
    return await delete_settlement(db, settlement_id)
