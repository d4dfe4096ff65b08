from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.session import get_db
from app.schemas.expense import ExpenseCreate, ExpenseUpdate, ExpenseOut
from app.services.expense_services import create_expense, list_expenses, get_expense_detail, update_expense, delete_expense

router = APIRouter()

@router.post("/occasions/{occasion_id}/expenses", response_model=ExpenseOut, status_code=201)
async def add_expense(occasion_id: int, data: ExpenseCreate, db: AsyncSession = Depends(get_db)):
    return await create_expense(db, occasion_id, data)

@router.get("/occasions/{occasion_id}/expenses", response_model=list[ExpenseOut])
async def all_expenses(occasion_id: int, db: AsyncSession = Depends(get_db)):
    return await list_expenses(db, occasion_id)

@router.get("/expenses/{expense_id}", response_model=ExpenseOut)
async def fetch(expense_id: int, db: AsyncSession = Depends(get_db)):
    return await get_expense_detail(db, expense_id)

@router.patch("/expenses/{expense_id}", response_model=ExpenseOut)
async def edit(expense_id: int, data: ExpenseUpdate, db: AsyncSession = Depends(get_db)):
    return await update_expense(db, expense_id, data)

@router.delete("/expenses/{expense_id}")
async def del_expense(expense_id: int, db: AsyncSession = Depends(get_db)):
    return await delete_expense(db, expense_id)
