from app.db.session import engine
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from app.models.occasion import Occasion
from app.models.person import Person
from app.models.expense import Expense
from app.models.settlement import Settlement

async def check_db_service():
    try:
        async with engine.connect() as conn:
            await conn.exec_driver_sql("SELECT 1")
        return {"db": True, "message":"Database is connected"}
    except Exception as e:
        return {"db": False, "error": str(e)}
    
async def system_health():
    return {
        "status": "ok"
    }

async def system_metrics(db: AsyncSession):
    occasions = await db.scalar(select(func.count(Occasion.id)))
    people = await db.scalar(select(func.count(Person.id)))
    expenses = await db.scalar(select(func.count(Expense.id)))
    settlements = await db.scalar(select(func.count(Settlement.id)))

    return {
        "occasions": occasions,
        "people": people,
        "expenses": expenses,
        "settlements": settlements
    }
