from pydantic import BaseModel
from typing import List
from app.schemas.expense import ExpenseOut
from app.schemas.settlements import SettlementOut

class PersonActivityOut(BaseModel):
    person_id: int
    expenses: List[ExpenseOut]
    settlements: List[SettlementOut]

class SubgroupActivityOut(BaseModel):
    subgroup_id: int
    member_ids: List[int]
    expenses: List[ExpenseOut]
    settlements: List[SettlementOut]
