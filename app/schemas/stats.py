from pydantic import BaseModel
from decimal import Decimal
from typing import List
from app.schemas.types import Money

class CategoryTotal(BaseModel):
    category: str
    amount: Money
    # percent of total_spent, one decimal
    share: Decimal

class PayerTotal(BaseModel):
    person_id: int
    person_name: str
    amount: Money

class OccasionStatsOut(BaseModel):
    occasion_id: int
    total_spent: Money
    expense_count: int
    by_category: List[CategoryTotal]
    by_person: List[PayerTotal]

class TotalsOut(BaseModel):
    total_paid: Money
    total_owing: Money
    settlements_from: Money
    settlements_to: Money
    balance: Money
    total_owed: Money
    total_owing_net: Money
    expense_count: int

class PersonStatsOut(TotalsOut):
    person_id: int

class SubgroupStatsOut(TotalsOut):
    subgroup_id: int
    member_count: int
