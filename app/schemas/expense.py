from pydantic import BaseModel, Field, model_validator
from datetime import date as Date, datetime
from decimal import Decimal
from typing import List, Optional
from app.schemas.types import Money

class ExpenseCreate(BaseModel):
    payer_person_id: Optional[int] = None
    payer_subgroup_id: Optional[int] = None
    amount: Decimal = Field(gt=0, decimal_places=2)
    description: str = Field(min_length=1)
    category: str = "general"
    note: Optional[str] = None
    date: Optional[Date] = None
    # equal split among these people
    person_ids: List[int] = Field(min_length=1)

    @model_validator(mode="after")
    def one_payer(self):
        if (self.payer_person_id is None) == (self.payer_subgroup_id is None):
            raise ValueError("Exactly one of payer_person_id / payer_subgroup_id must be set")
        return self

class SplitOut(BaseModel):
    id: int
    expense_id: int
    person_id: int
    amount: Money

    class Config:
        from_attributes = True

class ExpenseOut(BaseModel):
    id: int
    occasion_id: int
    payer_person_id: Optional[int] = None
    payer_subgroup_id: Optional[int] = None
    amount: Money
    description: str
    category: str
    note: Optional[str] = None
    date: Date
    created_at: datetime | None = None
    splits: List[SplitOut] = []

    class Config:
        from_attributes = True

class ExpenseUpdate(BaseModel):
    # unset fields keep their current value
    payer_person_id: Optional[int] = None
    payer_subgroup_id: Optional[int] = None
    amount: Optional[Decimal] = Field(default=None, gt=0, decimal_places=2)
    description: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    note: Optional[str] = None
    date: Optional[Date] = None
    # re-split equally among these people; defaults to the current ones
    person_ids: Optional[List[int]] = Field(default=None, min_length=1)

    @model_validator(mode="after")
    def at_most_one_payer(self):
        if self.payer_person_id is not None and self.payer_subgroup_id is not None:
            raise ValueError("Only one of payer_person_id / payer_subgroup_id can be set")
        return self
