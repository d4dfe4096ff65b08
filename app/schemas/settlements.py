from pydantic import BaseModel, Field, model_validator
from datetime import date as Date, datetime
from decimal import Decimal
from typing import Optional
from app.schemas.types import Money

class SettlementCreate(BaseModel):
    from_person_id: Optional[int] = None
    from_subgroup_id: Optional[int] = None
    to_person_id: Optional[int] = None
    to_subgroup_id: Optional[int] = None
    amount: Decimal = Field(gt=0, decimal_places=2)
    date: Optional[Date] = None

    @model_validator(mode="after")
    def one_party_each_side(self):
        if (self.from_person_id is None) == (self.from_subgroup_id is None):
            raise ValueError("Exactly one of from_person_id / from_subgroup_id must be set")
        if (self.to_person_id is None) == (self.to_subgroup_id is None):
            raise ValueError("Exactly one of to_person_id / to_subgroup_id must be set")
        if self.from_person_id is not None and self.from_person_id == self.to_person_id:
            raise ValueError("A person can't settle with themselves")
        return self

class SettlementOut(BaseModel):
    id: int
    occasion_id: int
    from_person_id: Optional[int] = None
    from_subgroup_id: Optional[int] = None
    to_person_id: Optional[int] = None
    to_subgroup_id: Optional[int] = None
    amount: Money
    date: Date
    created_at: datetime | None = None

    class Config:
        from_attributes = True
