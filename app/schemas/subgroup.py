from pydantic import BaseModel, Field
from datetime import datetime
from typing import List

class SubgroupCreate(BaseModel):
    name: str = Field(min_length=1)
    person_ids: List[int] = []

class SubgroupMemberOut(BaseModel):
    subgroup_id: int
    person_id: int

    class Config:
        from_attributes = True

class SubgroupOut(BaseModel):
    id: int
    occasion_id: int
    name: str
    created_at: datetime | None = None
    members: List[SubgroupMemberOut] = []

    class Config:
        from_attributes = True

class SubgroupUpdate(BaseModel):
    name: str = Field(min_length=1)
