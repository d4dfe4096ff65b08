from pydantic import BaseModel, Field
from datetime import datetime

class PersonCreate(BaseModel):
    name: str = Field(min_length=1)

class PersonUpdate(BaseModel):
    name: str = Field(min_length=1)

class PersonOut(BaseModel):
    id: int
    occasion_id: int
    name: str
    created_at: datetime | None = None

    class Config:
        from_attributes = True
