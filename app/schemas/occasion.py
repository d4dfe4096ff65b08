from pydantic import BaseModel, Field
from datetime import datetime

class OccasionCreate(BaseModel):
    name: str = Field(min_length=1)

class OccasionUpdate(BaseModel):
    name: str = Field(min_length=1)

class OccasionOut(BaseModel):
    id: int
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
