from pydantic import BaseModel
from app.schemas.types import Money


class Balance(BaseModel):
    person_id: int
    person_name: str
    balance: Money


class SuggestedTransfer(BaseModel):
    from_id: int
    from_name: str
    to_id: int
    to_name: str
    amount: Money


class OccasionBalancesOut(BaseModel):
    occasion_id: int
    balances: list[Balance]
    suggestions: list[SuggestedTransfer]
    settled: bool


class AcceptSuggestion(BaseModel):
    from_person_id: int
    to_person_id: int
    amount: Money
