"""Request and response payloads exchanged with the Budgetly app."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class ExchangePublicTokenIn(BaseModel):
    """Body of POST /exchange_public_token."""

    public_token: str = Field(..., min_length=1, repr=False)

    @field_validator('public_token')
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("public_token must not be blank")
        return v


class TransactionOut(BaseModel):
    """Simplified transaction shape sent to the app."""

    name: str
    amount: float
    date: str
    merchant_name: Optional[str] = None
    account_id: str


class TransactionsOut(BaseModel):
    transactions: List[TransactionOut]
