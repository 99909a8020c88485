"""Pydantic models for the Plaid API (only the fields we use)."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field, JsonValue


class PlaidCredentials(BaseModel):
    """Client credentials embedded in every Plaid request body."""

    client_id: str
    secret: str = Field(repr=False)


class LinkTokenUser(BaseModel):
    client_user_id: str


class LinkTokenCreateRequest(PlaidCredentials):
    """Body for POST /link/token/create."""

    client_name: str
    user: LinkTokenUser
    language: str = "en"
    country_codes: List[str] = Field(default_factory=lambda: ["US"])
    products: List[str] = Field(default_factory=lambda: ["transactions"])
    account_filters: Optional[Dict[str, JsonValue]] = None


class LinkTokenCreateResponse(BaseModel):
    """Plaid link token response, returned verbatim to the app."""

    link_token: str
    expiration: Optional[str] = None
    request_id: Optional[str] = None


class ItemPublicTokenExchangeRequest(PlaidCredentials):
    """Body for POST /item/public_token/exchange."""

    public_token: str = Field(repr=False)


class ItemPublicTokenExchangeResponse(BaseModel):
    access_token: str = Field(repr=False)
    item_id: str
    request_id: Optional[str] = None


class TransactionsGetRequest(PlaidCredentials):
    """Body for POST /transactions/get."""

    access_token: str = Field(repr=False)
    start_date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    end_date: str = Field(..., pattern=r'^\d{4}-\d{2}-\d{2}$')
    options: Optional[Dict[str, JsonValue]] = None


class PlaidTransaction(BaseModel):
    """Plaid transaction record. Unknown upstream fields are ignored."""

    name: str
    amount: float
    date: str
    merchant_name: Optional[str] = None
    account_id: str


class TransactionsGetResponse(BaseModel):
    transactions: List[PlaidTransaction]
    request_id: Optional[str] = None
