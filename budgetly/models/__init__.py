"""Budgetly data models for Plaid payloads, app payloads and configuration."""

from .plaid import (
    LinkTokenCreateRequest,
    LinkTokenCreateResponse,
    ItemPublicTokenExchangeRequest,
    ItemPublicTokenExchangeResponse,
    TransactionsGetRequest,
    TransactionsGetResponse,
    PlaidTransaction,
)
from .api import ExchangePublicTokenIn, TransactionOut, TransactionsOut
from .config import PlaidConfig

__all__ = [
    "LinkTokenCreateRequest",
    "LinkTokenCreateResponse",
    "ItemPublicTokenExchangeRequest",
    "ItemPublicTokenExchangeResponse",
    "TransactionsGetRequest",
    "TransactionsGetResponse",
    "PlaidTransaction",
    "ExchangePublicTokenIn",
    "TransactionOut",
    "TransactionsOut",
    "PlaidConfig",
]
