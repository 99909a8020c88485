"""Request/response cycles behind the app-facing endpoints."""

from datetime import datetime
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from budgetly.dates import date_window
from budgetly.errors import ValidationError
from budgetly.logger import get_logger
from budgetly.mapper import map_transactions
from budgetly.models.api import ExchangePublicTokenIn, TransactionsOut
from budgetly.models.plaid import LinkTokenCreateResponse
from budgetly.plaid_client import DEFAULT_COUNT, PlaidClient

logger = get_logger("budgetly.proxy")


def create_link_token(client: PlaidClient, user_id: Optional[str]) -> LinkTokenCreateResponse:
    """Issue a link token for the given user."""
    if not user_id:
        raise ValidationError("Missing user identifier")
    return client.create_link_token(user_id)


def parse_exchange_request(body: Any) -> ExchangePublicTokenIn:
    """Validate the inbound exchange body."""
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")
    try:
        return ExchangePublicTokenIn.model_validate(body)
    except PydanticValidationError as e:
        field = e.errors()[0]['loc'][0] if e.errors()[0]['loc'] else "body"
        raise ValidationError(f"{field}: {e.errors()[0]['msg']}") from e


def exchange_and_fetch(
    client: PlaidClient,
    body: Any,
    now: Optional[datetime] = None,
    count: int = DEFAULT_COUNT,
) -> TransactionsOut:
    """Exchange a public token, then fetch the last 30 days of transactions.

    Any failure aborts the whole cycle; no partial results are returned.
    """
    request = parse_exchange_request(body)

    access_token = client.exchange_public_token(request.public_token)

    window = date_window(now)
    logger.debug(f"Fetching transactions {window.start_date} to {window.end_date}")
    response = client.get_transactions(
        access_token,
        start_date=window.start_date,
        end_date=window.end_date,
        count=count,
    )

    return TransactionsOut(transactions=map_transactions(response.transactions))
