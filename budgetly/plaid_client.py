"""Plaid API client."""

from typing import Type, TypeVar

import requests
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from budgetly.errors import MalformedResponseError, TransportError, UpstreamError
from budgetly.logger import get_logger
from budgetly.models.config import PlaidConfig
from budgetly.models.plaid import (
    ItemPublicTokenExchangeRequest,
    ItemPublicTokenExchangeResponse,
    LinkTokenCreateRequest,
    LinkTokenCreateResponse,
    LinkTokenUser,
    TransactionsGetRequest,
    TransactionsGetResponse,
)

logger = get_logger("budgetly.plaid")

R = TypeVar("R", bound=BaseModel)

DEFAULT_COUNT = 25

# Depository (checking/savings) and credit accounts only
ACCOUNT_FILTERS = {
    "depository": {"account_subtypes": ["checking", "savings"]},
    "credit": {},
}


class PlaidClient:
    """Plaid API client bound to one immutable configuration."""

    def __init__(self, config: PlaidConfig):
        self.config = config
        self.base_url = config.base_url

    def _post(self, endpoint: str, payload: BaseModel, response_model: Type[R]) -> R:
        """POST a JSON payload to Plaid and decode the response.

        Each call opens and closes its own session so no cookies or
        connections outlive it. The payload carries credentials, so it is
        never logged nor attached to raised errors.
        """
        url = f"{self.base_url}{endpoint}"
        headers = {"Content-Type": "application/json"}

        try:
            with requests.Session() as session:
                response = session.post(
                    url,
                    data=payload.model_dump_json(exclude_none=True),
                    headers=headers,
                    timeout=self.config.timeout,
                )
        except requests.Timeout as e:
            logger.error(f"Plaid request timed out: endpoint={endpoint} timeout={self.config.timeout}s")
            raise TransportError(TransportError.TIMEOUT_STATUS, str(e), endpoint) from e
        except requests.ConnectionError as e:
            logger.error(f"Plaid connection failed: endpoint={endpoint}")
            raise TransportError(TransportError.CONNECTION_STATUS, str(e), endpoint) from e

        if not 200 <= response.status_code < 300:
            body = response.text
            logger.error(f"Plaid error: status={response.status_code} endpoint={endpoint} body={body}")
            raise UpstreamError(response.status_code, body, endpoint)

        try:
            return response_model.model_validate(response.json())
        except PydanticValidationError as e:
            # Error inputs may hold tokens; keep only locations and messages
            detail = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors(include_input=False)
            )
            logger.error(f"Malformed Plaid response: endpoint={endpoint} error={detail}")
            raise MalformedResponseError(endpoint, detail) from e
        except ValueError as e:
            logger.error(f"Malformed Plaid response: endpoint={endpoint} error={e}")
            raise MalformedResponseError(endpoint, str(e)) from e

    def create_link_token(self, client_user_id: str) -> LinkTokenCreateResponse:
        """Create a link token for the Plaid Link flow."""
        payload = LinkTokenCreateRequest(
            client_id=self.config.client_id,
            secret=self.config.secret,
            client_name=self.config.app_name,
            user=LinkTokenUser(client_user_id=client_user_id),
            language="en",
            country_codes=["US"],
            products=["transactions"],
            account_filters=ACCOUNT_FILTERS,
        )
        return self._post("/link/token/create", payload, LinkTokenCreateResponse)

    def exchange_public_token(self, public_token: str) -> str:
        """Exchange a public token for an access token.

        Only the access token is returned; the item id is dropped here.
        """
        payload = ItemPublicTokenExchangeRequest(
            client_id=self.config.client_id,
            secret=self.config.secret,
            public_token=public_token,
        )
        response = self._post("/item/public_token/exchange", payload, ItemPublicTokenExchangeResponse)
        return response.access_token

    def get_transactions(
        self,
        access_token: str,
        start_date: str,
        end_date: str,
        count: int = DEFAULT_COUNT,
    ) -> TransactionsGetResponse:
        """Get transactions between two YYYY-MM-DD dates."""
        payload = TransactionsGetRequest(
            client_id=self.config.client_id,
            secret=self.config.secret,
            access_token=access_token,
            start_date=start_date,
            end_date=end_date,
            options={"count": count},
        )
        return self._post("/transactions/get", payload, TransactionsGetResponse)
