"""Tests for budgetly.proxy module."""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from budgetly import proxy
from budgetly.errors import UpstreamError, ValidationError
from budgetly.models import LinkTokenCreateResponse, PlaidTransaction, TransactionsGetResponse
from budgetly.plaid_client import PlaidClient


@pytest.fixture
def client():
    mock_client = Mock(spec=PlaidClient)
    mock_client.exchange_public_token.return_value = "sandbox-abc"
    mock_client.get_transactions.return_value = TransactionsGetResponse(transactions=[
        PlaidTransaction(name="Coffee", amount=4.5, date="2024-01-02", merchant_name=None, account_id="a1"),
    ])
    return mock_client


class TestCreateLinkToken:
    """Test link token creation."""

    def test_returns_client_response_unchanged(self, client):
        response = LinkTokenCreateResponse(link_token="link-sandbox-1", expiration="2024-01-02T00:00:00Z")
        client.create_link_token.return_value = response

        result = proxy.create_link_token(client, "user-1")

        assert result is response
        client.create_link_token.assert_called_once_with("user-1")

    def test_missing_user_id(self, client):
        with pytest.raises(ValidationError):
            proxy.create_link_token(client, None)

        client.create_link_token.assert_not_called()


class TestExchangeAndFetch:
    """Test the exchange-then-fetch cycle."""

    def test_success(self, client):
        now = datetime(2024, 1, 31, 15, 0, tzinfo=timezone.utc)

        result = proxy.exchange_and_fetch(client, {"public_token": "public-sandbox-123"}, now=now)

        client.exchange_public_token.assert_called_once_with("public-sandbox-123")
        client.get_transactions.assert_called_once_with(
            "sandbox-abc",
            start_date="2024-01-01",
            end_date="2024-01-31",
            count=25,
        )
        assert result.model_dump() == {"transactions": [{
            "name": "Coffee",
            "amount": 4.5,
            "date": "2024-01-02",
            "merchant_name": None,
            "account_id": "a1",
        }]}

    @pytest.mark.parametrize("body", [None, [], "public-sandbox-123", {}, {"public_token": ""}, {"public_token": None}])
    def test_invalid_body_makes_no_calls(self, client, body):
        with pytest.raises(ValidationError):
            proxy.exchange_and_fetch(client, body)

        client.exchange_public_token.assert_not_called()
        client.get_transactions.assert_not_called()

    def test_exchange_failure_skips_fetch(self, client):
        client.exchange_public_token.side_effect = UpstreamError(400, "bad token")

        with pytest.raises(UpstreamError):
            proxy.exchange_and_fetch(client, {"public_token": "public-sandbox-123"})

        client.get_transactions.assert_not_called()

    def test_fetch_failure_propagates(self, client):
        client.get_transactions.side_effect = UpstreamError(500, "oops")

        with pytest.raises(UpstreamError) as exc_info:
            proxy.exchange_and_fetch(client, {"public_token": "public-sandbox-123"})

        assert exc_info.value.status == 500
