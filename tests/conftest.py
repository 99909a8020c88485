"""Test configuration - isolate tests from the real keyring and environment."""

from unittest.mock import patch

import pytest

from budgetly.models.config import PlaidConfig

PLAID_ENV_VARS = ["PLAID_ENV", "PLAID_CLIENT_ID", "PLAID_SECRET", "PLAID_APP_NAME", "PLAID_TIMEOUT"]


@pytest.fixture(autouse=True)
def isolated_credentials(monkeypatch):
    for name in PLAID_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    with patch("budgetly.credentials.keyring.get_password", return_value=None):
        yield


@pytest.fixture
def config():
    return PlaidConfig(
        environment="sandbox",
        client_id="client_abc",
        secret="secret_xyz",
        app_name="Budgetly",
        timeout=5.0,
    )
