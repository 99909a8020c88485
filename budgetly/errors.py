"""Error model shared by the Plaid client and the proxy endpoints."""

from typing import Optional


class BudgetlyError(Exception):
    """Base class for all Budgetly errors."""


class ValidationError(BudgetlyError):
    """Caller-supplied input is structurally invalid."""


class UpstreamError(BudgetlyError):
    """Plaid answered with a non-success status.

    Carries the upstream status code and response body. The body is Plaid's
    own error payload, never the request we sent.
    """

    def __init__(self, status: int, body: str = "", endpoint: Optional[str] = None):
        self.status = status
        self.body = body
        self.endpoint = endpoint
        super().__init__(f"Plaid error {status}")


class TransportError(UpstreamError):
    """Plaid could not be reached (timeout or connection failure)."""

    TIMEOUT_STATUS = 504
    CONNECTION_STATUS = 503


class MalformedResponseError(BudgetlyError):
    """Plaid returned success but a body we cannot decode."""

    def __init__(self, endpoint: str, detail: str):
        self.endpoint = endpoint
        self.detail = detail
        super().__init__(f"Malformed response from {endpoint}: {detail}")
