"""Configuration loading for the Budgetly backend."""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from budgetly import credentials
from budgetly.logger import get_logger

logger = get_logger("budgetly.config")

PLAID_BASE_URLS = {
    "sandbox": "https://sandbox.plaid.com",
    "development": "https://development.plaid.com",
    "production": "https://production.plaid.com",
}
DEFAULT_ENVIRONMENT = "sandbox"
DEFAULT_APP_NAME = "My App"
DEFAULT_TIMEOUT = 10.0


def parse_timeout(raw: Optional[str]) -> float:
    """Parse a timeout in seconds, falling back to the default when invalid."""
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0.0
    if not 0 < timeout < float("inf"):
        logger.warning(f"Invalid Plaid timeout '{raw}', using {DEFAULT_TIMEOUT}s")
        return DEFAULT_TIMEOUT
    return timeout


class PlaidConfig(BaseModel):
    """Plaid credentials and endpoint selection, read once at startup."""

    model_config = ConfigDict(frozen=True)

    environment: str = Field(DEFAULT_ENVIRONMENT, pattern=r"^(sandbox|development|production)$")
    client_id: str = ""
    secret: str = Field("", repr=False)
    app_name: str = DEFAULT_APP_NAME
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    @property
    def base_url(self) -> str:
        return PLAID_BASE_URLS[self.environment]

    @classmethod
    def load(cls, env_file: Optional[Path] = None) -> "PlaidConfig":
        """
        Load configuration from keyring or environment.

        A ``.env`` file in the working directory (or ``env_file``) is loaded
        first so its values act as environment variables. Missing
        credentials do not fail here; Plaid rejects them on first call.
        """
        load_dotenv(env_file or Path.cwd() / ".env")

        keys = {
            'environment': credentials.KEY_ENVIRONMENT,
            'client_id': credentials.KEY_CLIENT_ID,
            'secret': credentials.KEY_SECRET,
            'app_name': credentials.KEY_APP_NAME,
            'timeout': credentials.KEY_TIMEOUT,
        }
        values = {name: credentials.get_credential(key) for name, key in keys.items()}

        environment = (values['environment'] or DEFAULT_ENVIRONMENT).strip().lower()
        if environment not in PLAID_BASE_URLS:
            logger.warning(f"Unknown Plaid environment '{environment}', using {DEFAULT_ENVIRONMENT}")
            environment = DEFAULT_ENVIRONMENT

        if not values['client_id'] or not values['secret']:
            logger.warning("Plaid client ID or secret not set; Plaid requests will be rejected")

        return cls(
            environment=environment,
            client_id=values['client_id'] or "",
            secret=values['secret'] or "",
            app_name=values['app_name'] or DEFAULT_APP_NAME,
            timeout=parse_timeout(values['timeout']),
        )
