"""Individual credential models for validation."""

from pydantic import BaseModel, Field


class PlaidClientId(BaseModel):
    """Plaid client ID."""
    value: str = Field(pattern=r"^[a-f0-9]{24}$")


class PlaidSecret(BaseModel):
    """Plaid secret."""
    value: str = Field(pattern=r"^[a-f0-9]{30}$", repr=False)


class Environment(BaseModel):
    """Plaid environment tier."""
    value: str = Field(pattern=r"^(sandbox|development|production)$")


class AppName(BaseModel):
    """Display name shown in Plaid Link."""
    value: str = Field(min_length=1, max_length=30)
