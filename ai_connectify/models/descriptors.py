"""Provider configuration and registry descriptors."""

from typing import Any, Type

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


class ProviderConfig(BaseModel):
    """Static configuration every provider ships with."""

    model_config = ConfigDict(frozen=True)

    api_key_required: StrictBool = Field(..., description="Whether the provider needs an API key")


class ConnectorEntry(BaseModel):
    """One row of the connector registration table."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    connector_class: Type[Any]
    config: Any = None


class ProviderDescriptor(BaseModel):
    """A registered provider, as handed out by the registry."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str
    connector_class: Type[Any]
    api_key_required: StrictBool

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Provider name cannot be empty")
        return v
