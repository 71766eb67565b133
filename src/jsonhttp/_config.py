from os import environ as env
from typing import Optional

from dotenv import load_dotenv
from httpx import URL, InvalidURL
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ._utils.constants import ENV_BASE_URL, SUPPORTED_PROTOCOLS


class ClientConfig(BaseModel):
    """Client-wide settings, fixed for the lifetime of a client."""

    model_config = ConfigDict(frozen=True)

    base_url: Optional[str] = None
    headers: dict[str, str] = Field(default_factory=dict)

    @field_validator("base_url", mode="before")
    @classmethod
    def validate_base_url(cls, value: Optional[str]) -> Optional[str]:
        if value is None or value == "":
            return None
        try:
            url = URL(value)
        except InvalidURL as e:
            raise ValueError(f"Invalid base URL: {e}") from e
        assert url.scheme in SUPPORTED_PROTOCOLS, "Base URL must use http or https"
        assert url.host, "Base URL must include a host"
        return value

    @classmethod
    def from_env(cls, headers: Optional[dict[str, str]] = None) -> "ClientConfig":
        """Build a config from ``JSONHTTP_BASE_URL``, loading ``.env`` first."""
        load_dotenv()
        return cls(base_url=env.get(ENV_BASE_URL), headers=headers or {})
