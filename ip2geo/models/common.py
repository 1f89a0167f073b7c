from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_BASE_URL = "https://api.ip2geoapi.com/ip"

# Parsed JSON object for the json format, raw body text for every other format.
LookupResult = dict[str, Any] | str


class ResponseFormat(str, Enum):
    """Output formats understood by the Ip2Geo API."""

    json = "json"
    xml = "xml"
    yaml = "yaml"
    jsonp = "jsonp"


class ClientConfig(BaseModel):
    """Immutable configuration shared by every lookup made through a client.

    The request timeout is fixed; only the connect timeout is configurable.
    """

    model_config = ConfigDict(frozen=True)

    REQUEST_TIMEOUT_SECONDS: ClassVar[float] = 60.0

    api_key: str | None = Field(
        default=None,
        description="Static API key sent as the `key` query parameter. Omitted when blank.",
    )
    connect_timeout_seconds: float = Field(
        default=60.0,
        gt=0,
        description="Timeout for establishing the connection to the API.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Lookup endpoint; the IP is appended to it as a path segment.",
    )

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def request_timeout_seconds(self) -> float:
        return self.REQUEST_TIMEOUT_SECONDS
