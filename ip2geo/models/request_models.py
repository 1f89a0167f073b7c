from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ip2geo.models.common import ResponseFormat

CALLBACK_REQUIRES_JSONP = "callback can only be used when format is 'jsonp'"


class LookupRequest(BaseModel):
    """Parameters of a single Ip2Geo lookup.

    If `ip` is omitted or empty, the API geolocates the caller's own address.
    Values are passed through verbatim; only `json` (or no format at all) makes the
    client decode the body. `callback` is only meaningful for `jsonp`.
    """

    ip: str | None = Field(
        default=None,
        description="IP address to look up. If omitted, the caller's IP is used.",
        examples=["8.8.8.8", "2001:4860:4860::8888"],
    )
    format: str | None = Field(
        default=None,
        description="Response format requested from the API. Defaults to JSON.",
        examples=["json", "xml", "yaml", "jsonp"],
    )
    callback: str | None = Field(
        default=None,
        description="JSONP callback function name.",
        examples=["handleGeo"],
    )

    @field_validator("ip", "callback", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> Any:
        """An empty string means "not provided"; anything else is kept verbatim."""
        if value == "":
            return None
        return value

    @model_validator(mode="after")
    def _check_callback_format(self) -> "LookupRequest":
        if self.callback and self.format != ResponseFormat.jsonp.value:
            raise ValueError(CALLBACK_REQUIRES_JSONP)
        return self

    @property
    def expects_json(self) -> bool:
        """Whether the response body should be decoded as a JSON object."""
        return self.format is None or self.format == ResponseFormat.json.value
