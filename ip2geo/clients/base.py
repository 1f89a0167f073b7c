from abc import ABC, abstractmethod
from collections.abc import Awaitable
from typing import Any
from urllib.parse import quote_plus

import httpx
from pydantic import ValidationError

from ip2geo.errors import DecodeError, InvalidArgumentError
from ip2geo.logger import logger
from ip2geo.models.common import ClientConfig, LookupResult
from ip2geo.models.request_models import LookupRequest


def form_encode(value: str) -> str:
    """Form-encode `value` as UTF-8 the way the Ip2Geo API expects.

    Differs from plain `quote_plus` on two characters: `*` is left as-is and `~`
    is escaped as `%7E`.
    """
    return quote_plus(value, safe="*").replace("~", "%7E")


class BaseIp2GeoClient(ABC):
    """Shared behaviour of the sync and async Ip2Geo clients.

    Subclasses only differ in how the GET request is executed. URL construction,
    argument validation and body decoding live here so both clients build the
    exact same requests and return the exact same results.
    """

    def __init__(
        self,
        api_key: str | None = None,
        connect_timeout_seconds: float = 60.0,
        *,
        config: ClientConfig | None = None,
    ) -> None:
        if config is None:
            config = ClientConfig(api_key=api_key, connect_timeout_seconds=connect_timeout_seconds)
        self._config = config

    @property
    def config(self) -> ClientConfig:
        return self._config

    @abstractmethod
    def lookup(
        self,
        ip: str | None = None,
        format: str | None = None,
        callback: str | None = None,
    ) -> LookupResult | Awaitable[LookupResult]:
        """Look up geolocation information for `ip` (or the caller's IP)."""
        raise NotImplementedError

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(
            self._config.request_timeout_seconds,
            connect=self._config.connect_timeout_seconds,
        )

    @staticmethod
    def _build_request(ip: str | None, format: str | None, callback: str | None) -> LookupRequest:
        """Validate lookup arguments before anything touches the network."""
        try:
            return LookupRequest(ip=ip, format=format, callback=callback)
        except ValidationError as exc:
            error = exc.errors()[0]
            cause = (error.get("ctx") or {}).get("error")
            raise InvalidArgumentError(str(cause) if cause else error["msg"]) from exc

    def build_url(self, request: LookupRequest) -> str:
        """Build the lookup URL for `request`.

        The IP becomes a path segment and key/format/callback become query
        parameters, all form-encoded with `form_encode`.
        """
        url = self._config.base_url
        if request.ip:
            url = f"{url}/{form_encode(request.ip)}"

        params: dict[str, str] = {}
        if self._config.api_key:
            params["key"] = self._config.api_key
        if request.format is not None:
            params["format"] = request.format
        if request.callback is not None:
            params["callback"] = request.callback

        if params:
            query = "&".join(f"{form_encode(name)}={form_encode(value)}" for name, value in params.items())
            url = f"{url}?{query}"
        return url

    def _masked_url(self, url: str) -> str:
        """Return `url` with the API key replaced, for logging."""
        api_key = self._config.api_key
        if not api_key:
            return url
        return url.replace(f"key={form_encode(api_key)}", "key=***")

    def _decode(self, request: LookupRequest, response: httpx.Response) -> LookupResult:
        """Decode the body according to the requested format.

        The status code is deliberately not inspected: error responses are
        decoded exactly like successful ones.
        """
        logger.debug(f"Received Ip2Geo response status={response.status_code} format={request.format}")

        if not request.expects_json:
            return response.text

        data = self._parse_json(response)
        if not isinstance(data, dict):
            logger.warning(f"Ip2Geo JSON response is not an object type={type(data).__name__}")
            raise DecodeError(f"Expected a JSON object from Ip2Geo API, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            logger.warning(f"Failed to decode Ip2Geo response as JSON status={response.status_code} error={exc}")
            raise DecodeError(f"Failed to decode Ip2Geo API response as JSON: {exc}") from exc
