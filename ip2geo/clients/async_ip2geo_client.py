import httpx

from ip2geo.clients.base import BaseIp2GeoClient
from ip2geo.errors import TransportError
from ip2geo.logger import logger
from ip2geo.models.common import LookupResult


class AsyncIp2GeoClient(BaseIp2GeoClient):
    """asyncio flavour of `Ip2GeoClient`, backed by httpx.AsyncClient."""

    async def lookup(
        self,
        ip: str | None = None,
        format: str | None = None,
        callback: str | None = None,
    ) -> LookupResult:
        """Look up geolocation information for `ip`, or for the caller's IP if omitted."""
        request = self._build_request(ip, format, callback)
        url = self.build_url(request)
        logger.debug(f"Performing async Ip2Geo lookup url={self._masked_url(url)}")

        try:
            async with httpx.AsyncClient(timeout=self._timeout()) as client:
                response = await client.get(url)
        except httpx.RequestError as exc:
            logger.warning(f"Ip2Geo request failed url={self._masked_url(url)} error={repr(exc)}")
            raise TransportError(f"Unable to reach Ip2Geo API: {repr(exc)}") from exc

        return self._decode(request, response)
