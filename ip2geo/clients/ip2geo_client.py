import httpx

from ip2geo.clients.base import BaseIp2GeoClient
from ip2geo.errors import TransportError
from ip2geo.logger import logger
from ip2geo.models.common import LookupResult


class Ip2GeoClient(BaseIp2GeoClient):
    """Blocking client for the https://api.ip2geoapi.com/ lookup API.

    The client is transport-only: it returns whatever the API sent back (decoded
    for JSON, raw otherwise) and raises only for bad arguments, network failures
    and undecodable JSON. Instances hold no mutable state and can be shared
    between threads.
    """

    def lookup(
        self,
        ip: str | None = None,
        format: str | None = None,
        callback: str | None = None,
    ) -> LookupResult:
        """Look up geolocation information for `ip`, or for the caller's IP if omitted.

        Returns a dict for the JSON format (the default) and the raw body string
        for any other format.
        """
        request = self._build_request(ip, format, callback)
        url = self.build_url(request)
        logger.debug(f"Performing Ip2Geo lookup url={self._masked_url(url)}")

        try:
            with httpx.Client(timeout=self._timeout()) as client:
                response = client.get(url)
        except httpx.RequestError as exc:
            logger.warning(f"Ip2Geo request failed url={self._masked_url(url)} error={repr(exc)}")
            raise TransportError(f"Unable to reach Ip2Geo API: {repr(exc)}") from exc

        return self._decode(request, response)
