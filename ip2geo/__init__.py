from ip2geo.clients.async_ip2geo_client import AsyncIp2GeoClient
from ip2geo.clients.ip2geo_client import Ip2GeoClient
from ip2geo.errors import DecodeError, InvalidArgumentError, Ip2GeoError, TransportError
from ip2geo.models.common import ClientConfig, LookupResult, ResponseFormat
from ip2geo.models.request_models import LookupRequest

__all__ = [
    "AsyncIp2GeoClient",
    "ClientConfig",
    "DecodeError",
    "InvalidArgumentError",
    "Ip2GeoClient",
    "Ip2GeoError",
    "LookupRequest",
    "LookupResult",
    "ResponseFormat",
    "TransportError",
]
