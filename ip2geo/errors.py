class Ip2GeoError(Exception):
    """Base error for the Ip2Geo API client."""


class InvalidArgumentError(Ip2GeoError, ValueError):
    """Raised when lookup arguments are inconsistent (e.g. callback without jsonp)."""


class TransportError(Ip2GeoError):
    """Raised when the HTTP exchange with the Ip2Geo API could not be completed."""


class DecodeError(Ip2GeoError):
    """Raised when a JSON response body cannot be decoded into a mapping."""
