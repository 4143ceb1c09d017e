"""Errors raised by the Hatena Blog client."""


class HatenaBlogError(Exception):
    """Base class for all client errors."""


class TransportError(HatenaBlogError):
    """The request never produced a response (DNS, connection, TLS, timeout)."""


class APIError(HatenaBlogError):
    """The server answered with a status outside 2xx."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected status code: {status_code}, body: {body}")


class DecodeError(HatenaBlogError):
    """A 2xx response body did not have the expected JSON shape."""


class ConfigurationError(HatenaBlogError):
    """A required client option is missing or empty."""
