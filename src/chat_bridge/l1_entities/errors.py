"""Domain error types."""


class BridgeError(Exception):
    """Base class for every failure surfaced by the request bridge."""


class ConstructionError(BridgeError):
    """Raised when the request cannot be built (e.g. illegal header characters)."""


class TransportError(BridgeError):
    """Raised when the request never produced a response (DNS, TLS, refused, timeout)."""


class DecodeError(BridgeError):
    """Raised when the response body is not valid JSON or the stream ended early."""
