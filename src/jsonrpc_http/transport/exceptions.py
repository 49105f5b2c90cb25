"""Transport layer exceptions.

These exceptions are raised by the transport layer when an HTTP request
could not be completed. They have no knowledge of JSON-RPC.
"""

from __future__ import annotations

from jsonrpc_http.exceptions import RpcError


class TransportError(RpcError):
    """Base exception for transport layer errors.

    Args:
        message: Human-readable error description
        cause: Original exception that caused this error

    Attributes:
        message: Error message
        cause: Original exception (or None)
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class NetworkError(TransportError):
    """Network-level error occurred.

    Examples:
        - Connection refused
        - DNS lookup failed
        - Network unreachable
    """

    pass


class TimeoutError(TransportError):
    """Request timed out.

    The connection could not be established, or the server did not answer,
    within the configured timeout.
    """

    pass
