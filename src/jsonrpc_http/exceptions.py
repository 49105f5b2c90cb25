"""Base exceptions for jsonrpc-http."""

from __future__ import annotations


class RpcError(Exception):
    """Base exception for all jsonrpc-http errors."""

    pass


class MisuseError(RpcError):
    """Programming contract violation.

    Raised when the two-phase call contract is not followed, e.g. reading a
    response body without a valid header handle or writing on a closed codec.
    """

    pass


class ServerError(RpcError):
    """Call failure reported only as error text."""

    pass
