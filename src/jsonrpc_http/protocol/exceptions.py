"""Protocol layer exceptions.

These exceptions are raised while encoding requests or decoding responses,
and for errors reported by the remote server.
"""

from __future__ import annotations

from typing import Any, ClassVar

from jsonrpc_http.exceptions import RpcError
from jsonrpc_http.protocol.models import JsonRpcError


class EncodeError(RpcError):
    """Call arguments could not be serialized to JSON.

    Args:
        message: Human-readable error description
        cause: Original serialization exception
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ProtocolError(RpcError):
    """Response does not conform to the JSON-RPC envelope.

    Raised for malformed JSON, bodies that are not envelope objects,
    malformed error objects, results of the wrong shape and responses that
    answer a different call.

    Args:
        message: Human-readable error description
        cause: Original exception (optional)
    """

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class HttpStatusError(RpcError):
    """Server answered with a non-2xx HTTP status.

    The JSON body of such a response is never parsed. ``str()`` of this error
    is the HTTP status line, e.g. ``"404 Not Found"``.

    Attributes:
        status_code: HTTP status code
        status_line: Status code followed by the reason phrase
    """

    def __init__(self, status_code: int, reason: str | None = None) -> None:
        self.status_code = status_code
        self.status_line = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(self.status_line)


class NullResultError(RpcError):
    """A reply was expected but the server returned a null result."""

    def __init__(self, message: str = "Result is null") -> None:
        super().__init__(message)


class RemoteError(RpcError):
    """Well-formed JSON-RPC error object returned by the server.

    ``str()`` of this error is the remote message text. Standard error codes
    map to the subclasses below; use :meth:`from_error` to build the right
    one.

    Attributes:
        code: JSON-RPC error code
        message: Remote error message
        data: Additional error data (any JSON value, or None)
    """

    error_code: ClassVar[int | None] = None

    def __init__(self, message: str, code: int, data: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.data = data

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_error(cls, error: JsonRpcError) -> RemoteError:
        """Build the exception matching the error's code.

        Args:
            error: Decoded JSON-RPC error object

        Returns:
            Instance of the most specific RemoteError subclass

        Example:
            >>> err = RemoteError.from_error(JsonRpcError(code=-32601, message="nope"))
            >>> type(err).__name__
            'MethodNotFoundError'
        """
        for subclass in cls.__subclasses__():
            if subclass.error_code == error.code:
                return subclass(error.message, error.code, error.data)
        return cls(error.message, error.code, error.data)


class ParseError(RemoteError):
    """Server could not parse the request JSON (-32700)."""

    error_code = -32700


class InvalidRequestError(RemoteError):
    """Server rejected the request envelope (-32600)."""

    error_code = -32600


class MethodNotFoundError(RemoteError):
    """Method does not exist on the server (-32601)."""

    error_code = -32601


class InvalidParamsError(RemoteError):
    """Method parameters were rejected (-32602)."""

    error_code = -32602


class InternalError(RemoteError):
    """Server failed internally while handling the call (-32603)."""

    error_code = -32603
