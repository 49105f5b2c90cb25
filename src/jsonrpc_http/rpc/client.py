"""Generic call layer.

:class:`RpcClient` numbers calls and drives a :class:`ClientCodec` through
its write, header and body phases, one call at a time.
"""

from __future__ import annotations

import threading
from typing import Any

import structlog

from jsonrpc_http.config import ClientSettings
from jsonrpc_http.exceptions import MisuseError, ServerError
from jsonrpc_http.protocol.exceptions import ProtocolError
from jsonrpc_http.rpc.codec import ClientCodec, HttpJsonRpcCodec
from jsonrpc_http.rpc.models import CallRequest, CallResponse

logger = structlog.get_logger()


class RpcClient:
    """Synchronous RPC client on top of a client codec.

    Calls are serialized with a lock: a call's write, header and body phases
    complete before the next call is written.

    Args:
        codec: Client codec used for every call

    Attributes:
        codec: The underlying codec
        seq: Sequence number of the last call issued

    Example:
        >>> client = RpcClient(HttpJsonRpcCodec("http://localhost:8080/rpc"))
        >>> client.call("Mock.Echo", "Hello there", str)
        'Hello there'
    """

    def __init__(self, codec: ClientCodec) -> None:
        self.codec = codec
        self.seq = 0
        self._mutex = threading.Lock()
        self._closed = False

    def _next_seq(self) -> int:
        self.seq += 1
        return self.seq

    def call(self, service_method: str, args: Any = None, reply_type: Any = None) -> Any:
        """Invoke ``service_method`` and wait for its result.

        Args:
            service_method: Method name, e.g. "Mock.Echo"
            args: Call arguments, sent as ``params``
            reply_type: Expected result type; None discards the result

        Returns:
            The result validated as ``reply_type``, or None when discarding

        Raises:
            MisuseError: If the client is closed
            HttpStatusError: If the server answered with a non-2xx status
            RemoteError: If the server returned a JSON-RPC error
            ProtocolError: If the response is malformed or answers another call
            NullResultError: If a result was expected but is null
            EncodeError: If ``args`` cannot be serialized
            TransportError: If the server could not be reached
        """
        with self._mutex:
            if self._closed:
                raise MisuseError("Client is closed")

            request = CallRequest(service_method=service_method, seq=self._next_seq())
            logger.debug("rpc_call_started", method=service_method, seq=request.seq)

            self.codec.write_request(request, args)
            response = CallResponse()
            handle = self.codec.read_response_header(response)

            if response.seq is not None and response.seq != request.seq:
                if handle is not None:
                    self.codec.read_response_body(handle)
                logger.error(
                    "rpc_response_id_mismatch",
                    method=service_method,
                    seq=request.seq,
                    response_seq=response.seq,
                )
                raise ProtocolError(
                    f"Response id {response.seq} does not match request id {request.seq}"
                )

            if response.error is not None:
                raise response.cause or ServerError(response.error)

            return self.codec.read_response_body(handle, reply_type)

    def close(self) -> None:
        """Close the client and its codec."""
        with self._mutex:
            if self._closed:
                return
            self._closed = True
        self.codec.close()

    def __enter__(self) -> RpcClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()


def dial_http(url: str | None = None, settings: ClientSettings | None = None) -> RpcClient:
    """Create a client speaking JSON-RPC over HTTP.

    Args:
        url: Endpoint URL; defaults to ``settings.url``
        settings: Client settings; loaded from the environment if omitted

    Returns:
        Client owning its codec and transport

    Example:
        >>> with dial_http("http://localhost:8080/rpc") as client:
        ...     client.call("Mock.Echo", "Hello there", str)
        'Hello there'
    """
    settings = settings or ClientSettings()
    return RpcClient(HttpJsonRpcCodec.from_settings(settings, url=url))
