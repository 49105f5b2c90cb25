"""Client codecs: the two-phase contract and its JSON-RPC over HTTP adapter.

A call goes through three phases, driven by the generic call layer:

1. ``write_request`` encodes and sends the call,
2. ``read_response_header`` decides success or failure and correlation,
3. ``read_response_body`` decodes the result into the requested type.

The header phase returns a :class:`ResponseHandle` that the body phase
consumes, so a body can only be read for a header that succeeded.
"""

from __future__ import annotations

import abc
import threading
from contextlib import closing
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

import requests
import structlog

from jsonrpc_http.exceptions import MisuseError
from jsonrpc_http.protocol.envelope import (
    decode_error,
    decode_response,
    decode_result,
    encode_request,
)
from jsonrpc_http.protocol.exceptions import (
    HttpStatusError,
    NullResultError,
    ProtocolError,
    RemoteError,
)
from jsonrpc_http.protocol.models import JsonRpcResponse
from jsonrpc_http.rpc.correlator import CallCorrelator
from jsonrpc_http.rpc.models import CallRequest, CallResponse
from jsonrpc_http.transport.exceptions import TransportError
from jsonrpc_http.transport.http import JSONRPC_CONTENT_TYPE, HttpTransport

if TYPE_CHECKING:
    from jsonrpc_http.config import ClientSettings

logger = structlog.get_logger()


class CodecState(str, Enum):
    """Lifecycle of a client codec."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"
    HEADER_READY = "header_ready"
    CLOSED = "closed"


@dataclass(eq=False)
class ResponseHandle:
    """Single-use token for the body phase of a successful header read."""

    seq: int | None
    envelope: JsonRpcResponse = field(repr=False)
    consumed: bool = False


class ClientCodec(abc.ABC):
    """Two-phase contract the generic call layer drives."""

    @abc.abstractmethod
    def write_request(self, request: CallRequest, args: Any) -> None:
        """Encode and send one call."""

    @abc.abstractmethod
    def read_response_header(self, response: CallResponse) -> ResponseHandle | None:
        """Read the response to the call in flight.

        Fills ``response``. Returns a handle for the body phase, or None when
        the call failed and there is no body to read.
        """

    @abc.abstractmethod
    def read_response_body(self, handle: ResponseHandle | None, reply_type: Any = None) -> Any:
        """Decode the result for ``handle``; ``reply_type=None`` discards it."""

    @abc.abstractmethod
    def close(self) -> None:
        """Release the codec."""


class HttpJsonRpcCodec(ClientCodec):
    """JSON-RPC 2.0 over HTTP client codec.

    Every call is one HTTP POST. The raw HTTP response is handed from the
    write phase to the header phase through a single-slot correlator, so only
    one call may be in flight at a time.

    Args:
        address: URL of the JSON-RPC endpoint
        transport: HTTP transport; a default one is created if omitted
        handoff_timeout: Seconds to wait on the correlator slot
        owns_transport: Close the transport on ``close()``. Defaults to True
            when the codec created the transport itself.

    Example:
        >>> codec = HttpJsonRpcCodec("http://localhost:8080/rpc")
        >>> codec.write_request(CallRequest("Mock.Echo", 1), "Hello there")
        >>> response = CallResponse()
        >>> handle = codec.read_response_header(response)
        >>> codec.read_response_body(handle, str)
        'Hello there'
    """

    def __init__(
        self,
        address: str,
        transport: HttpTransport | None = None,
        handoff_timeout: float | None = 30.0,
        owns_transport: bool | None = None,
    ) -> None:
        if not address:
            raise ValueError("address cannot be empty")

        self.address = address
        self.transport = transport or HttpTransport()
        self._owns_transport = transport is None if owns_transport is None else owns_transport
        self._correlator: CallCorrelator[requests.Response] = CallCorrelator(handoff_timeout)
        self._lock = threading.Lock()
        self._state = CodecState.IDLE
        self._handle: ResponseHandle | None = None

    @classmethod
    def from_settings(cls, settings: ClientSettings, url: str | None = None) -> HttpJsonRpcCodec:
        """Build a codec and its own transport from settings."""
        transport = HttpTransport(
            timeout=settings.transport.timeout,
            verify_ssl=settings.transport.verify_ssl,
        )
        return cls(
            url or settings.url,
            transport=transport,
            handoff_timeout=settings.handoff_timeout,
            owns_transport=True,
        )

    @property
    def state(self) -> CodecState:
        return self._state

    def _set_state(self, state: CodecState) -> None:
        with self._lock:
            if self._state is not CodecState.CLOSED:
                self._state = state

    def write_request(self, request: CallRequest, args: Any) -> None:
        """Encode the call, POST it and hand the response to the reader.

        Raises:
            MisuseError: If the codec is closed or the slot stays occupied
            EncodeError: If ``args`` cannot be serialized
            TransportError: If the POST could not be completed
        """
        if self._state is CodecState.CLOSED:
            raise MisuseError("Codec is closed")

        body = encode_request(request.service_method, args, request.seq)
        http_response = self.transport.post(self.address, body, JSONRPC_CONTENT_TYPE)

        self._set_state(CodecState.AWAITING_RESPONSE)
        try:
            self._correlator.hand_off(http_response)
        except MisuseError:
            http_response.close()
            raise

        logger.debug(
            "rpc_request_written",
            method=request.service_method,
            seq=request.seq,
            status_code=http_response.status_code,
        )

    def read_response_header(self, response: CallResponse) -> ResponseHandle | None:
        """Receive the HTTP response and decode its envelope.

        Non-2xx statuses and remote errors mark ``response`` failed and return
        None. The HTTP response is closed before returning.

        Raises:
            MisuseError: If no request was written
            ProtocolError: If the envelope or error object is malformed
            TransportError: If the body could not be read
        """
        http_response = self._correlator.receive()
        try:
            with closing(http_response):
                handle = self._decode_header(http_response, response)
        except (ProtocolError, TransportError) as e:
            logger.error("rpc_response_invalid", error=str(e))
            self._set_state(CodecState.IDLE)
            raise

        with self._lock:
            self._handle = handle
            if self._state is not CodecState.CLOSED:
                self._state = CodecState.HEADER_READY if handle else CodecState.IDLE
        return handle

    def _decode_header(
        self,
        http_response: requests.Response,
        response: CallResponse,
    ) -> ResponseHandle | None:
        if http_response.status_code // 100 != 2:
            response.fail(HttpStatusError(http_response.status_code, http_response.reason))
            logger.warning("rpc_http_status_error", status=response.error)
            return None

        try:
            body = http_response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Failed to read response body: {str(e)}", cause=e)

        envelope = decode_response(body)
        response.seq = envelope.id

        if envelope.error is not None:
            error = decode_error(envelope.error)
            response.fail(RemoteError.from_error(error))
            logger.warning(
                "rpc_remote_error",
                seq=envelope.id,
                code=error.code,
                message=error.message,
            )
            return None

        return ResponseHandle(seq=envelope.id, envelope=envelope)

    def read_response_body(self, handle: ResponseHandle | None, reply_type: Any = None) -> Any:
        """Decode the retained result into ``reply_type``.

        Args:
            handle: Handle returned by the preceding header read
            reply_type: Expected result type; None discards the result

        Returns:
            The decoded result, or None when discarding

        Raises:
            MisuseError: If ``handle`` is not the live handle of this codec
            NullResultError: If a result was expected but is null
            ProtocolError: If the result does not match ``reply_type``
        """
        with self._lock:
            if handle is None or handle is not self._handle or handle.consumed:
                raise MisuseError("Response body read without a successful header read")
            handle.consumed = True
            self._handle = None
            if self._state is not CodecState.CLOSED:
                self._state = CodecState.IDLE

        if reply_type is None:
            return None

        result = handle.envelope.result
        if result is None:
            logger.warning("rpc_null_result", seq=handle.seq)
            raise NullResultError()

        return decode_result(result, reply_type)

    def close(self) -> None:
        """Move to CLOSED. A response already handed off can still be read."""
        with self._lock:
            if self._state is CodecState.CLOSED:
                return
            self._state = CodecState.CLOSED

        if self._owns_transport:
            self.transport.close()
        logger.debug("rpc_codec_closed", address=self.address)
