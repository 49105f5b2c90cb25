"""Protocol layer for jsonrpc-http.

This module handles the JSON-RPC 2.0 envelopes with no knowledge of HTTP.
It is responsible for:
- Request/response/error envelope models
- Request encoding and lazy response decoding
- Translating remote error codes to typed exceptions
"""

from jsonrpc_http.protocol.models import (
    JsonRpcRequest,
    JsonRpcResponse,
    JsonRpcError,
)
from jsonrpc_http.protocol.exceptions import (
    EncodeError,
    ProtocolError,
    HttpStatusError,
    NullResultError,
    RemoteError,
    ParseError,
    InvalidRequestError,
    MethodNotFoundError,
    InvalidParamsError,
    InternalError,
)
from jsonrpc_http.protocol.envelope import (
    encode_request,
    decode_response,
    decode_error,
    decode_result,
)

__all__ = [
    # Models
    "JsonRpcRequest",
    "JsonRpcResponse",
    "JsonRpcError",
    # Exceptions
    "EncodeError",
    "ProtocolError",
    "HttpStatusError",
    "NullResultError",
    "RemoteError",
    "ParseError",
    "InvalidRequestError",
    "MethodNotFoundError",
    "InvalidParamsError",
    "InternalError",
    # Codec
    "encode_request",
    "decode_response",
    "decode_error",
    "decode_result",
]
