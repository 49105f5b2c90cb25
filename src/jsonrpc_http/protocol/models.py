"""JSON-RPC 2.0 envelope models.

Pydantic models for the request, response and error envelopes exchanged with
the server. The response keeps ``result`` and ``error`` as raw JSON values so
that they can be decoded lazily, once the caller knows what it expects.

References:
    JSON-RPC 2.0 Specification: https://www.jsonrpc.org/specification
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

JSONRPC_VERSION = "2.0"


class JsonRpcError(BaseModel):
    """JSON-RPC 2.0 error object.

    Attributes:
        code: Error code (integer)
        message: Human-readable error message
        data: Additional error information (optional, any JSON value)

    Example:
        >>> error = JsonRpcError(code=-32601, message="Method not found")
        >>> error.code
        -32601
    """

    code: int = Field(..., strict=True, description="Error code")
    message: str = Field(..., description="Error message")
    data: Any = Field(default=None, description="Additional error data")

    model_config = ConfigDict(frozen=True)


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request object.

    Attributes:
        jsonrpc: Protocol version (always "2.0")
        method: Method name to invoke, e.g. "Service.Method"
        params: Method arguments, any JSON-serializable value
        id: Sequence number assigned by the caller

    Example:
        >>> request = JsonRpcRequest(method="Mock.Echo", params="hi", id=1)
        >>> request.model_dump_json()
        '{"jsonrpc":"2.0","method":"Mock.Echo","params":"hi","id":1}'
    """

    jsonrpc: Literal["2.0"] = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    method: str = Field(..., description="Method name to invoke")
    params: Any = Field(default=None, description="Method arguments")
    id: int = Field(..., ge=0, description="Request sequence number")

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response object.

    ``result`` and ``error`` are left undecoded. Per the protocol only one of
    them is meaningful, but both may be present as null. ``jsonrpc`` is
    optional so that servers speaking the 1.0 envelope are understood too.

    Attributes:
        jsonrpc: Protocol version reported by the server
        result: Raw result payload (None when absent or null)
        error: Raw error object (None when absent or null)
        id: Sequence number echoed from the request
    """

    jsonrpc: str | None = Field(default=None, description="JSON-RPC version")
    result: Any = Field(default=None, description="Raw method result")
    error: Any = Field(default=None, description="Raw error object")
    id: int | None = Field(
        default=None, ge=0, strict=True, description="Request sequence number"
    )

    model_config = ConfigDict(frozen=True, extra="ignore")
