"""Call layer for jsonrpc-http.

This module ties the protocol and transport layers together:
- Call descriptors shared with client codecs
- Single-slot correlation between the write and read phases
- The JSON-RPC over HTTP client codec
- A synchronous client driving any codec
"""

from jsonrpc_http.rpc.models import CallRequest, CallResponse
from jsonrpc_http.rpc.correlator import CallCorrelator
from jsonrpc_http.rpc.codec import (
    ClientCodec,
    CodecState,
    HttpJsonRpcCodec,
    ResponseHandle,
)
from jsonrpc_http.rpc.client import RpcClient, dial_http

__all__ = [
    "CallRequest",
    "CallResponse",
    "CallCorrelator",
    "ClientCodec",
    "CodecState",
    "HttpJsonRpcCodec",
    "ResponseHandle",
    "RpcClient",
    "dial_http",
]
