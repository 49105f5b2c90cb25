"""JSON-RPC 2.0 over HTTP client codec."""

from jsonrpc_http.exceptions import MisuseError, RpcError, ServerError
from jsonrpc_http.rpc import HttpJsonRpcCodec, RpcClient, dial_http

__version__ = "0.1.0"

__all__ = [
    "HttpJsonRpcCodec",
    "MisuseError",
    "RpcClient",
    "RpcError",
    "ServerError",
    "dial_http",
]
