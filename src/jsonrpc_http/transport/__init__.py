"""Transport layer for jsonrpc-http.

This module handles HTTP communication with no knowledge of the JSON-RPC
protocol. It is responsible for:
- HTTP POST requests
- Timeout and certificate verification settings
- Network error translation
"""

from jsonrpc_http.transport.exceptions import TransportError, NetworkError, TimeoutError
from jsonrpc_http.transport.http import HttpTransport, JSONRPC_CONTENT_TYPE

__all__ = [
    "HttpTransport",
    "JSONRPC_CONTENT_TYPE",
    "TransportError",
    "NetworkError",
    "TimeoutError",
]
