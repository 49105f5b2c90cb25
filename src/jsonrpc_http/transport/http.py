"""HTTP transport layer implementation.

This module issues one HTTP POST per call and hands back the raw response.
It has NO knowledge of JSON-RPC: status codes are not interpreted and the
body is not read.
"""

from __future__ import annotations

from typing import Any

import requests
import structlog

from jsonrpc_http.transport.exceptions import (
    NetworkError,
    TimeoutError,
    TransportError,
)

logger = structlog.get_logger()

JSONRPC_CONTENT_TYPE = "application/json"


class HttpTransport:
    """HTTP transport for network communication.

    Wraps a ``requests.Session`` and translates ``requests`` failures into
    transport exceptions. The returned response is streamed: its body has not
    been read, and the caller is responsible for closing it.

    Args:
        timeout: Request timeout in seconds (default: 30)
        verify_ssl: Passed through to ``requests`` (default: True)
        session: Optional pre-built session; one is created if omitted

    Attributes:
        timeout: Request timeout in seconds
        verify_ssl: SSL verification flag
        session: Underlying requests session

    Example:
        >>> transport = HttpTransport(timeout=5)
        >>> response = transport.post("http://localhost:8080/rpc", b"{}")
        >>> response.status_code
        200
        >>> response.close()
    """

    def __init__(
        self,
        timeout: float = 30,
        verify_ssl: bool = True,
        session: requests.Session | None = None,
    ) -> None:
        if timeout <= 0:
            raise ValueError("timeout must be positive")

        self.timeout = timeout
        self.verify_ssl = verify_ssl
        self.session = session or requests.Session()

    def post(
        self,
        address: str,
        body: bytes,
        content_type: str = JSONRPC_CONTENT_TYPE,
    ) -> requests.Response:
        """Send one HTTP POST request.

        Args:
            address: Full URL of the JSON-RPC endpoint
            body: Encoded request body
            content_type: Value of the Content-Type header

        Returns:
            Raw HTTP response with an unread, streamed body

        Raises:
            NetworkError: If connection fails
            TimeoutError: If request times out
            TransportError: For other transport-level errors
        """
        if not address:
            raise ValueError("address cannot be empty")

        try:
            response = self.session.post(
                address,
                data=body,
                headers={"Content-Type": content_type},
                timeout=self.timeout,
                verify=self.verify_ssl,
                stream=True,
            )

        except requests.exceptions.Timeout as e:
            logger.error("http_post_timeout", address=address, timeout=self.timeout)
            raise TimeoutError(
                message=f"Request timed out after {self.timeout}s",
                cause=e,
            )

        except requests.exceptions.ConnectionError as e:
            logger.error("http_post_connection_failed", address=address, error=str(e))
            raise NetworkError(
                message=f"Connection failed: {str(e)}",
                cause=e,
            )

        except requests.exceptions.RequestException as e:
            logger.error("http_post_failed", address=address, error=str(e))
            raise TransportError(
                message=f"Transport error: {str(e)}",
                cause=e,
            )

        logger.debug(
            "http_post_completed",
            address=address,
            status_code=response.status_code,
            request_bytes=len(body),
        )
        return response

    def close(self) -> None:
        """Close the HTTP session and release its connections."""
        self.session.close()

    def __enter__(self) -> HttpTransport:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
