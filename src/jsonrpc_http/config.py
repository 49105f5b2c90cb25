"""Configuration for jsonrpc-http clients.

Settings are read from environment variables with the ``JSONRPC_HTTP_``
prefix, falling back to built-in defaults:

- JSONRPC_HTTP_URL: endpoint URL
- JSONRPC_HTTP_TRANSPORT__TIMEOUT: HTTP timeout in seconds
- JSONRPC_HTTP_TRANSPORT__VERIFY_SSL: verify certificates (true/false)
- JSONRPC_HTTP_HANDOFF_TIMEOUT: seconds to wait between call phases
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class TransportSettings(BaseModel):
    """HTTP transport configuration.

    Attributes:
        timeout: Request timeout in seconds
        verify_ssl: Whether to verify SSL certificates
    """

    timeout: float = Field(default=30.0, gt=0, le=300)
    verify_ssl: bool = Field(default=True)


class ClientSettings(BaseSettings):
    """Client configuration.

    Attributes:
        url: JSON-RPC endpoint URL
        transport: HTTP transport configuration
        handoff_timeout: Seconds the codec waits for a response hand-off

    Example:
        >>> settings = ClientSettings()
        >>> settings.url
        'http://localhost:8080/rpc'
    """

    url: str = Field(default="http://localhost:8080/rpc")
    transport: TransportSettings = Field(default_factory=TransportSettings)
    handoff_timeout: float = Field(default=30.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="JSONRPC_HTTP_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate URL scheme."""
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v
