"""Call descriptors shared by the generic call layer and client codecs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CallRequest:
    """Header of an outgoing call.

    Attributes:
        service_method: Method name in "Service.Method" form
        seq: Sequence number assigned by the call layer
    """

    service_method: str
    seq: int


@dataclass
class CallResponse:
    """Header of an incoming response, filled in by the header phase.

    Attributes:
        seq: Sequence number decoded from the response, None if unknown
        error: Error text when the call failed, None on success
        cause: Typed exception behind ``error``, when the codec provides one
    """

    seq: int | None = None
    error: str | None = None
    cause: Exception | None = None

    def fail(self, cause: Exception) -> None:
        """Mark the call failed with ``cause``."""
        self.error = str(cause)
        self.cause = cause
