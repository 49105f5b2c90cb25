"""Single-slot hand-off between the write and read phases of a call."""

from __future__ import annotations

import queue
from typing import Generic, TypeVar

import structlog

from jsonrpc_http.exceptions import MisuseError

logger = structlog.get_logger()

T = TypeVar("T")


class CallCorrelator(Generic[T]):
    """Capacity-1 channel carrying the raw response of the call in flight.

    ``hand_off`` blocks while the slot is occupied and ``receive`` blocks
    until a value is available. Both give up after ``timeout`` seconds and
    raise MisuseError, since either situation means calls were overlapped or
    phases skipped. The correlator never checks which call a value belongs to.

    Args:
        timeout: Seconds to wait on the slot, None to wait forever
    """

    def __init__(self, timeout: float | None = 30.0) -> None:
        self.timeout = timeout
        self._slot: queue.Queue[T] = queue.Queue(maxsize=1)

    @property
    def pending(self) -> bool:
        """Whether a value is waiting to be received."""
        return self._slot.full()

    def hand_off(self, value: T) -> None:
        """Place ``value`` in the slot.

        Raises:
            MisuseError: If the previous value was not received in time
        """
        try:
            self._slot.put(value, timeout=self.timeout)
        except queue.Full:
            logger.error("call_handoff_timeout", timeout=self.timeout)
            raise MisuseError(
                "Previous response was never read; calls must not overlap"
            ) from None

    def receive(self) -> T:
        """Take the value out of the slot.

        Raises:
            MisuseError: If nothing was handed off in time
        """
        try:
            return self._slot.get(timeout=self.timeout)
        except queue.Empty:
            logger.error("call_receive_timeout", timeout=self.timeout)
            raise MisuseError("No response in flight; write the request first") from None
