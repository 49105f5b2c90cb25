"""JSON-RPC envelope codec.

Pure functions that turn call arguments into request bytes and response bytes
into envelopes, errors and results. No I/O and no state.
"""

from __future__ import annotations

import json
import math
from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_json

from jsonrpc_http.protocol.exceptions import EncodeError, ProtocolError
from jsonrpc_http.protocol.models import JsonRpcError, JsonRpcRequest, JsonRpcResponse


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid JSON number")


def _non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_non_finite(v) for v in value.values())
    if isinstance(value, (list, tuple, set, frozenset)):
        return any(_non_finite(v) for v in value)
    return False


def encode_request(method: str, params: Any, request_id: int) -> bytes:
    """Serialize a JSON-RPC 2.0 request envelope.

    NaN and infinities have no JSON representation and are rejected rather
    than sent as null.

    Args:
        method: Service method name, e.g. "Mock.Echo"
        params: Call arguments (JSON-compatible value or pydantic model)
        request_id: Sequence number of the call

    Returns:
        UTF-8 encoded request body

    Raises:
        EncodeError: If the request cannot be built or serialized

    Example:
        >>> encode_request("Mock.Echo", "Hello there", 1)
        b'{"jsonrpc":"2.0","method":"Mock.Echo","params":"Hello there","id":1}'
    """
    try:
        request = JsonRpcRequest(method=method, params=params, id=request_id)
    except ValidationError as e:
        raise EncodeError(f"Invalid request for {method!r}: {e}", cause=e)

    try:
        text = request.model_dump_json()
        # Nested models serialize non-finite floats with their own settings
        if _non_finite(request.model_dump()):
            raise ValueError("Out of range float values are not JSON compliant")
        json.loads(text, parse_constant=_reject_constant)
    except (PydanticSerializationError, ValueError, TypeError) as e:
        raise EncodeError(f"Arguments for {method!r} are not serializable: {e}", cause=e)
    return text.encode("utf-8")


def decode_response(body: bytes | str) -> JsonRpcResponse:
    """Parse a response body into an envelope.

    Raises:
        ProtocolError: If the body is not a JSON object shaped like an envelope
    """
    try:
        return JsonRpcResponse.model_validate_json(body)
    except ValidationError as e:
        raise ProtocolError(f"Invalid JSON-RPC response: {e}", cause=e)


def decode_error(raw: Any) -> JsonRpcError:
    """Parse the raw ``error`` member of a response.

    Raises:
        ProtocolError: If code or message is missing or has the wrong type,
            a numeric string included
    """
    try:
        return JsonRpcError.model_validate(raw)
    except ValidationError as e:
        raise ProtocolError(f"Malformed JSON-RPC error object: {e}", cause=e)


def decode_result(raw: Any, reply_type: Any) -> Any:
    """Validate the raw ``result`` member into ``reply_type``.

    Validation is strict and works on the JSON text, so ``"5"`` is not an
    ``int`` and ``true`` is not ``1``.

    Args:
        raw: Decoded JSON value of the result
        reply_type: Any type pydantic can validate (str, list[int], a model...)

    Returns:
        The result as an instance of ``reply_type``

    Raises:
        ProtocolError: If the result does not match ``reply_type``
    """
    try:
        return TypeAdapter(reply_type).validate_json(to_json(raw), strict=True)
    except ValidationError as e:
        raise ProtocolError(f"Result does not match expected type: {e}", cause=e)
