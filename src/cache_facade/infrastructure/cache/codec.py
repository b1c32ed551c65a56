"""
Key and Value Codecs

KeyCodec: (group, key) -> normalized backend key.
ValueCodec: Python value <-> bytes payload.

Both are stateless and shared by every backend, so data written by one
process can be read by any other process using the same physical store.

Key format (must be reproduced bit-for-bit to interoperate):
    UPPER(group.replace("\\", "_") + "_" + key)

Payload format: orjson-encoded JSON bytes.
- Accepts only values that decode back equal to themselves: dict with str
  keys, list, str, int, finite float, bool and None, nested freely
- Rejects tuples, sets, NaN/infinity, datetimes, dataclasses and any other
  type with CacheSerializationError, since JSON would hand back a
  different value (a list, null, a string)
"""

import math
from typing import Any

import orjson

from cache_facade.core.config.constants import KEY_SEPARATOR, NAMESPACE_SEPARATOR
from cache_facade.core.exceptions import CacheSerializationError


def normalize_key(group: str, key: str) -> str:
    """
    Normalize a (group, key) pair into the backend key.

    Namespace separators in the group are flattened first so "app\\users"
    and "app_users" address the same entry.

    Example:
        >>> normalize_key("app\\users", "42")
        'APP_USERS_42'
    """
    flattened = group.replace(NAMESPACE_SEPARATOR, KEY_SEPARATOR)
    return f"{flattened}{KEY_SEPARATOR}{key}".upper()


def _ensure_round_trip(value: Any, path: str = "$") -> None:
    """Reject values whose JSON form would decode to something else."""
    if value is None or isinstance(value, (bool, int, str)):
        return

    if isinstance(value, float):
        if not math.isfinite(value):
            raise CacheSerializationError(
                "Value cannot be cached",
                details={"value_type": "float", "path": path, "reason": "non-finite float"},
            )
        return

    if isinstance(value, list):
        for index, item in enumerate(value):
            _ensure_round_trip(item, f"{path}[{index}]")
        return

    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise CacheSerializationError(
                    "Value cannot be cached",
                    details={"value_type": type(key).__name__, "path": path, "reason": "non-str dict key"},
                )
            _ensure_round_trip(item, f"{path}.{key}")
        return

    raise CacheSerializationError(
        "Value cannot be cached",
        details={"value_type": type(value).__name__, "path": path, "reason": "unsupported type"},
    )


def encode_value(value: Any) -> bytes:
    """
    Serialize a value into a payload.

    Guarantees decode_value(encode_value(v)) == v for every accepted value.

    Raises:
        CacheSerializationError: If the value would not survive a round trip
    """
    _ensure_round_trip(value)
    try:
        return orjson.dumps(value)
    except TypeError as e:
        # orjson.JSONEncodeError subclasses TypeError
        raise CacheSerializationError.from_exception(
            e, message="Value cannot be cached", value_type=type(value).__name__
        ) from e


def decode_value(payload: bytes | str) -> Any:
    """
    Deserialize a payload produced by encode_value.

    Raises:
        orjson.JSONDecodeError: If the payload is not valid JSON
    """
    return orjson.loads(payload)
