"""Typed field readers shared by the header and shape decoders."""

from __future__ import annotations

import math
from typing import Any

from manifest.core.errors import ChartDecodeError, MalformedJsonError


def require_object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        kind = type(value).__name__
        raise MalformedJsonError(f"{path} must be a JSON object, got {kind}")
    return value


def require_str(obj: dict[str, Any], key: str, path: str) -> str:
    if key not in obj:
        raise MalformedJsonError(f"{path}.{key} is missing")
    value = obj[key]
    if not isinstance(value, str):
        raise MalformedJsonError(f"{path}.{key} must be a string")
    return value


def require_float(obj: dict[str, Any], key: str, path: str) -> float:
    if key not in obj:
        raise MalformedJsonError(f"{path}.{key} is missing")
    value = obj[key]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedJsonError(f"{path}.{key} must be a number")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    if not math.isfinite(number):
        raise MalformedJsonError(f"{path}.{key} must be finite, got {value!r}")
    return number


def require_int(
    obj: dict[str, Any],
    key: str,
    path: str,
    *,
    error: type[ChartDecodeError],
    lo: int,
    hi: int,
) -> int:
    """Read an integer in ``[lo, hi]``; any failure raises *error*.

    JSON integers and integral floats (``120.0``) are accepted, booleans are not.
    """
    if key not in obj:
        raise error(f"{path}.{key} is missing")
    value = obj[key]
    if isinstance(value, bool):
        raise error(f"{path}.{key} must be an integer, got a boolean")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, int):
        raise error(f"{path}.{key} must be an integer, got {value!r}")
    if not lo <= value <= hi:
        raise error(f"{path}.{key} must be in {lo}..{hi}, got {value}")
    return value


def optional_int(
    obj: dict[str, Any],
    key: str,
    path: str,
    default: int,
    *,
    error: type[ChartDecodeError],
    lo: int,
    hi: int,
) -> int:
    if key not in obj:
        return default
    return require_int(obj, key, path, error=error, lo=lo, hi=hi)


def optional_bool(obj: dict[str, Any], key: str, path: str, default: bool) -> bool:
    if key not in obj:
        return default
    value = obj[key]
    if not isinstance(value, bool):
        raise MalformedJsonError(f"{path}.{key} must be a boolean")
    return value
