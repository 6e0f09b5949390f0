from __future__ import annotations

from typing import Any

import pandas as pd


def _cast_to_float(value: Any) -> float | None:
    """Convert a value to float, or None if that fails."""
    if isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def _cast_to_int(value: Any) -> int | None:
    """Convert a value to int (truncating floats), or None if that fails."""
    if isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        return int(float(value))  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None


def _normalize_scalar(value: Any) -> Any | None:
    """
    Common preprocessing for values coming out of JSON arrays or pandas:
    - None → None
    - pandas NA / NaN → None
    - numpy scalar → .item()
    """
    if value is None:
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # lists and other containers are not scalars
        return None

    if hasattr(value, "item"):
        value = value.item()

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """Cast a JSON scalar to int/float/str, returning None when it cannot be read."""
    value = _normalize_scalar(value)
    if value is None:
        return None

    if type_ is float:
        return _cast_to_float(value)
    if type_ is int:
        return _cast_to_int(value)
    if type_ is str:
        return str(value)
    return None


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def as_str(x: Any) -> str | None:
    return safe_cast(x, str)


def value_at(values: list[Any] | None, idx: int) -> Any | None:
    """Return values[idx] or None when the array is missing or too short."""
    if not values or idx >= len(values):
        return None
    return values[idx]
