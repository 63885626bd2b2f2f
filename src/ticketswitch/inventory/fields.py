"""Typed field readers used by ``from_payload`` constructors.

Absent keys and JSON ``null`` read as the zero value of the field type; a
present value of the wrong JSON type raises :class:`TicketSwitchDecodeError`.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import TypeVar

from ..core.errors import TicketSwitchDecodeError

JsonObject = Mapping[str, object]
T = TypeVar("T")

_ZERO = Decimal("0")


def _type_error(key: str, expected: str, value: object) -> TicketSwitchDecodeError:
    return TicketSwitchDecodeError(
        f"field {key!r} must be {expected}, got {type(value).__name__}"
    )


def require_object(value: object, what: str) -> JsonObject:
    if not isinstance(value, dict):
        raise TicketSwitchDecodeError(f"{what} must be an object")
    return value


def get_str(payload: JsonObject, key: str) -> str:
    value = payload.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _type_error(key, "a string", value)
    return value


def get_bool(payload: JsonObject, key: str) -> bool:
    value = payload.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _type_error(key, "a boolean", value)
    return value


def get_int(payload: JsonObject, key: str) -> int:
    value = payload.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _type_error(key, "an integer", value)
    return value


def get_float(payload: JsonObject, key: str) -> float:
    value = payload.get(key)
    if value is None:
        return 0.0
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise _type_error(key, "a number", value)
    return float(value)


def get_decimal(payload: JsonObject, key: str) -> Decimal:
    """Read a monetary amount; numeric strings are accepted as well."""

    value = payload.get(key)
    if value is None:
        return _ZERO
    if isinstance(value, bool):
        raise _type_error(key, "a decimal", value)
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, str):
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise TicketSwitchDecodeError(f"field {key!r} is not a decimal: {value!r}") from exc
    raise _type_error(key, "a decimal", value)


def get_datetime(payload: JsonObject, key: str) -> datetime | None:
    value = payload.get(key)
    if value is None or value == "":
        return None
    if not isinstance(value, str):
        raise _type_error(key, "an ISO 8601 string", value)
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise TicketSwitchDecodeError(f"field {key!r} is not ISO 8601: {value!r}") from exc


def get_object(
    payload: JsonObject,
    key: str,
    factory: Callable[[JsonObject], T],
) -> T | None:
    value = payload.get(key)
    if value is None:
        return None
    return factory(require_object(value, f"field {key!r}"))


def _get_list(payload: JsonObject, key: str) -> list[object]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _type_error(key, "an array", value)
    return value


def get_list(
    payload: JsonObject,
    key: str,
    factory: Callable[[JsonObject], T],
) -> tuple[T, ...]:
    return tuple(
        factory(require_object(item, f"element of {key!r}"))
        for item in _get_list(payload, key)
    )


def get_str_list(payload: JsonObject, key: str) -> tuple[str, ...]:
    items = _get_list(payload, key)
    for item in items:
        if not isinstance(item, str):
            raise _type_error(key, "an array of strings", item)
    return tuple(items)


def get_int_list(payload: JsonObject, key: str) -> tuple[int, ...]:
    items = _get_list(payload, key)
    for item in items:
        if isinstance(item, bool) or not isinstance(item, int):
            raise _type_error(key, "an array of integers", item)
    return tuple(items)


def _get_mapping(payload: JsonObject, key: str) -> dict[str, object]:
    value = payload.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise _type_error(key, "an object", value)
    return value


def get_mapping(
    payload: JsonObject,
    key: str,
    factory: Callable[[JsonObject], T],
) -> dict[str, T]:
    return {
        name: factory(require_object(item, f"entry {name!r} of {key!r}"))
        for name, item in _get_mapping(payload, key).items()
    }


def get_str_mapping(payload: JsonObject, key: str) -> dict[str, str]:
    values = _get_mapping(payload, key)
    for item in values.values():
        if not isinstance(item, str):
            raise _type_error(key, "an object of strings", item)
    return dict(values)


def get_str_matrix_mapping(
    payload: JsonObject,
    key: str,
) -> dict[str, tuple[tuple[str, ...], ...]]:
    """Read an object of string arrays of arrays, e.g. seat blocks per row."""

    matrices: dict[str, tuple[tuple[str, ...], ...]] = {}
    for name, rows in _get_mapping(payload, key).items():
        if not isinstance(rows, list):
            raise _type_error(key, "an object of arrays", rows)
        matrix: list[tuple[str, ...]] = []
        for row in rows:
            if not isinstance(row, list) or not all(isinstance(item, str) for item in row):
                raise _type_error(key, "an object of string arrays", row)
            matrix.append(tuple(row))
        matrices[name] = tuple(matrix)
    return matrices


def get_raw_mapping(payload: JsonObject, key: str) -> dict[str, object]:
    """Read an object whose contents are opaque to this library."""

    return dict(_get_mapping(payload, key))


__all__ = [
    "JsonObject",
    "require_object",
    "get_str",
    "get_bool",
    "get_int",
    "get_float",
    "get_decimal",
    "get_datetime",
    "get_object",
    "get_list",
    "get_str_list",
    "get_int_list",
    "get_mapping",
    "get_str_mapping",
    "get_str_matrix_mapping",
    "get_raw_mapping",
]
