"""Typed column readers.

Each reader has the signature ``(cursor, label) -> value | None`` so it can
be bound to a column in a ``ColumnBinder``. SQL NULL passes through as
None. Values that cannot be coerced raise ``CursorReadError``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from row_collect.core.cursor import Cursor
from row_collect.core.exceptions import CursorReadError

_TRUE_STRINGS = frozenset({"1", "t", "true", "y", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "f", "false", "n", "no", "off"})


def _coerce(cursor: Cursor, label: str, cast: Any) -> Any:
    try:
        value = cursor.read_column(label)
    except CursorReadError:
        raise
    except Exception as e:
        raise CursorReadError(str(e), column=label) from e
    if value is None:
        return None
    try:
        return cast(value)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise CursorReadError(
            f"cannot convert {type(value).__name__} value {value!r}: {e}",
            column=label,
        ) from e


def _to_str(value: Any) -> str:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _to_int(value: Any) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValueError("fractional value")
    if isinstance(value, Decimal) and value != value.to_integral_value():
        raise ValueError("fractional value")
    return int(value)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0
    text = _to_str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    raise ValueError("not a boolean")


def _to_decimal(value: Any) -> Decimal:
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _to_utc_datetime(value: Any) -> datetime:
    """Return a naive datetime expressed in UTC."""
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
        try:
            result = datetime.fromtimestamp(float(value), tz=timezone.utc)
        except OSError as e:
            # platform localtime/gmtime limits surface as OSError
            raise ValueError(f"epoch value out of range: {e}") from e
    elif isinstance(value, (str, bytes)):
        result = datetime.fromisoformat(_to_str(value).strip())
    else:
        raise TypeError("unsupported datetime representation")

    if result.tzinfo is not None:
        result = result.astimezone(timezone.utc).replace(tzinfo=None)
    return result


def read_str(cursor: Cursor, label: str) -> str | None:
    return _coerce(cursor, label, _to_str)  # type: ignore[no-any-return]


def read_int(cursor: Cursor, label: str) -> int | None:
    """Read an integer column. Fractional numbers are rejected."""
    return _coerce(cursor, label, _to_int)  # type: ignore[no-any-return]


def read_float(cursor: Cursor, label: str) -> float | None:
    return _coerce(cursor, label, float)  # type: ignore[no-any-return]


def read_decimal(cursor: Cursor, label: str) -> Decimal | None:
    return _coerce(cursor, label, _to_decimal)  # type: ignore[no-any-return]


def read_bool(cursor: Cursor, label: str) -> bool | None:
    """Read a boolean column.

    Accepts booleans, numbers (non-zero is True) and the usual textual
    spellings such as ``"true"``/``"f"``/``"yes"``.
    """
    return _coerce(cursor, label, _to_bool)  # type: ignore[no-any-return]


def read_datetime(cursor: Cursor, label: str) -> datetime | None:
    """Read a timestamp column as a naive UTC datetime.

    Accepts ``datetime`` values, ISO-8601 strings and epoch seconds. Aware
    values are converted to UTC before the timezone is dropped; naive values
    are assumed to already be UTC.
    """
    return _coerce(cursor, label, _to_utc_datetime)  # type: ignore[no-any-return]
