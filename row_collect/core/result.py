"""Explicit presence type for single-row results."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from row_collect.core.exceptions import NoValuePresentError

T = TypeVar("T")
U = TypeVar("U")

_EMPTY = object()


class Maybe(Generic[T]):
    """A value that may or may not be present.

    ``None`` is never a present value: ``Maybe(None)`` and
    ``of_nullable(None)`` are empty.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value = _EMPTY if value is None else value

    @classmethod
    def of(cls, value: T) -> Maybe[T]:
        """Wrap a non-None value."""
        if value is None:
            raise ValueError("Maybe.of() requires a non-None value")
        return cls(value)

    @classmethod
    def of_nullable(cls, value: T | None) -> Maybe[T]:
        """Wrap a value, mapping None to empty."""
        if value is None:
            return cls()
        return cls(value)

    @classmethod
    def empty(cls) -> Maybe[T]:
        return cls()

    @property
    def is_present(self) -> bool:
        return self._value is not _EMPTY

    def get(self) -> T:
        """Return the value or raise NoValuePresentError."""
        if self._value is _EMPTY:
            raise NoValuePresentError()
        return self._value  # type: ignore[no-any-return]

    def or_else(self, default: T) -> T:
        if self._value is _EMPTY:
            return default
        return self._value  # type: ignore[no-any-return]

    def map(self, fn: Callable[[T], U | None]) -> Maybe[U]:
        """Apply fn to a present value; empty stays empty."""
        if self._value is _EMPTY:
            return Maybe()
        return Maybe.of_nullable(fn(self._value))

    def __bool__(self) -> bool:
        return self.is_present

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        return self._value is other._value or self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        if self._value is _EMPTY:
            return "Maybe.empty()"
        return f"Maybe.of({self._value!r})"
