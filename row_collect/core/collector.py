"""Row collector.

Iterates a forward-only result cursor once, applying a caller-supplied
conversion function to every row and accumulating the results into a
value, a ``Maybe``, a sequence or a mapping.

Failures while advancing the cursor raise ``CursorReadError`` and abort the
pass. A caller-supplied container keeps whatever was appended before the
failure. Exceptions raised by the conversion function propagate unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from typing import Any, Protocol, TypeVar

from row_collect.core.cursor import Cursor, ResultCursor
from row_collect.core.exceptions import CursorReadError, RowCollectError
from row_collect.core.result import Maybe

logger = logging.getLogger(__name__)

T = TypeVar("T")
K = TypeVar("K")
V = TypeVar("V")
S = TypeVar("S", bound="Appendable[Any]")
M = TypeVar("M", bound=MutableMapping[Any, Any])


class Appendable(Protocol[T]):
    """Any container with ``append``: list, deque, custom sequences."""

    def append(self, item: T, /) -> None: ...


def _advance(cursor: Cursor) -> bool:
    try:
        return cursor.advance()
    except RowCollectError:
        raise
    except Exception as e:
        raise CursorReadError(str(e)) from e


class RowCollector:
    """Collects converted cursor rows into containers.

    Every method accepts either a ``Cursor`` or a raw DB-API cursor, which
    is wrapped in ``ResultCursor``. The cursor is advanced forward only and
    is not retained after the call.
    """

    def collect_one(self, cursor: Any, conversion: Callable[[Cursor], T]) -> T | None:
        """Convert the next row, or return None if there is none."""
        cursor = ResultCursor.wrap(cursor)
        if not _advance(cursor):
            return None
        return conversion(cursor)

    def collect_optional(self, cursor: Any, conversion: Callable[[Cursor], T]) -> Maybe[T]:
        """Convert the next row into a Maybe.

        Empty if there is no row or the conversion returned None.
        """
        cursor = ResultCursor.wrap(cursor)
        if not _advance(cursor):
            return Maybe.empty()
        return Maybe.of_nullable(conversion(cursor))

    def collect_all(self, cursor: Any, conversion: Callable[[Cursor], T]) -> list[T]:
        """Convert every remaining row into a new list."""
        return self.collect_all_into(cursor, conversion, [])

    def collect_all_into(
        self,
        cursor: Any,
        conversion: Callable[[Cursor], T],
        target: S,
    ) -> S:
        """Append every remaining converted row to target and return it."""
        cursor = ResultCursor.wrap(cursor)
        count = 0
        while _advance(cursor):
            target.append(conversion(cursor))
            count += 1
        logger.debug("Collected %d row(s) into %s", count, type(target).__name__)
        return target

    def collect_all_via(
        self,
        cursor: Any,
        conversion: Callable[[Cursor], T],
        factory: Callable[[], S],
    ) -> S:
        """Append every remaining converted row to a container from factory()."""
        return self.collect_all_into(cursor, conversion, factory())

    def collect_map(
        self,
        cursor: Any,
        conversion: Callable[[Cursor], tuple[K, V]],
    ) -> dict[K, V]:
        """Convert every remaining row into a (key, value) pair of a new dict.

        A later row with a duplicate key overwrites the earlier value.
        """
        return self.collect_map_into(cursor, conversion, {})

    def collect_map_into(
        self,
        cursor: Any,
        conversion: Callable[[Cursor], tuple[K, V]],
        target: M,
    ) -> M:
        """Insert every remaining converted (key, value) pair into target."""
        cursor = ResultCursor.wrap(cursor)
        count = 0
        while _advance(cursor):
            key, value = conversion(cursor)
            target[key] = value
            count += 1
        logger.debug("Collected %d row(s) into %s", count, type(target).__name__)
        return target

    def collect_map_via(
        self,
        cursor: Any,
        conversion: Callable[[Cursor], tuple[K, V]],
        factory: Callable[[], M],
    ) -> M:
        """Insert every remaining converted pair into a mapping from factory()."""
        return self.collect_map_into(cursor, conversion, factory())


_collector = RowCollector()


def get_collector() -> RowCollector:
    """Return the shared stateless collector."""
    return _collector


collect_one = _collector.collect_one
collect_optional = _collector.collect_optional
collect_all = _collector.collect_all
collect_all_into = _collector.collect_all_into
collect_all_via = _collector.collect_all_via
collect_map = _collector.collect_map
collect_map_into = _collector.collect_map_into
collect_map_via = _collector.collect_map_via
