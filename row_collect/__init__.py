"""RowCollect - collect converted query result rows into containers."""

from __future__ import annotations

from row_collect.core.binder import ColumnBinder, ColumnReader
from row_collect.core.collector import (
    RowCollector,
    collect_all,
    collect_all_into,
    collect_all_via,
    collect_map,
    collect_map_into,
    collect_map_via,
    collect_one,
    collect_optional,
    get_collector,
)
from row_collect.core.cursor import Cursor, ResultCursor
from row_collect.core.exceptions import (
    ColumnMismatchError,
    CursorError,
    CursorReadError,
    ExecutionError,
    MappingError,
    NoValuePresentError,
    RowCollectError,
    StatementExecutionError,
)
from row_collect.core.readers import (
    read_bool,
    read_datetime,
    read_decimal,
    read_float,
    read_int,
    read_str,
)
from row_collect.core.result import Maybe
from row_collect.executor import (
    BatchConfig,
    BatchStatementExecutor,
    QueryExecutor,
    SingleStatementExecutor,
    StatementExecutor,
)
from row_collect.mapping.model import ModelRowConverter

__all__ = [
    # Collector
    "RowCollector",
    "get_collector",
    "collect_one",
    "collect_optional",
    "collect_all",
    "collect_all_into",
    "collect_all_via",
    "collect_map",
    "collect_map_into",
    "collect_map_via",
    "Maybe",
    # Cursor
    "Cursor",
    "ResultCursor",
    # Readers
    "read_str",
    "read_int",
    "read_float",
    "read_decimal",
    "read_bool",
    "read_datetime",
    # Binder
    "ColumnBinder",
    "ColumnReader",
    # Mapping
    "ModelRowConverter",
    # Executors
    "StatementExecutor",
    "QueryExecutor",
    "SingleStatementExecutor",
    "BatchStatementExecutor",
    "BatchConfig",
    # Exceptions
    "RowCollectError",
    "CursorError",
    "CursorReadError",
    "NoValuePresentError",
    "MappingError",
    "ColumnMismatchError",
    "ExecutionError",
    "StatementExecutionError",
]
