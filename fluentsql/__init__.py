from fluentsql import adapters, builder, exceptions
from fluentsql._sql import SQLFactory, sql
from fluentsql.builder import BuiltQuery, JoinClause, Operation, SortDirection, Statement
from fluentsql.config import StatementConfig
from fluentsql.exceptions import (
    FluentSQLError,
    SQLBuilderError,
    UnsupportedOperationError,
)
from fluentsql.typing import ExecuteCallback

__all__ = (
    "BuiltQuery",
    "ExecuteCallback",
    "FluentSQLError",
    "JoinClause",
    "Operation",
    "SQLBuilderError",
    "SQLFactory",
    "SortDirection",
    "Statement",
    "StatementConfig",
    "UnsupportedOperationError",
    "adapters",
    "builder",
    "exceptions",
    "sql",
)
