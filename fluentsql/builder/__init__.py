"""Fluent SQL statement builder with positional parameter binding."""

from fluentsql.builder._base import BuiltQuery, JoinClause, Operation, SortDirection
from fluentsql.builder.statement import Statement

__all__ = (
    "BuiltQuery",
    "JoinClause",
    "Operation",
    "SortDirection",
    "Statement",
)
