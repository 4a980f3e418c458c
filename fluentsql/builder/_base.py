"""Value objects shared by the statement builder and its renderer."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator

__all__ = (
    "AggregateField",
    "BuiltQuery",
    "JoinClause",
    "Operation",
    "SortDirection",
)


class Operation(str, Enum):
    """SQL statement forms a Statement can render."""

    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"
    REPLACE = "REPLACE"

    def __str__(self) -> str:
        return self.value


class SortDirection(str, Enum):
    """ORDER BY directions."""

    ASC = "ASC"
    DESC = "DESC"

    def __str__(self) -> str:
        return self.value


class AggregateField(str):
    """A selected field produced by an aggregate such as ``COUNT(id)``.

    Behaves as a plain string; the renderer uses the type to skip expression overrides.
    """

    __slots__ = ()


@dataclass(frozen=True)
class JoinClause:
    """A single ``<join_type> JOIN <table> ON <on>`` clause."""

    join_type: str
    table: str
    on: str

    def to_sql(self) -> str:
        return f"{self.join_type} JOIN {self.table} ON {self.on}"


@dataclass
class BuiltQuery:
    """A rendered SQL statement with its positional parameters."""

    query: str
    params: "list[Any]" = field(default_factory=list)

    def __iter__(self) -> "Iterator[Any]":
        """Allow ``query, params = statement.build()``.

        Returns:
            An iterator over the query text and the parameter list.
        """
        return iter((self.query, self.params))
