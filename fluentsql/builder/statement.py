"""Fluent, parameterized SQL statement builder.

A :class:`Statement` records clause configuration through chained calls and renders
it on demand into query text with positional ``?`` placeholders plus the ordered
parameter list to bind to them.
"""

import inspect
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from fluentsql.builder._base import BuiltQuery, JoinClause, Operation, SortDirection
from fluentsql.builder._render import render_statement
from fluentsql.builder.mixins import (
    AggregateFunctionsMixin,
    DateFunctionsMixin,
    DeleteClauseMixin,
    FromClauseMixin,
    GroupByClauseMixin,
    HavingClauseMixin,
    InsertValuesMixin,
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    NumericFunctionsMixin,
    OrderByClauseMixin,
    ReplaceValuesMixin,
    SelectColumnsMixin,
    StringFunctionsMixin,
    UpdateSetClauseMixin,
    WhereClauseMixin,
)
from fluentsql.config import DEFAULT_STATEMENT_CONFIG, StatementConfig
from fluentsql.typing import ExecuteCallback, ResultT
from fluentsql.utils.logging import get_logger, statement_fields

__all__ = ("Statement",)

logger = get_logger("builder")


@dataclass
class Statement(
    SelectColumnsMixin,
    FromClauseMixin,
    InsertValuesMixin,
    ReplaceValuesMixin,
    UpdateSetClauseMixin,
    DeleteClauseMixin,
    WhereClauseMixin,
    HavingClauseMixin,
    StringFunctionsMixin,
    DateFunctionsMixin,
    NumericFunctionsMixin,
    AggregateFunctionsMixin,
    OrderByClauseMixin,
    GroupByClauseMixin,
    LimitOffsetClauseMixin,
    JoinClauseMixin,
):
    """A single in-progress SQL statement.

    Create one per logical query, configure it with chained calls, then render it with
    :meth:`build`, :meth:`destruct`, or :meth:`run`. Rendering never changes the statement
    and can be repeated.

    Example:
        >>> Statement().select("a", "b").from_("t").where("x", 1).destruct()
        ('SELECT a, b FROM t WHERE x = ?', [1])
    """

    config: StatementConfig = field(default=DEFAULT_STATEMENT_CONFIG)
    _operation: Optional[Operation] = field(default=None, init=False)
    _fields: list[str] = field(default_factory=list, init=False)
    _table: str = field(default="", init=False)
    _wheres: dict[str, Any] = field(default_factory=dict, init=False)
    _set_values: dict[str, Any] = field(default_factory=dict, init=False)
    _values: list[Any] = field(default_factory=list, init=False)
    _order_by: str = field(default="", init=False)
    _order_dir: Union[SortDirection, str] = field(default=SortDirection.ASC, init=False)
    _string_expressions: dict[str, str] = field(default_factory=dict, init=False)
    _date_expressions: dict[str, str] = field(default_factory=dict, init=False)
    _numeric_expressions: dict[str, str] = field(default_factory=dict, init=False)
    _group_by: list[str] = field(default_factory=list, init=False)
    _having: dict[str, Any] = field(default_factory=dict, init=False)
    _limit: Optional[int] = field(default=None, init=False)
    _offset: Optional[int] = field(default=None, init=False)
    _joins: list[JoinClause] = field(default_factory=list, init=False)
    _distinct: bool = field(default=False, init=False)

    @property
    def operation(self) -> Optional[Operation]:
        """The operation that will be rendered, or None if none was selected."""
        return self._operation

    @property
    def fields(self) -> "tuple[str, ...]":
        """Selected, inserted or replaced fields in render order."""
        return tuple(self._fields)

    @property
    def table(self) -> str:
        """Target table, empty until set."""
        return self._table

    def build(self) -> BuiltQuery:
        """Render the statement.

        Raises:
            UnsupportedOperationError: If no operation has been selected.
            SQLBuilderError: If the clause state cannot be rendered.

        Returns:
            BuiltQuery: The query text and its ordered parameters.
        """
        built = render_statement(self, self.config)
        if self.config.log_statements:
            logger.debug(
                "Rendered %s statement: %s",
                self._operation,
                built.query,
                extra=statement_fields(
                    operation=str(self._operation), table=self._table or None, parameter_count=len(built.params)
                ),
            )
        return built

    def destruct(self) -> "tuple[str, list[Any]]":
        """Render the statement as a ``(query, params)`` tuple.

        Returns:
            The query text and its ordered parameters.
        """
        built = self.build()
        return built.query, built.params

    def to_sql(self) -> str:
        """Render the statement and return only the query text.

        Returns:
            str: The SQL query text.
        """
        return self.build().query

    async def run(self, callback: "ExecuteCallback[ResultT]") -> ResultT:
        """Render the statement and hand it to ``callback``.

        The callback receives ``(query, params)``. Its result is awaited when awaitable and
        returned unchanged; anything it raises propagates as-is.

        Args:
            callback: The execution gateway.

        Returns:
            Whatever the callback produced.
        """
        query, params = self.destruct()
        result = callback(query, params)
        if inspect.isawaitable(result):
            return await result  # type: ignore[no-any-return]
        return result  # type: ignore[return-value]
