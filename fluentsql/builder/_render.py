"""Render accumulated Statement state into ``(query, params)``.

Every value-bearing clause emits one ``?`` per value and appends the value to the
parameter list at the moment the placeholder is written, so parameter order always
follows placeholder order in the text (SET before WHERE, WHERE before HAVING).
"""

from typing import TYPE_CHECKING, Any, Callable, Optional, Union

from fluentsql.builder._base import AggregateField, BuiltQuery, Operation, SortDirection
from fluentsql.config import StatementConfig
from fluentsql.exceptions import (
    ExtraParameterError,
    MissingParameterError,
    SQLBuilderError,
    UnsupportedOperationError,
)
from fluentsql.utils.logging import get_logger, statement_fields

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("render_statement",)

logger = get_logger("builder.render")

PLACEHOLDER = "?"


def _equality_clause(filters: "dict[str, Any]", separator: str, params: "list[Any]") -> str:
    params.extend(filters.values())
    return separator.join(f"{column} = {PLACEHOLDER}" for column in filters)


def _render_field(statement: "StatementProtocol", name: str) -> str:
    if isinstance(name, AggregateField):
        return name
    for overrides in (statement._string_expressions, statement._date_expressions, statement._numeric_expressions):
        if name in overrides:
            return overrides[name]
    return name


def _check_bound(clause: str, value: Optional[int]) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        msg = f"{clause} must be a non-negative integer, got {value!r}"
        raise SQLBuilderError(msg)
    return value


def _check_direction(direction: Union[SortDirection, str]) -> SortDirection:
    if isinstance(direction, SortDirection):
        return direction
    try:
        return SortDirection(str(direction).upper())
    except ValueError as e:
        msg = f"Sort direction must be ASC or DESC, got {direction!r}"
        raise SQLBuilderError(msg) from e


def _append_where(statement: "StatementProtocol", query: str, params: "list[Any]") -> str:
    if statement._wheres:
        query += f" WHERE {_equality_clause(statement._wheres, ' AND ', params)}"
    return query


def _render_select(statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    params: list[Any] = []
    fields = ", ".join(_render_field(statement, name) for name in statement._fields)
    distinct = "DISTINCT " if statement._distinct else ""
    query = f"SELECT {distinct}{fields} FROM {statement._table}"
    for join in statement._joins:
        query += f" {join.to_sql()}"
    query = _append_where(statement, query, params)
    if statement._group_by:
        query += f" GROUP BY {', '.join(statement._group_by)}"
    if statement._having:
        query += f" HAVING {_equality_clause(statement._having, ' AND ', params)}"
    if statement._order_by:
        query += f" ORDER BY {statement._order_by} {_check_direction(statement._order_dir)}"
    limit = _check_bound("LIMIT", statement._limit)
    if limit is not None:
        query += f" LIMIT {limit}"
    offset = _check_bound("OFFSET", statement._offset)
    if offset is not None:
        query += f" OFFSET {offset}"
    return BuiltQuery(query, params)


def _render_values(keyword: str, statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    columns = ", ".join(statement._fields)
    placeholders = ", ".join(PLACEHOLDER for _ in statement._fields)
    query = f"{keyword} INTO {statement._table} ({columns}) VALUES ({placeholders})"
    params = list(statement._values)

    expected, received = len(statement._fields), len(params)
    if expected != received:
        if config.strict_values:
            msg = f"{keyword} expects {expected} values for {expected} columns, received {received}"
            if received < expected:
                raise MissingParameterError(msg, query)
            raise ExtraParameterError(msg, query)
        logger.warning(
            "%s column/value count mismatch: %d columns, %d values", keyword, expected, received,
            extra=statement_fields(operation=keyword, table=statement._table, columns=expected, values=received),
        )
    return BuiltQuery(query, params)


def _render_insert(statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    return _render_values("INSERT", statement, config)


def _render_replace(statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    return _render_values("REPLACE", statement, config)


def _render_update(statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    if not statement._set_values:
        if config.strict_values:
            msg = f"UPDATE {statement._table} has no SET assignments. Use set() first."
            raise SQLBuilderError(msg)
        logger.warning(
            "UPDATE %s has no SET assignments",
            statement._table,
            extra=statement_fields(operation="UPDATE", table=statement._table),
        )
    params: list[Any] = []
    query = f"UPDATE {statement._table} SET {_equality_clause(statement._set_values, ', ', params)}"
    return BuiltQuery(_append_where(statement, query, params), params)


def _render_delete(statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    params: list[Any] = []
    query = _append_where(statement, f"DELETE FROM {statement._table}", params)
    return BuiltQuery(query, params)


_RENDERERS: "dict[Operation, Callable[[StatementProtocol, StatementConfig], BuiltQuery]]" = {
    Operation.SELECT: _render_select,
    Operation.INSERT: _render_insert,
    Operation.UPDATE: _render_update,
    Operation.DELETE: _render_delete,
    Operation.REPLACE: _render_replace,
}


def render_statement(statement: "StatementProtocol", config: StatementConfig) -> BuiltQuery:
    """Render ``statement`` without modifying it.

    Args:
        statement: The statement whose clause state is rendered.
        config: Rendering switches.

    Raises:
        UnsupportedOperationError: If no recognized operation has been selected.

    Returns:
        BuiltQuery: The query text and a freshly allocated parameter list.
    """
    renderer = _RENDERERS.get(statement._operation) if statement._operation is not None else None
    if renderer is None:
        raise UnsupportedOperationError(statement._operation)
    return renderer(statement, config)
