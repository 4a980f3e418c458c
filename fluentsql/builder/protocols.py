from typing import Any, Optional, Protocol, Union

from fluentsql.builder._base import JoinClause, Operation, SortDirection

__all__ = ("StatementProtocol",)


class StatementProtocol(Protocol):
    _operation: Optional[Operation]
    _fields: list[str]
    _table: str
    _wheres: dict[str, Any]
    _set_values: dict[str, Any]
    _values: list[Any]
    _order_by: str
    _order_dir: Union[SortDirection, str]
    _string_expressions: dict[str, str]
    _date_expressions: dict[str, str]
    _numeric_expressions: dict[str, str]
    _group_by: list[str]
    _having: dict[str, Any]
    _limit: Optional[int]
    _offset: Optional[int]
    _joins: list[JoinClause]
    _distinct: bool
