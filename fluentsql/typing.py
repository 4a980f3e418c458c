from collections.abc import Awaitable
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional, Protocol, TypeVar, Union

from typing_extensions import TypeAlias

__all__ = (
    "ExecuteCallback",
    "ResultT",
    "ScalarValue",
    "StatementParameters",
)

ResultT = TypeVar("ResultT", covariant=True)

ScalarValue: TypeAlias = Optional[Union[str, int, float, bool, bytes, Decimal, date, datetime, time]]
"""Values a driver can bind to a single positional placeholder."""

StatementParameters: TypeAlias = "list[Any]"
"""Ordered parameters matching the ``?`` placeholders of a rendered statement."""


class ExecuteCallback(Protocol[ResultT]):
    """Execution gateway handed to ``Statement.run``.

    Receives the rendered query text and its ordered parameters. May return the result
    directly or an awaitable resolving to it.
    """

    def __call__(self, query: str, params: "list[Any]", /) -> "Union[ResultT, Awaitable[ResultT]]": ...
