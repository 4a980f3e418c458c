from typing import TYPE_CHECKING, cast

from typing_extensions import Self

from fluentsql.builder._base import AggregateField

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("AggregateFunctionsMixin",)


class AggregateFunctionsMixin:
    """Mixin appending aggregate expressions to the selected fields.

    Aggregates are stored as :class:`AggregateField` values, which expression overrides never replace,
    even when an override is registered under the aggregate's own text.
    """

    def _append_aggregate(self, function: str, column: str) -> Self:
        cast("StatementProtocol", self)._fields.append(AggregateField(f"{function}({column})"))
        return self

    def count_(self, column: str = "*") -> Self:
        """Append ``COUNT(column)`` to the selected fields.

        Args:
            column: The column to count (default is "*").

        Returns:
            The current statement instance for method chaining.
        """
        return self._append_aggregate("COUNT", column)

    def sum_(self, column: str) -> Self:
        """Append ``SUM(column)`` to the selected fields.

        Returns:
            The current statement instance for method chaining.
        """
        return self._append_aggregate("SUM", column)

    def avg_(self, column: str) -> Self:
        """Append ``AVG(column)`` to the selected fields.

        Returns:
            The current statement instance for method chaining.
        """
        return self._append_aggregate("AVG", column)

    def min_(self, column: str) -> Self:
        """Append ``MIN(column)`` to the selected fields.

        Returns:
            The current statement instance for method chaining.
        """
        return self._append_aggregate("MIN", column)

    def max_(self, column: str) -> Self:
        """Append ``MAX(column)`` to the selected fields.

        Returns:
            The current statement instance for method chaining.
        """
        return self._append_aggregate("MAX", column)
