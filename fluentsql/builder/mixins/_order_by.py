from typing import TYPE_CHECKING, Union, cast

from typing_extensions import Self

from fluentsql.builder._base import SortDirection

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("GroupByClauseMixin", "OrderByClauseMixin")


class OrderByClauseMixin:
    """Mixin providing a single-column ORDER BY for SELECT statements."""

    def sort(self, column: str, direction: Union[SortDirection, str] = SortDirection.ASC) -> Self:
        """Order the results by ``column``.

        Replaces any earlier sort. The direction is checked when the statement is rendered.

        Args:
            column: The column to order by.
            direction: ``ASC`` or ``DESC``, case-insensitive.

        Returns:
            The current statement instance for method chaining.
        """
        builder = cast("StatementProtocol", self)
        builder._order_by = column
        builder._order_dir = direction
        return self


class GroupByClauseMixin:
    """Mixin providing GROUP BY for SELECT statements."""

    def group_by(self, *columns: str) -> Self:
        """Group the results by ``columns``, replacing any earlier grouping.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._group_by = list(columns)
        return self
