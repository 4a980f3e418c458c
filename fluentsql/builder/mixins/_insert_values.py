from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

from fluentsql.builder._base import Operation

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("InsertValuesMixin", "ReplaceValuesMixin")


class InsertValuesMixin:
    """Mixin providing ``INSERT INTO ... VALUES`` methods."""

    def insert(self, *columns: str) -> Self:
        """Switch to an INSERT statement over ``columns``.

        Args:
            *columns: The columns to insert, in the order values will be supplied.

        Returns:
            The current statement instance for method chaining.
        """
        builder = cast("StatementProtocol", self)
        builder._operation = Operation.INSERT
        builder._fields = list(columns)
        return self

    def into(self, table: str) -> Self:
        """Set the table to insert into.

        Args:
            table: The table name.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._table = table
        return self

    def values(self, *values: Any) -> Self:
        """Set the positional values, matched to the columns by position.

        Args:
            *values: One value per column.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._values = list(values)
        return self


class ReplaceValuesMixin:
    """Mixin providing ``REPLACE INTO ... VALUES`` methods."""

    def replace(self, *columns: str) -> Self:
        """Switch to a REPLACE statement over ``columns``.

        Args:
            *columns: The columns to replace, in the order values will be supplied.

        Returns:
            The current statement instance for method chaining.
        """
        builder = cast("StatementProtocol", self)
        builder._operation = Operation.REPLACE
        builder._fields = list(columns)
        return self

    def in_(self, table: str) -> Self:
        """Set the table to replace into.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._table = table
        return self

    def with_(self, *values: Any) -> Self:
        """Set the positional values for a REPLACE.

        Shares storage with :meth:`InsertValuesMixin.values`.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._values = list(values)
        return self
