from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

from fluentsql.builder._base import Operation

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("UpdateSetClauseMixin",)


class UpdateSetClauseMixin:
    """Mixin providing ``UPDATE ... SET`` methods."""

    def update(self, table: str) -> Self:
        """Switch to an UPDATE statement on ``table``.

        Args:
            table: The table name to update.

        Returns:
            The current statement instance for method chaining.
        """
        builder = cast("StatementProtocol", self)
        builder._operation = Operation.UPDATE
        builder._table = table
        return self

    def set(self, column: str, value: Any) -> Self:
        """Assign ``value`` to ``column``.

        Setting the same column again replaces the value but keeps its original position
        in the SET list.

        Args:
            column: The column to assign.
            value: The value, bound to a positional placeholder.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._set_values[column] = value
        return self
