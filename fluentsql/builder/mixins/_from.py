from typing import TYPE_CHECKING, cast

from typing_extensions import Self

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("FromClauseMixin",)


class FromClauseMixin:
    """Mixin providing the target table for SELECT and DELETE statements."""

    def from_(self, table: str) -> Self:
        """Set the table to select or delete from.

        Args:
            table: The table name.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._table = table
        return self
