from typing import TYPE_CHECKING, Any, cast

from typing_extensions import Self

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("HavingClauseMixin", "WhereClauseMixin")


class WhereClauseMixin:
    """Mixin providing WHERE equality filters for SELECT, UPDATE, and DELETE statements."""

    def where(self, column: str, value: Any) -> Self:
        """Add a ``column = ?`` filter, ANDed with any existing filters.

        Only equality is supported. Filtering the same column again replaces its value
        and keeps its original position.

        Args:
            column: The column name.
            value: The value to compare against, bound to a positional placeholder.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._wheres[column] = value
        return self


class HavingClauseMixin:
    """Mixin providing HAVING equality filters for grouped SELECT statements."""

    def having(self, column: str, value: Any) -> Self:
        """Add a ``column = ?`` HAVING filter, ANDed with any existing ones.

        Args:
            column: The column name or aggregate expression.
            value: The value to compare against, bound to a positional placeholder.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._having[column] = value
        return self
