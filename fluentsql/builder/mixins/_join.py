from typing import TYPE_CHECKING, cast

from typing_extensions import Self

from fluentsql.builder._base import JoinClause

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("JoinClauseMixin",)


class JoinClauseMixin:
    """Mixin providing JOIN clauses for SELECT statements."""

    def join(self, join_type: str, table: str, on: str) -> Self:
        """Add a JOIN clause. Joins render in the order they were added.

        Args:
            join_type: The type of join (INNER, LEFT, RIGHT, FULL).
            table: The table to join.
            on: The join condition, rendered verbatim.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._joins.append(JoinClause(join_type.upper(), table, on))
        return self

    def inner_join(self, table: str, on: str) -> Self:
        """Add an ``INNER JOIN``."""
        return self.join("INNER", table, on)

    def left_join(self, table: str, on: str) -> Self:
        """Add a ``LEFT JOIN``."""
        return self.join("LEFT", table, on)

    def right_join(self, table: str, on: str) -> Self:
        """Add a ``RIGHT JOIN``."""
        return self.join("RIGHT", table, on)
