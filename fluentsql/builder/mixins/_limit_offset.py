from typing import TYPE_CHECKING, cast

from typing_extensions import Self

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("LimitOffsetClauseMixin",)


class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET clauses for SELECT statements.

    Bounds are rendered as literals rather than placeholders, so they are validated as
    non-negative integers at render time.
    """

    def limit(self, value: int) -> Self:
        """Add LIMIT clause.

        Args:
            value: The maximum number of rows to return.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._limit = value
        return self

    def offset(self, value: int) -> Self:
        """Add OFFSET clause.

        Args:
            value: The number of rows to skip before starting to return rows.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._offset = value
        return self
