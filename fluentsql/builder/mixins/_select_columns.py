from typing import TYPE_CHECKING, cast

from typing_extensions import Self

from fluentsql.builder._base import Operation

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("SelectColumnsMixin",)


class SelectColumnsMixin:
    """Mixin providing SELECT column selection and DISTINCT."""

    def select(self, *columns: str) -> Self:
        """Switch to a SELECT statement over ``columns``.

        Replaces any previously selected columns. Registered expression overrides are
        applied to these names when the statement is rendered.

        Args:
            *columns: Column names or literal SQL expressions to select.

        Returns:
            The current statement instance for method chaining.
        """
        builder = cast("StatementProtocol", self)
        builder._operation = Operation.SELECT
        builder._fields = list(columns)
        return self

    def select_all(self) -> Self:
        """Switch to a ``SELECT *`` statement.

        Returns:
            The current statement instance for method chaining.
        """
        return self.select("*")

    def distinct(self) -> Self:
        """Render the SELECT as ``SELECT DISTINCT``.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._distinct = True
        return self
