from typing import TYPE_CHECKING, cast

from typing_extensions import Self

from fluentsql.builder._base import Operation

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("DeleteClauseMixin",)


class DeleteClauseMixin:
    """Mixin providing the DELETE operation."""

    def delete(self) -> Self:
        """Switch to a DELETE statement. Pair with ``from_()``.

        Returns:
            The current statement instance for method chaining.
        """
        cast("StatementProtocol", self)._operation = Operation.DELETE
        return self
