"""Expression overrides substituted for raw column names when a SELECT is rendered."""

from typing import TYPE_CHECKING, Union, cast

from typing_extensions import Self

if TYPE_CHECKING:
    from fluentsql.builder.protocols import StatementProtocol

__all__ = ("DateFunctionsMixin", "NumericFunctionsMixin", "StringFunctionsMixin")


def _quote_literal(value: str) -> str:
    return "'{}'".format(value.replace("'", "''"))


class StringFunctionsMixin:
    """Mixin registering string function overrides."""

    def _register_string(self, column: str, expression: str) -> Self:
        cast("StatementProtocol", self)._string_expressions[column] = expression
        return self

    def upper(self, column: str) -> Self:
        """Render ``column`` as ``UPPER(column)``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_string(column, f"UPPER({column})")

    def lower(self, column: str) -> Self:
        """Render ``column`` as ``LOWER(column)``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_string(column, f"LOWER({column})")

    def concat(self, column: str, *parts: str) -> Self:
        """Render ``column`` as ``CONCAT(column, part, ...)``.

        Parts are inserted verbatim, so string literals must carry their own quotes.

        Args:
            column: The column to concatenate onto.
            *parts: Column names or SQL literals appended after ``column``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_string(column, f"CONCAT({', '.join((column, *parts))})")


class DateFunctionsMixin:
    """Mixin registering date function overrides."""

    def _register_date(self, column: str, expression: str) -> Self:
        cast("StatementProtocol", self)._date_expressions[column] = expression
        return self

    def curdate(self, column: str = "curdate") -> Self:
        """Render the field named ``column`` as ``CURDATE()``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_date(column, "CURDATE()")

    def now(self, column: str = "now") -> Self:
        """Render the field named ``column`` as ``NOW()``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_date(column, "NOW()")

    def date_format(self, column: str, format: str) -> Self:  # noqa: A002
        """Render ``column`` as ``DATE_FORMAT(column, 'format')``.

        Args:
            column: The date column.
            format: A MySQL date format string such as ``%Y-%m-%d``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_date(column, f"DATE_FORMAT({column}, {_quote_literal(format)})")

    def day(self, column: str) -> Self:
        """Render ``column`` as ``DAY(column)``."""
        return self._register_date(column, f"DAY({column})")

    def month(self, column: str) -> Self:
        """Render ``column`` as ``MONTH(column)``."""
        return self._register_date(column, f"MONTH({column})")

    def year(self, column: str) -> Self:
        """Render ``column`` as ``YEAR(column)``."""
        return self._register_date(column, f"YEAR({column})")


class NumericFunctionsMixin:
    """Mixin registering numeric function overrides."""

    def _register_numeric(self, column: str, expression: str) -> Self:
        cast("StatementProtocol", self)._numeric_expressions[column] = expression
        return self

    def abs_(self, column: str) -> Self:
        """Render ``column`` as ``ABS(column)``."""
        return self._register_numeric(column, f"ABS({column})")

    def round_(self, column: str, decimals: "Union[int, float, str]" = 0) -> Self:
        """Render ``column`` as ``ROUND(column, decimals)``.

        Args:
            column: The numeric column.
            decimals: Rendered verbatim as the second argument.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_numeric(column, f"ROUND({column}, {decimals})")

    def floor(self, column: str) -> Self:
        """Render ``column`` as ``FLOOR(column)``."""
        return self._register_numeric(column, f"FLOOR({column})")

    def ceil(self, column: str) -> Self:
        """Render ``column`` as ``CEIL(column)``."""
        return self._register_numeric(column, f"CEIL({column})")

    def pow_(self, column: str, exponent: "Union[int, float]") -> Self:
        """Render ``column`` as ``POW(column, exponent)``.

        Returns:
            The current statement instance for method chaining.
        """
        return self._register_numeric(column, f"POW({column}, {exponent})")

    def sqrt(self, column: str) -> Self:
        """Render ``column`` as ``SQRT(column)``."""
        return self._register_numeric(column, f"SQRT({column})")
