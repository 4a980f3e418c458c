"""Factory for creating fresh statements with a fluent API.

This module provides the `sql` factory object:
- each call returns a new :class:`~fluentsql.builder.Statement` with its operation already selected
"""

from typing import Optional

from fluentsql.builder import Statement
from fluentsql.config import DEFAULT_STATEMENT_CONFIG, StatementConfig

__all__ = ("SQLFactory", "sql")


class SQLFactory:
    """Factory for creating statements.

    Example:
        ```python
        from fluentsql import sql

        query, params = (
            sql.select("id", "name")
            .from_("users")
            .where("active", 1)
            .sort("name")
            .destruct()
        )
        # SELECT id, name FROM users WHERE active = ? ORDER BY name ASC
        ```
    """

    def __init__(self, config: Optional[StatementConfig] = None) -> None:
        """Initialize the SQL factory.

        Args:
            config: Configuration applied to every statement this factory creates.
        """
        self.config = config or DEFAULT_STATEMENT_CONFIG

    def statement(self) -> Statement:
        """Create a statement with no operation selected.

        Returns:
            Statement: A new, empty statement.
        """
        return Statement(config=self.config)

    def select(self, *columns: str) -> Statement:
        """Create a SELECT statement.

        Args:
            *columns: Columns to select. Pass none to add aggregates only.

        Returns:
            Statement: A new statement selecting ``columns``.
        """
        return self.statement().select(*columns)

    def select_all(self) -> Statement:
        """Create a ``SELECT *`` statement.

        Returns:
            Statement: A new statement selecting every column.
        """
        return self.statement().select_all()

    def insert(self, *columns: str) -> Statement:
        """Create an INSERT statement over ``columns``.

        Returns:
            Statement: A new INSERT statement.
        """
        return self.statement().insert(*columns)

    def replace(self, *columns: str) -> Statement:
        """Create a REPLACE statement over ``columns``.

        Returns:
            Statement: A new REPLACE statement.
        """
        return self.statement().replace(*columns)

    def update(self, table: str) -> Statement:
        """Create an UPDATE statement for ``table``.

        Returns:
            Statement: A new UPDATE statement.
        """
        return self.statement().update(table)

    def delete(self, table: Optional[str] = None) -> Statement:
        """Create a DELETE statement, optionally with its table already set.

        Args:
            table: Optional table to delete from. Equivalent to calling ``from_()``.

        Returns:
            Statement: A new DELETE statement.
        """
        statement = self.statement().delete()
        if table:
            statement.from_(table)
        return statement


sql = SQLFactory()
