from typing import Any, Optional

__all__ = (
    "ExtraParameterError",
    "FluentSQLError",
    "GatewayError",
    "ImproperConfigurationError",
    "MissingDependencyError",
    "MissingParameterError",
    "ParameterError",
    "SQLBuilderError",
    "UnsupportedOperationError",
)


class FluentSQLError(Exception):
    """Base exception class from which all fluentsql exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``FluentSQLError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class MissingDependencyError(FluentSQLError, ImportError):
    """Missing optional dependency.

    This exception is raised only when a module depends on a dependency that has not been installed.
    """

    def __init__(self, package: str, install_package: Optional[str] = None) -> None:
        super().__init__(
            f"Package {package!r} is not installed but required. You can install it by running "
            f"'pip install fluentsql[{install_package or package}]' to install fluentsql with the required extra "
            f"or 'pip install {install_package or package}' to install the package separately",
        )


class SQLBuilderError(FluentSQLError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class UnsupportedOperationError(SQLBuilderError):
    """Raised when a statement is rendered without a recognized operation."""

    operation: Any

    def __init__(self, operation: Any = None) -> None:
        self.operation = operation
        super().__init__(f"Unsupported operation: {operation!r}")


# -- SQL Parameter Errors --
class ParameterError(FluentSQLError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when fewer values than columns are supplied."""


class ExtraParameterError(ParameterError):
    """Raised when more values than columns are supplied."""


class ImproperConfigurationError(FluentSQLError):
    """Improper Configuration error.

    Raised when a configuration object receives values it cannot use.
    """


class GatewayError(FluentSQLError):
    """Raised when an execution gateway is used in a state that cannot serve queries."""
