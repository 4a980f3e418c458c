import pytest

from fluentsql.exceptions import (
    ExtraParameterError,
    FluentSQLError,
    GatewayError,
    ImproperConfigurationError,
    MissingDependencyError,
    MissingParameterError,
    ParameterError,
    SQLBuilderError,
    UnsupportedOperationError,
)


def test_exception_hierarchy() -> None:
    assert issubclass(UnsupportedOperationError, SQLBuilderError)
    assert issubclass(SQLBuilderError, FluentSQLError)
    assert issubclass(MissingParameterError, ParameterError)
    assert issubclass(ExtraParameterError, ParameterError)
    assert issubclass(ParameterError, FluentSQLError)
    assert issubclass(ImproperConfigurationError, FluentSQLError)
    assert issubclass(GatewayError, FluentSQLError)
    assert issubclass(MissingDependencyError, ImportError)


def test_builder_error_default_message() -> None:
    assert str(SQLBuilderError()) == "Issues building SQL statement."


def test_unsupported_operation_message() -> None:
    exc = UnsupportedOperationError("MERGE")
    assert str(exc) == "Unsupported operation: 'MERGE'"
    assert repr(exc) == "UnsupportedOperationError - Unsupported operation: 'MERGE'"


def test_parameter_error_includes_sql() -> None:
    exc = MissingParameterError("too few values", "INSERT INTO t (a) VALUES (?)")
    assert exc.sql == "INSERT INTO t (a) VALUES (?)"
    assert str(exc) == "too few values\nSQL: INSERT INTO t (a) VALUES (?)"


def test_missing_dependency_message() -> None:
    with pytest.raises(ImportError, match="pip install fluentsql\\[aiosqlite\\]"):
        raise MissingDependencyError("aiosqlite")
