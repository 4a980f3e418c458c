"""Unit tests for expression overrides applied to selected fields."""

import pytest

from fluentsql import Statement, sql


def test_upper_registered_before_select() -> None:
    assert Statement().upper("name").select("name").from_("t").to_sql() == "SELECT UPPER(name) FROM t"


def test_override_registered_after_select() -> None:
    assert sql.select("id", "name").from_("t").lower("name").to_sql() == "SELECT id, LOWER(name) FROM t"


def test_concat() -> None:
    query = sql.select("first").concat("first", "' '", "last").from_("people").to_sql()

    assert query == "SELECT CONCAT(first, ' ', last) FROM people"


@pytest.mark.parametrize(
    ("method", "args", "expected"),
    [
        ("day", (), "DAY(created)"),
        ("month", (), "MONTH(created)"),
        ("year", (), "YEAR(created)"),
        ("date_format", ("%Y-%m-%d",), "DATE_FORMAT(created, '%Y-%m-%d')"),
    ],
)
def test_date_functions(method: str, args: tuple, expected: str) -> None:
    statement = sql.select("created").from_("t")
    getattr(statement, method)("created", *args)

    assert statement.to_sql() == f"SELECT {expected} FROM t"


def test_date_format_escapes_quotes() -> None:
    query = sql.select("d").from_("t").date_format("d", "%Y'x").to_sql()

    assert query == "SELECT DATE_FORMAT(d, '%Y''x') FROM t"


def test_curdate_and_now_register_under_their_own_names() -> None:
    query = sql.select("id", "curdate", "now").curdate().now().from_("t").to_sql()

    assert query == "SELECT id, CURDATE(), NOW() FROM t"


def test_now_with_custom_field_name() -> None:
    assert sql.select("ts").now("ts").from_("t").to_sql() == "SELECT NOW() FROM t"


@pytest.mark.parametrize(
    ("method", "args", "expected"),
    [
        ("abs_", (), "ABS(price)"),
        ("round_", (2,), "ROUND(price, 2)"),
        ("round_", (), "ROUND(price, 0)"),
        ("round_", (1.5,), "ROUND(price, 1.5)"),
        ("floor", (), "FLOOR(price)"),
        ("ceil", (), "CEIL(price)"),
        ("pow_", (3,), "POW(price, 3)"),
        ("sqrt", (), "SQRT(price)"),
    ],
)
def test_numeric_functions(method: str, args: tuple, expected: str) -> None:
    statement = sql.select("price").from_("t")
    getattr(statement, method)("price", *args)

    assert statement.to_sql() == f"SELECT {expected} FROM t"


def test_same_family_overwrites() -> None:
    assert sql.select("n").upper("n").lower("n").from_("t").to_sql() == "SELECT LOWER(n) FROM t"


def test_string_beats_date_beats_numeric() -> None:
    statement = sql.select("c").from_("t").round_("c", 1).year("c")
    assert statement.to_sql() == "SELECT YEAR(c) FROM t"

    statement.upper("c")
    assert statement.to_sql() == "SELECT UPPER(c) FROM t"


def test_aggregates_are_not_overridden() -> None:
    query = sql.select("id").upper("id").count_("id").from_("t").to_sql()

    assert query == "SELECT UPPER(id), COUNT(id) FROM t"


@pytest.mark.parametrize("method", ["upper", "year", "sqrt"])
def test_override_keyed_on_aggregate_text_is_ignored(method: str) -> None:
    statement = sql.select().count_("id").from_("t")
    getattr(statement, method)("COUNT(id)")

    assert statement.to_sql() == "SELECT COUNT(id) FROM t"


def test_plain_field_matching_aggregate_text_is_still_overridden() -> None:
    query = sql.select("COUNT(id)").count_("id").upper("COUNT(id)").from_("t").to_sql()

    assert query == "SELECT UPPER(COUNT(id)), COUNT(id) FROM t"


def test_overrides_do_not_touch_where_columns() -> None:
    query, params = sql.select("name").upper("name").from_("t").where("name", "ada").destruct()

    assert query == "SELECT UPPER(name) FROM t WHERE name = ?"
    assert params == ["ada"]
