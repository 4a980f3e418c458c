"""Unit tests for SELECT rendering."""

import pytest

from fluentsql import Statement, sql
from fluentsql.exceptions import SQLBuilderError


def test_select_where() -> None:
    query = sql.select("a", "b").from_("t").where("x", 1).build()

    assert query.query == "SELECT a, b FROM t WHERE x = ?"
    assert query.params == [1]


def test_select_all() -> None:
    assert sql.select_all().from_("users").destruct() == ("SELECT * FROM users", [])


def test_select_replaces_columns() -> None:
    query = sql.select("id", "name").from_("users").select("email")

    assert query.to_sql() == "SELECT email FROM users"


def test_multiple_wheres_are_anded_in_insertion_order() -> None:
    query, params = sql.select("id").from_("users").where("status", "active").where("role", "admin").destruct()

    assert query == "SELECT id FROM users WHERE status = ? AND role = ?"
    assert params == ["active", "admin"]


def test_where_same_column_overwrites_value_and_keeps_position() -> None:
    query, params = sql.select("id").from_("t").where("a", 1).where("b", 2).where("a", 3).destruct()

    assert query == "SELECT id FROM t WHERE a = ? AND b = ?"
    assert params == [3, 2]


def test_distinct() -> None:
    assert sql.select("city").distinct().from_("users").to_sql() == "SELECT DISTINCT city FROM users"


def test_joins_render_in_declaration_order() -> None:
    query = (
        sql.select("u.id", "o.total")
        .from_("users u")
        .join("INNER", "orders o", "o.user_id = u.id")
        .left_join("refunds r", "r.order_id = o.id")
        .to_sql()
    )

    assert query == (
        "SELECT u.id, o.total FROM users u "
        "INNER JOIN orders o ON o.user_id = u.id "
        "LEFT JOIN refunds r ON r.order_id = o.id"
    )


def test_full_clause_order_and_parameter_order() -> None:
    query, params = (
        sql.select("dept")
        .count_("id")
        .from_("employees")
        .join("LEFT", "depts d", "d.id = employees.dept_id")
        .where("active", 1)
        .group_by("dept")
        .having("COUNT(id)", 5)
        .sort("dept", "DESC")
        .limit(10)
        .offset(20)
        .destruct()
    )

    assert query == (
        "SELECT dept, COUNT(id) FROM employees "
        "LEFT JOIN depts d ON d.id = employees.dept_id "
        "WHERE active = ? GROUP BY dept HAVING COUNT(id) = ? "
        "ORDER BY dept DESC LIMIT 10 OFFSET 20"
    )
    assert params == [1, 5]
    assert query.count("?") == len(params)


def test_where_params_precede_having_params_regardless_of_call_order() -> None:
    query, params = (
        sql.select("dept").from_("t").having("SUM(x)", "h").group_by("dept").where("a", "w").destruct()
    )

    assert query.index("WHERE") < query.index("HAVING")
    assert params == ["w", "h"]


def test_group_by_replaces_previous_grouping() -> None:
    assert sql.select("a").from_("t").group_by("a", "b").group_by("c").to_sql() == "SELECT a FROM t GROUP BY c"


def test_sort_defaults_to_ascending() -> None:
    assert sql.select("a").from_("t").sort("a").to_sql() == "SELECT a FROM t ORDER BY a ASC"


def test_sort_direction_is_case_insensitive() -> None:
    assert sql.select("a").from_("t").sort("a", "desc").to_sql() == "SELECT a FROM t ORDER BY a DESC"


def test_sort_last_call_wins() -> None:
    assert sql.select("a").from_("t").sort("a").sort("b", "DESC").to_sql() == "SELECT a FROM t ORDER BY b DESC"


def test_invalid_sort_direction_fails_at_render() -> None:
    query = sql.select("a").from_("t").sort("a", "SIDEWAYS")

    with pytest.raises(SQLBuilderError, match="ASC or DESC"):
        query.build()


def test_limit_and_offset_render_as_literals() -> None:
    query, params = sql.select("a").from_("t").limit(0).offset(5).destruct()

    assert query == "SELECT a FROM t LIMIT 0 OFFSET 5"
    assert params == []


@pytest.mark.parametrize("bound", [-1, 1.5, "10", True])
def test_invalid_limit_fails_at_render(bound: object) -> None:
    query = sql.select("a").from_("t").limit(bound)  # type: ignore[arg-type]

    with pytest.raises(SQLBuilderError, match="LIMIT"):
        query.build()


def test_negative_offset_fails_at_render() -> None:
    with pytest.raises(SQLBuilderError, match="OFFSET"):
        sql.select("a").from_("t").offset(-3).build()


def test_aggregates_append_to_fields() -> None:
    query = Statement().select("region").sum_("amount").avg_("amount").min_("amount").max_("amount").from_("sales")

    assert query.to_sql() == "SELECT region, SUM(amount), AVG(amount), MIN(amount), MAX(amount) FROM sales"


def test_count_defaults_to_star() -> None:
    assert sql.select().count_().from_("t").to_sql() == "SELECT COUNT(*) FROM t"
