"""Tests for helpers/sql.py - partial update and WHERE clause builders."""

import pytest

from jobly.errors import ErrorKind, JoblyError
from jobly.helpers.sql import WhereClause, bind_params, like_contains, sql_for_partial_update

pytestmark = pytest.mark.unit


class TestPartialUpdate:
    def test_generates_set_clause_and_values(self):
        set_cols, values = sql_for_partial_update(
            {"username": "bob", "firstName": "bob"},
            {"username": "username", "firstName": "first_name"},
        )
        assert set_cols == '"username"=:p1, "first_name"=:p2'
        assert values == ["bob", "bob"]

    def test_keys_without_override_are_used_as_columns(self):
        set_cols, values = sql_for_partial_update(
            {"name": "New", "numEmployees": 10, "logoUrl": None},
            {"numEmployees": "num_employees", "logoUrl": "logo_url"},
        )
        assert set_cols == '"name"=:p1, "num_employees"=:p2, "logo_url"=:p3'
        assert values == ["New", 10, None]

    def test_empty_data_is_rejected(self):
        with pytest.raises(JoblyError) as exc_info:
            sql_for_partial_update({}, {})
        assert exc_info.value.kind is ErrorKind.VALIDATION
        assert exc_info.value.status == 400


class TestWhereClause:
    def test_empty_clause_renders_nothing(self):
        where = WhereClause()
        assert not where
        assert where.sql == ""
        assert where.values == []

    def test_placeholders_follow_value_order(self):
        where = WhereClause()
        where.add("title LIKE {}", "%eng%")
        where.add("salary >= {}", 1000)
        assert where.sql == " WHERE title LIKE :p1 AND salary >= :p2"
        assert where.values == ["%eng%", 1000]
        assert where.params == {"p1": "%eng%", "p2": 1000}

    def test_fragment_without_values_keeps_numbering_contiguous(self):
        where = WhereClause()
        where.add("equity IS NOT NULL")
        where.add("salary >= {}", 5)
        assert where.sql == " WHERE equity IS NOT NULL AND salary >= :p1"
        assert where.values == [5]

    def test_slot_can_be_reused_for_one_value(self):
        where = WhereClause()
        where.add("(handle LIKE {0} OR name LIKE {0})", "%c%")
        where.add("num_employees BETWEEN {} AND {}", 1, 5)
        assert where.sql == " WHERE (handle LIKE :p1 OR name LIKE :p1) AND num_employees BETWEEN :p2 AND :p3"
        assert where.values == ["%c%", 1, 5]


def test_bind_params_numbers_from_one():
    assert bind_params(["a", None, 3]) == {"p1": "a", "p2": None, "p3": 3}


def test_like_contains_escapes_wildcards():
    assert like_contains("eng") == "%eng%"
    assert like_contains("100%_off") == "%100\\%\\_off%"
    assert like_contains("a\\b") == "%a\\\\b%"
