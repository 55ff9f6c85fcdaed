"""SQL fragment builders for partial updates and filtered listings.

Placeholders are SQLAlchemy ``text()`` bind parameters named ``:p1``, ``:p2``,
... so that the numbering is positional and matches the order of the returned
values. ``bind_params`` turns such a value list into the mapping ``execute``
expects.
"""

from typing import Any

from jobly.errors import ErrorKind, JoblyError


def placeholder(index: int) -> str:
    return f":p{index}"


def bind_params(values: list[Any]) -> dict[str, Any]:
    return {f"p{idx}": value for idx, value in enumerate(values, start=1)}


def like_contains(term: str) -> str:
    """Escape %, _ and backslash in term and wrap it for a substring LIKE with a backslash ESCAPE."""
    escaped = term.replace("\\", r"\\").replace("%", r"\%").replace("_", r"\_")
    return f"%{escaped}%"


def sql_for_partial_update(data_to_update: dict[str, Any], js_to_sql: dict[str, str]) -> tuple[str, list[Any]]:
    """Build the SET clause of an UPDATE from the supplied fields only.

    Keys are mapped to columns through ``js_to_sql`` when present there and used
    as-is otherwise, so callers must restrict keys to a known whitelist first.

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
        ('"first_name"=:p1, "age"=:p2', ['Aliya', 32])

    Raises a validation error when there is nothing to update.
    """
    keys = list(data_to_update)
    if not keys:
        raise JoblyError(ErrorKind.VALIDATION, "No data")

    cols = [
        f'"{js_to_sql.get(col_name, col_name)}"={placeholder(idx)}'
        for idx, col_name in enumerate(keys, start=1)
    ]
    return ", ".join(cols), [data_to_update[key] for key in keys]


class WhereClause:
    """Accumulates AND-ed predicates and numbers their placeholders.

    Each fragment uses ``{}`` for its slots; slots are filled left to right
    with the next placeholder and the matching values are recorded in the
    same order, so dropping a predicate never leaves a numbering gap.
    """

    def __init__(self):
        self._fragments: list[str] = []
        self._values: list[Any] = []

    def add(self, fragment: str, *values: Any) -> "WhereClause":
        slots = []
        for value in values:
            self._values.append(value)
            slots.append(placeholder(len(self._values)))
        self._fragments.append(fragment.format(*slots))
        return self

    def __bool__(self) -> bool:
        return bool(self._fragments)

    @property
    def sql(self) -> str:
        if not self._fragments:
            return ""
        return " WHERE " + " AND ".join(self._fragments)

    @property
    def values(self) -> list[Any]:
        return list(self._values)

    @property
    def params(self) -> dict[str, Any]:
        return bind_params(self._values)
