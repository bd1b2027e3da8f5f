"""Custom column types and SQL constructs for the vehicles table."""

from __future__ import annotations

import json
from typing import Any

from sqlalchemy import Numeric, Text
from sqlalchemy.engine import Dialect
from sqlalchemy.ext.compiler import compiles
from sqlalchemy.sql.compiler import SQLCompiler
from sqlalchemy.sql.functions import FunctionElement
from sqlalchemy.types import TypeDecorator


class JSONEncodedList(TypeDecorator[list[Any]]):
    """
    A list stored as serialized JSON text.

    Empty or missing lists are written as "[]", never NULL, and a NULL read
    back from the store becomes an empty list.
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value: list[Any] | None, dialect: Dialect) -> str:
        if not value:
            return "[]"
        return json.dumps(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> list[Any]:
        if value is None or value == "":
            return []
        return json.loads(value)


class safe_numeric(FunctionElement[Any]):
    """
    Cast a text column to NUMERIC, or NULL when the text is not a number.

    Price and year are stored as text. Comparing the NULL from an
    uncastable value is never true, so such a row drops out of a bounded
    query instead of failing the whole statement.
    """

    name = "safe_numeric"
    type = Numeric()
    inherit_cache = True


@compiles(safe_numeric)
def _compile_safe_numeric(element: safe_numeric, compiler: SQLCompiler, **kw: Any) -> str:
    column = compiler.process(element.clauses, **kw)
    return f"CAST({column} AS NUMERIC)"


@compiles(safe_numeric, "postgresql")
def _compile_safe_numeric_postgresql(
    element: safe_numeric, compiler: SQLCompiler, **kw: Any
) -> str:
    column = compiler.process(element.clauses, **kw)
    return (
        f"CASE WHEN btrim({column}) ~ '^[0-9]+([.][0-9]+)?$' "
        f"THEN CAST(btrim({column}) AS NUMERIC) END"
    )


@compiles(safe_numeric, "sqlite")
def _compile_safe_numeric_sqlite(element: safe_numeric, compiler: SQLCompiler, **kw: Any) -> str:
    column = compiler.process(element.clauses, **kw)
    value = f"trim({column})"
    # SQLite has no regex operator; GLOB rejects anything but digits and
    # a single decimal point, which must sit between digits.
    return (
        f"CASE WHEN {value} GLOB '*[0-9]*' "
        f"AND {value} NOT GLOB '*[^0-9.]*' "
        f"AND {value} NOT GLOB '*.*.*' "
        f"AND {value} NOT GLOB '.*' "
        f"AND {value} NOT GLOB '*.' "
        f"THEN CAST({value} AS NUMERIC) END"
    )
