"""A small SQL SELECT query assembled step by step with a fluent builder."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO


class QueryItem(Enum):
    """The clauses a query can hold."""

    TABLE = "table"
    WHERE = "where"
    JOIN = "join"
    ORDER_BY = "order_by"
    SELECT = "select"


class Query:
    """A set of query clauses that renders as a SELECT statement."""

    def __init__(self) -> None:
        self._items: dict[QueryItem, str] = {}

    def add_item(self, item: QueryItem, text: str) -> None:
        """Store a clause; a clause that is already set keeps its first value."""
        self._items.setdefault(item, text)

    def render(self) -> str:
        """Return the statement as text, one clause per line."""
        lines = [
            f"SELECT {self._items.get(QueryItem.SELECT, '')}",
            f"\t FROM {self._items.get(QueryItem.TABLE, '')}",
        ]
        optional = (
            (QueryItem.WHERE, "WHERE"),
            (QueryItem.JOIN, "JOIN"),
            (QueryItem.ORDER_BY, "ORDER BY"),
        )
        lines.extend(
            f"\t {keyword} {self._items[item]}"
            for item, keyword in optional
            if item in self._items
        )
        return "".join(f"{line}\n" for line in lines)

    def print(self, file: TextIO | None = None) -> None:
        """Write the rendered statement to *file* (standard output by default)."""
        (file if file is not None else sys.stdout).write(self.render())


class QueryBuilder:
    """Fluent builder whose methods return the builder itself."""

    def __init__(self) -> None:
        self._query = Query()

    def reset(self) -> QueryBuilder:
        self._query = Query()
        return self

    def add_table(self, table: str) -> QueryBuilder:
        self._query.add_item(QueryItem.TABLE, table)
        return self

    def add_where(self, condition: str) -> QueryBuilder:
        self._query.add_item(QueryItem.WHERE, condition)
        return self

    def add_join(self, table: str, expression: str) -> QueryBuilder:
        self._query.add_item(QueryItem.JOIN, f"{table} ON {expression}")
        return self

    def add_order_by(self, field: str, asc: bool = True) -> QueryBuilder:
        direction = "ASC" if asc else "DESC"
        self._query.add_item(QueryItem.ORDER_BY, f"{field} {direction}")
        return self

    def add_select(self, fields: str) -> QueryBuilder:
        self._query.add_item(QueryItem.SELECT, fields)
        return self

    def create(self) -> Query:
        """Return the query built so far."""
        return self._query


def main(argv: list[str] | None = None) -> int:
    builder = QueryBuilder()
    query = (
        builder.add_table("Students")
        .add_select("*")
        .add_order_by("last_name")
        .create()
    )
    query.print()

    query = (
        builder.reset()
        .add_order_by("c.title", False)
        .add_join("Cities AS c", "c.id = af.city_id")
        .add_select("af.title, af.date, c.title")
        .add_table("Airflights AS af")
        .create()
    )
    query.print()
    return 0


if __name__ == "__main__":
    sys.exit(main())