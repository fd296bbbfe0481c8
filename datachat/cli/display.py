# datachat/cli/display.py
"""Rendering of schemas and query results for the terminal."""

from __future__ import annotations

from datachat.db.models import QueryResult, TableInfo

from datachat.cli.ui import ui

NO_RESULTS = "No results found."


def display_schema(tables: list[TableInfo]) -> None:
    """Each table's CREATE statement followed by its columns."""
    for table in tables:
        ui.section(table.name)
        ui.syntax(table.sql, "sql")
        rows = [
            [
                col.name,
                col.type,
                "Yes" if col.notnull else "No",
                "NULL" if col.dflt_value is None else col.dflt_value,
                "Yes" if col.pk else "No",
            ]
            for col in table.columns
        ]
        ui.table(["Column Name", "Type", "Not Null", "Default", "Primary Key"], rows)


def display_result(result: QueryResult, limit: int) -> None:
    """First `limit` rows of a result, or a no-results notice."""
    if not result.rows:
        ui.info(NO_RESULTS)
        return

    rows = [[row.get(col) for col in result.columns] for row in result.head(limit)]
    ui.table(result.columns, rows)

    if result.row_count > limit:
        ui.info(f"Showing {limit} of {result.row_count} rows")
    else:
        ui.info(f"{result.row_count} row(s)")


def display_questions(questions: list[str]) -> None:
    ui.section("Ask a question")
    for i, question in enumerate(questions, 1):
        ui.print(f"  {i}. {question}")


__all__ = ["display_schema", "display_result", "display_questions", "NO_RESULTS"]
