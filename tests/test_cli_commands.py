# tests/test_cli_commands.py
"""
Tests for the datachat CLI.
"""

from __future__ import annotations

import json
import logging

import pytest
from typer.testing import CliRunner

from datachat.cli.cli import app
from datachat.cli.context import CLIContext
from datachat.core.paths import DatachatPaths

runner = CliRunner()


@pytest.fixture
def sales_file(tmp_path, sales_csv):
    path = tmp_path / "sales.csv"
    path.write_bytes(sales_csv)
    return path


@pytest.fixture
def loaded(sales_file):
    result = runner.invoke(app, ["load", str(sales_file)])
    assert result.exit_code == 0, result.output
    return sales_file


@pytest.fixture
def with_fake_chat(monkeypatch, fake_chat):
    monkeypatch.setattr(CLIContext, "require_chat_client", lambda self: fake_chat)
    return fake_chat


class TestHelp:
    def test_lists_commands(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for name in ("load", "tables", "questions", "ask", "sql", "chat", "config", "reset", "serve"):
            assert name in result.output


class TestLoadCommand:
    """Tests for datachat load."""

    def test_load_csv(self, sales_file):
        result = runner.invoke(app, ["load", str(sales_file)])

        assert result.exit_code == 0
        assert "sales" in result.output
        assert "4 rows" in result.output
        assert DatachatPaths.session_db().exists()

    def test_load_directory(self, tmp_path):
        folder = tmp_path / "data"
        folder.mkdir()
        (folder / "a.csv").write_text("x\n1\n")
        (folder / "b.tsv").write_text("y\n2\n")
        (folder / "readme.txt").write_text("ignored")

        result = runner.invoke(app, ["load", str(folder)])

        assert result.exit_code == 0
        tables = runner.invoke(app, ["sql", "SELECT name FROM sqlite_master ORDER BY name"])
        assert "2 row(s)" in tables.output

    def test_missing_file_fails(self, tmp_path):
        result = runner.invoke(app, ["load", str(tmp_path / "nope.csv")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_partial_failure_still_loads_good_files(self, tmp_path, sales_file):
        bad = tmp_path / "empty.csv"
        bad.write_text("only,header\n")

        result = runner.invoke(app, ["load", str(sales_file), str(bad)])

        assert result.exit_code == 1
        assert "No data rows" in result.output
        count = runner.invoke(app, ["sql", "SELECT COUNT(*) AS n FROM sales"])
        assert "4" in count.output

    def test_custom_db_path(self, tmp_path, sales_file):
        db = tmp_path / "other.db"

        result = runner.invoke(app, ["load", str(sales_file), "--db", str(db)])

        assert result.exit_code == 0
        assert db.exists()
        assert not DatachatPaths.session_db().exists()


class TestTablesCommand:
    """Tests for datachat tables."""

    def test_no_tables(self):
        result = runner.invoke(app, ["tables"])

        assert result.exit_code == 0
        assert "No tables loaded" in result.output

    def test_shows_schema(self, loaded):
        result = runner.invoke(app, ["tables"])

        assert result.exit_code == 0
        assert "CREATE TABLE" in result.output
        assert "region" in result.output
        assert "INTEGER" in result.output

    def test_drop(self, loaded):
        result = runner.invoke(app, ["tables", "--drop", "sales"])
        assert result.exit_code == 0

        assert "No tables loaded" in runner.invoke(app, ["tables"]).output

    def test_drop_missing(self):
        result = runner.invoke(app, ["tables", "--drop", "ghost"])
        assert result.exit_code == 1


class TestSQLCommand:
    """Tests for datachat sql."""

    def test_runs_statement(self, loaded):
        result = runner.invoke(app, ["sql", "SELECT SUM(units) AS total FROM sales"])

        assert result.exit_code == 0
        assert "total" in result.output
        assert "21" in result.output

    def test_empty_result(self, loaded):
        result = runner.invoke(app, ["sql", "SELECT * FROM sales WHERE units > 999"])

        assert result.exit_code == 0
        assert "No results found." in result.output

    def test_limit(self, loaded):
        result = runner.invoke(app, ["sql", "SELECT units FROM sales", "--limit", "2"])
        assert "Showing 2 of 4 rows" in result.output

    def test_error(self, loaded):
        result = runner.invoke(app, ["sql", "SELECT * FROM missing"])

        assert result.exit_code == 1
        assert "no such table" in result.output


class TestAskCommand:
    """Tests for datachat ask."""

    def test_ask(self, loaded, with_fake_chat):
        result = runner.invoke(app, ["ask", "How many sales?"])

        assert result.exit_code == 0, result.output
        assert "SELECT COUNT(*) AS n FROM sales" in result.output
        assert "4" in result.output
        assert with_fake_chat.calls[0]["user"] == "How many sales?"

    def test_sql_only(self, loaded, with_fake_chat):
        with_fake_chat.reply = "```sql\nSELECT * FROM missing\n```"

        result = runner.invoke(app, ["ask", "q", "--sql-only"])

        assert result.exit_code == 0
        assert "missing" in result.output

    def test_failed_sql(self, loaded, with_fake_chat):
        with_fake_chat.reply = "```sql\nSELECT * FROM missing\n```"

        result = runner.invoke(app, ["ask", "q"])

        assert result.exit_code == 1
        assert "SQL failed" in result.output

    def test_no_tables(self, with_fake_chat):
        result = runner.invoke(app, ["ask", "q"])

        assert result.exit_code == 1
        assert "No tables loaded" in result.output
        assert with_fake_chat.calls == []

    def test_missing_api_key(self, loaded, no_api_keys):
        result = runner.invoke(app, ["ask", "q"])

        assert result.exit_code == 1
        assert "API key not found" in result.output


class TestQuestionsAndChat:
    """Tests for datachat questions and datachat chat."""

    def test_questions(self, loaded, with_fake_chat):
        with_fake_chat.questions = ["Which region sells most?", "Average price?"]

        result = runner.invoke(app, ["questions"])

        assert result.exit_code == 0
        assert "1. Which region sells most?" in result.output
        assert "2. Average price?" in result.output
        assert DatachatPaths.questions_cache().exists()

    def test_questions_are_cached_between_runs(self, loaded, with_fake_chat):
        runner.invoke(app, ["questions"])
        runner.invoke(app, ["questions"])

        assert len(with_fake_chat.calls) == 1

    def test_questions_error(self, loaded, with_fake_chat):
        from datachat.llm.client import LLMError

        with_fake_chat.error = LLMError("model unavailable")

        result = runner.invoke(app, ["questions"])

        assert result.exit_code == 1
        assert "model unavailable" in result.output

    def test_chat_loop(self, loaded, with_fake_chat):
        result = runner.invoke(app, ["chat"], input="1\nHow many sales?\nexit\n")

        assert result.exit_code == 0, result.output
        asked = [c["user"] for c in with_fake_chat.calls if c["schema"] is None]
        assert asked == [with_fake_chat.questions[0], "How many sales?"]
        assert "Bye." in result.output

    def test_chat_ends_on_eof(self, loaded, with_fake_chat):
        result = runner.invoke(app, ["chat"], input="")
        assert result.exit_code == 0


class TestConfigAndReset:
    """Tests for datachat config and datachat reset."""

    def test_config_json(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("llm:\n  api_key: super-secret\n")

        result = runner.invoke(app, ["config", "--json", "--config", str(path)])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["llm"]["model"] == "gpt-4o-mini"
        assert data["llm"]["api_key"] == "****"
        assert "super-secret" not in result.output

    def test_config_path(self):
        result = runner.invoke(app, ["config", "--path"])

        assert result.exit_code == 0
        assert "package defaults" in result.output

    def test_config_summary(self):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "gpt-4o-mini" in result.output

    def test_bad_config_file(self, tmp_path):
        result = runner.invoke(app, ["tables", "--config", str(tmp_path / "missing.yaml")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_reset(self, loaded):
        result = runner.invoke(app, ["reset", "--force"])

        assert result.exit_code == 0
        assert not DatachatPaths.session_db().exists()

    def test_reset_cancelled(self, loaded):
        result = runner.invoke(app, ["reset"], input="n\n")

        assert result.exit_code == 0
        assert DatachatPaths.session_db().exists()

    def test_reset_nothing(self):
        result = runner.invoke(app, ["reset", "--force"])
        assert "Nothing to reset" in result.output


class TestLogLevel:
    """logging.level from config applies to every command; --verbose wins."""

    @pytest.fixture(autouse=True)
    def restore_root_level(self):
        root = logging.getLogger()
        level = root.level
        yield
        root.setLevel(level)
        CLIContext.verbose = False

    def test_config_level_is_applied(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("logging:\n  level: error\n")

        result = runner.invoke(app, ["tables", "--config", str(path)])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR

    def test_verbose_overrides_config(self, tmp_path):
        path = tmp_path / "c.yaml"
        path.write_text("logging:\n  level: ERROR\n")

        result = runner.invoke(app, ["--verbose", "tables", "--config", str(path)])

        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG
