# datachat/chat/engine.py
"""
DataChat - question to SQL to result.

Flow:
1. Build the system prompt from the session schema
2. LLM answers with markdown containing a SQL code block
3. Extract the SQL and run it against the session database
4. Return the markdown, SQL and result rows

Usage:
    datachat = DataChat(database=db, chat=ChatClient.from_config(config.llm))
    answer = datachat.ask("Which region sold the most?")
    print(answer.sql, answer.preview)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

from datachat.chat.prompts import build_sql_system_prompt
from datachat.chat.sql import extract_sql
from datachat.config.schema import DatachatConfig
from datachat.core.exceptions import DatachatError
from datachat.db.models import QueryResult
from datachat.db.questions import QuestionCache, QuestionInfo
from datachat.db.session import SessionDatabase
from datachat.logging.logger import get_logger
from datachat.logging.tags import CHAT

logger = get_logger(__name__)


class NoTablesError(DatachatError):
    """Raised when a question is asked before any data is loaded."""

    def __init__(self, message: str = "No tables loaded. Upload a CSV, TSV or SQLite file first."):
        super().__init__(message)


@dataclass
class Answer:
    """Result of one question."""

    question: str
    markdown: str
    sql: str
    result: QueryResult
    max_display_rows: int = 100

    @property
    def preview(self) -> list[dict[str, Any]]:
        """Rows to display."""
        return self.result.head(self.max_display_rows)

    @property
    def has_rows(self) -> bool:
        return self.result.row_count > 0


@dataclass
class DataChat:
    """
    Answers natural-language questions over the session database.

    `chat` is any object with `complete(system, user, schema=None)`.
    """

    database: SessionDatabase
    chat: Any
    max_display_rows: int = 100
    prompt_template: Optional[str] = None
    prompt_context: str = ""
    questions: Optional[QuestionCache] = None
    last_result: Optional[QueryResult] = field(default=None, init=False)

    def __post_init__(self):
        if self.questions is None:
            self.questions = QuestionCache(self.chat)

    @classmethod
    def from_config(
        cls,
        config: DatachatConfig,
        database: SessionDatabase,
        chat: Any,
        questions_path: Union[str, Path, None] = None,
    ) -> "DataChat":
        return cls(
            database=database,
            chat=chat,
            max_display_rows=config.query.max_display_rows,
            prompt_template=config.prompt.template,
            prompt_context=config.prompt.context,
            questions=QuestionCache(chat, path=questions_path, count=config.questions.count),
        )

    def system_prompt(self) -> str:
        return build_sql_system_prompt(
            self.database.schema_sql(),
            context=self.prompt_context,
            template=self.prompt_template,
        )

    def draft(self, question: str) -> tuple[str, str]:
        """
        Ask the LLM for SQL without running it.

        Returns:
            (markdown reply, extracted SQL)

        Raises:
            ValueError: If the question is blank
            NoTablesError: If nothing has been loaded
            LLMError: If the completion fails
        """
        if not question or not question.strip():
            raise ValueError("Question must not be empty")
        if not self.database.table_names():
            raise NoTablesError()

        logger.info(f"{CHAT} Question: {question}")
        markdown = self.chat.complete(system=self.system_prompt(), user=question)
        sql = extract_sql(markdown)
        logger.debug(f"{CHAT} Generated SQL: {sql}")
        return markdown, sql

    def run(self, question: str, markdown: str, sql: str) -> Answer:
        """
        Execute drafted SQL and keep the result as `last_result`.

        Raises:
            QueryError: If the SQL fails
        """
        result = self.database.execute(sql)
        self.last_result = result
        logger.info(f"{CHAT} Query returned {result.row_count} rows")
        return Answer(
            question=question,
            markdown=markdown,
            sql=sql,
            result=result,
            max_display_rows=self.max_display_rows,
        )

    def ask(self, question: str) -> Answer:
        """Draft SQL for a question and run it."""
        markdown, sql = self.draft(question)
        return self.run(question, markdown, sql)

    def sample_questions(self, refresh: bool = False) -> QuestionInfo:
        """Suggested questions for the current schema."""
        return self.questions.get(self.database, refresh=refresh)


__all__ = ["DataChat", "Answer", "NoTablesError"]
