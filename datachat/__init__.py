"""
datachat - chat with your data.

Load CSV, TSV or SQLite files into an embedded SQLite session, then ask
questions in plain language. An LLM writes the SQL, datachat runs it.

Quick Start:
    >>> from datachat import DataChat, SessionDatabase, Uploader, ChatClient, load_config
    >>> config = load_config()
    >>> db = SessionDatabase()
    >>> Uploader(db).upload_path("sales.csv")
    >>> datachat = DataChat.from_config(config, db, ChatClient.from_config(config.llm))
    >>> answer = datachat.ask("Which region sold the most?")
    >>> print(answer.sql)

Public API:
    - SessionDatabase: embedded SQLite session
    - Uploader: loads CSV/TSV/SQLite files
    - DataChat / Answer: question to SQL to result
    - QuestionCache: memoized sample questions
    - ChatClient: OpenAI-compatible chat client
    - load_config / DatachatConfig: configuration

Architecture:
    datachat/
    ├── ingest/     # File detection, DSV parsing, SQL typing, upload
    ├── db/         # Session database, schema models, question cache
    ├── chat/       # Prompts, SQL extraction, orchestration
    ├── llm/        # Credentials + chat-completions client
    ├── config/     # YAML defaults + pydantic schema
    ├── cli/        # typer CLI
    └── api/        # FastAPI app
"""

__version__ = "0.1.0"

from datachat.chat.engine import Answer, DataChat, NoTablesError
from datachat.config.loader import load_config
from datachat.config.schema import DatachatConfig
from datachat.core.exceptions import DatachatError
from datachat.db.questions import QuestionCache, QuestionInfo
from datachat.db.session import QueryError, SessionDatabase
from datachat.ingest.uploader import Uploader
from datachat.llm.client import ChatClient, LLMError

__all__ = [
    "__version__",
    "DataChat",
    "Answer",
    "SessionDatabase",
    "Uploader",
    "QuestionCache",
    "QuestionInfo",
    "ChatClient",
    "DatachatConfig",
    "load_config",
    "DatachatError",
    "NoTablesError",
    "QueryError",
    "LLMError",
]
