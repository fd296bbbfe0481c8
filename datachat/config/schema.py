# datachat/config/schema.py
"""
Configuration schema for datachat.

This is the SINGLE source of truth for configuration shape.

Schema hierarchy:
- DatachatConfig: The root config
- LLMConfig: Chat-completions endpoint settings
- DatabaseConfig: Session database location
- QuestionsConfig: Sample-question generation
- QueryConfig: Result display limits
- PromptConfig: SQL system prompt overrides
- LoggingConfig: Logging settings
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LLMConfig(BaseModel):
    """
    OpenAI-compatible chat-completions endpoint.

    Examples:
        >>> LLMConfig(base_url="https://api.openai.com/v1", app_tag="")
    """

    base_url: str = Field(
        "https://llmfoundry.straive.com/openai/v1",
        description="Base URL of an OpenAI-compatible API",
    )
    model: str = Field("gpt-4o-mini", description="Chat model name")
    temperature: float = Field(0.0, ge=0.0, le=2.0, description="Sampling temperature")
    timeout: float = Field(120.0, gt=0, description="Request timeout in seconds")
    api_key: Optional[str] = Field(
        None, description="API key (prefer environment variables over config files)"
    )
    app_tag: str = Field(
        "datachat",
        description="Appended to the bearer token as '<key>:<app_tag>'; empty to disable",
    )

    model_config = ConfigDict(extra="forbid")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class DatabaseConfig(BaseModel):
    """Session database location."""

    path: Optional[str] = Field(
        None,
        description="SQLite file for the session; None uses the workspace session.db, ':memory:' keeps it in RAM",
    )

    model_config = ConfigDict(extra="forbid")


class QuestionsConfig(BaseModel):
    """Sample-question generation."""

    count: int = Field(5, ge=1, le=20, description="Number of questions to suggest")

    model_config = ConfigDict(extra="forbid")


class QueryConfig(BaseModel):
    """Result display limits."""

    max_display_rows: int = Field(100, ge=1, description="Rows shown from a query result")

    model_config = ConfigDict(extra="forbid")


class PromptConfig(BaseModel):
    """
    SQL system prompt overrides.

    `template` replaces the built-in prompt and may use {schema} and {context}.
    `context` is free text appended to the prompt, typically table and column
    descriptions for the loaded data.
    """

    template: Optional[str] = Field(None, description="Custom system prompt template")
    context: str = Field("", description="Extra notes about the tables and columns")

    model_config = ConfigDict(extra="forbid")


class LoggingConfig(BaseModel):
    """Logging settings."""

    level: str = Field("WARNING", description="Root log level; --verbose forces DEBUG")

    model_config = ConfigDict(extra="forbid")

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class DatachatConfig(BaseModel):
    """Root configuration."""

    llm: LLMConfig = Field(default_factory=LLMConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    questions: QuestionsConfig = Field(default_factory=QuestionsConfig)
    query: QueryConfig = Field(default_factory=QueryConfig)
    prompt: PromptConfig = Field(default_factory=PromptConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = ConfigDict(extra="forbid")


__all__ = [
    "DatachatConfig",
    "LLMConfig",
    "DatabaseConfig",
    "QuestionsConfig",
    "QueryConfig",
    "PromptConfig",
    "LoggingConfig",
]
