"""Settings configuration models.

Global settings for the dialogue engine, logging and the runtime loop.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator

from botter.core.constants import DEFAULT_BOT_NAME, DEFAULT_CATEGORIES, MenuLabel

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EngineSettings(BaseModel):
    """Dialogue engine configuration."""

    bot_name: str = Field(
        default=DEFAULT_BOT_NAME, description="Name the bot introduces itself with"
    )
    categories: list[str] = Field(
        default_factory=lambda: list(DEFAULT_CATEGORIES),
        description="Fact categories offered as quick replies",
    )

    @field_validator("categories")
    @classmethod
    def _check_categories(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("At least one category is required")
        value = [label.strip() for label in value]
        if not all(value):
            raise ValueError("Category labels must not be blank")
        if len({label.lower() for label in value}) != len(value):
            raise ValueError("Category labels must be unique")
        reserved = {label.value for label in MenuLabel}
        clashes = reserved.intersection(value)
        if clashes:
            raise ValueError(f"Category labels clash with menu labels: {sorted(clashes)}")
        return value


class LoggingSettings(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(default="INFO", description="Log level for the botter logger")
    file: str | None = Field(default=None, description="Optional JSON log file path")


class RuntimeSettings(BaseModel):
    """Runtime loop configuration."""

    max_concurrency: int = Field(
        default=8, ge=1, description="Events processed in parallel across different users"
    )


class BotterSettings(BaseModel):
    """Global settings configuration."""

    engine: EngineSettings = Field(default_factory=EngineSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    runtime: RuntimeSettings = Field(default_factory=RuntimeSettings)
