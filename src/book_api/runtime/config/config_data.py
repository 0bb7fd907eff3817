"""Pydantic models for parsing the config.yaml configuration file.

This module contains Pydantic models that correspond to the structure of config.yaml.
These models handle validation and type conversion of the YAML configuration data.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, computed_field


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="plain", description="Log format")
    file: str = Field(default="", description="Log file path (empty disables the file sink)")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./books.db",
        description="Database connection URL",
    )
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")
    echo: bool = Field(default=False, description="Echo SQL statements")
    create_tables: bool = Field(
        default=True, description="Create missing tables on startup"
    )

    @computed_field
    @property
    def is_sqlite(self) -> bool:
        """Whether the configured URL points at SQLite."""
        return self.url.startswith("sqlite")


class DocsConfig(BaseModel):
    """Interactive documentation configuration."""

    enabled: bool | None = Field(
        default=None,
        description="Serve interactive docs (defaults to off in production)",
    )
    url: str = Field(default="/documentation", description="Swagger UI path")
    redoc_url: str = Field(default="/redoc", description="ReDoc path")


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=3000, description="Application port")
    title: str = Field(default="Book API", description="API title")
    version: str = Field(default="1.0.0", description="API version")
    description: str = Field(
        default="A simple CRUD API for books using FastAPI and SQLModel",
        description="API description shown in the documentation",
    )

    @property
    def base_url(self) -> str:
        """Construct the base URL from host and port."""
        host = "localhost" if self.host in ("0.0.0.0", "") else self.host
        scheme = "https" if self.environment == "production" else "http"
        return f"{scheme}://{host}:{self.port}"


class ConfigData(BaseModel):
    """Root configuration model that matches the config.yaml structure."""

    app: AppConfig = Field(
        default_factory=AppConfig, description="Application configuration"
    )
    docs: DocsConfig = Field(
        default_factory=DocsConfig, description="Documentation configuration"
    )
    database: DatabaseConfig = Field(
        default_factory=DatabaseConfig, description="Database configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @property
    def docs_enabled(self) -> bool:
        """Docs are on unless disabled explicitly or running in production."""
        if self.docs.enabled is not None:
            return self.docs.enabled
        return self.app.environment != "production"
