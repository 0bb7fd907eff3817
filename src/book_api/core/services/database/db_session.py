"""Database engine and session factory used across the application."""

from typing import Any

from loguru import logger
from sqlalchemy import Engine, text
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from src.book_api.runtime.config.config_data import DatabaseConfig


class DbSessionService:
    """Owns the engine and hands out one session per unit of work.

    Constructed once at startup and injected into the application; pass
    ``engine`` to reuse an existing engine (tests use an in-memory one).
    """

    def __init__(self, config: DatabaseConfig | None = None, engine: Engine | None = None):
        self._config = config or DatabaseConfig()

        if engine is not None:
            self._engine = engine
            return

        logger.info("Setting up database engine and session factory")
        engine_kwargs = self._get_engine_kwargs(self._config)
        self._engine = create_engine(self._config.url, **engine_kwargs)
        logger.info(
            "Database engine initialized for {}",
            self._engine.url.render_as_string(hide_password=True),
        )

    @property
    def engine(self) -> Engine:
        return self._engine

    @staticmethod
    def _get_engine_kwargs(config: DatabaseConfig) -> dict[str, Any]:
        """Get database-specific engine arguments."""
        engine_kwargs: dict[str, Any] = {
            "echo": config.echo,
            "pool_pre_ping": True,  # Validate connections before use
        }

        if config.is_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,  # Sessions are used from the threadpool
                "timeout": 20,  # Lock timeout
            }
            if config.url in ("sqlite://", "sqlite:///:memory:"):
                # A single shared connection keeps the in-memory database alive
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": config.pool_size,
                "max_overflow": config.max_overflow,
                "pool_timeout": config.pool_timeout,
                "pool_recycle": config.pool_recycle,
            }
        )
        return engine_kwargs

    def create_all(self) -> None:
        """Create all database tables."""
        from src.book_api.entities.book import BookTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Prevent lazy loading issues
            autoflush=True,
        )

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(error_type=type(e).__name__).error(
                "Database health check failed: {}", e
            )
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
