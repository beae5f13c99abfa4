"""
Database provider: one adapter per supported backend behind a single
capability interface.

The provider is initialized once per process (API lifespan, CLI command or
test session). Services never talk to a driver directly; they receive a
SQLAlchemy Session from the active adapter.

Usage:
    from ranch_shared.infrastructure.providers import DatabaseConfig, DatabaseProvider

    adapter = DatabaseProvider.initialize(DatabaseConfig.from_settings(settings))
    adapter.ping()

    with adapter.transaction() as session:
        session.add(animal)
"""

import os
from abc import ABC, abstractmethod
from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine, Row, make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import StaticPool
from sqlalchemy.sql import Executable

from ranch_shared.config.constants import DatabaseType
from ranch_shared.config.logging import database_logger as logger
from ranch_shared.utils.exceptions import DatabaseConfigurationError


MYSQL_DEFAULT_HOST = "localhost"
MYSQL_DEFAULT_PORT = 3306
MYSQL_DEFAULT_USER = "root"
DEFAULT_DATABASE_NAME = "ranch_manager"
SQLITE_DEFAULT_FILE = "ranch_manager.db"
SQLITE_MEMORY = ":memory:"


@dataclass
class DatabaseConfig:
    """Connection parameters for one backend."""

    type: str
    url: str | None = None
    host: str | None = None
    port: int | None = None
    user: str | None = None
    password: str | None = None
    database: str | None = None
    filename: str | None = None

    @classmethod
    def from_settings(cls, settings: Any) -> "DatabaseConfig":
        return cls(
            type=(settings.database_type or "").strip().lower(),
            url=settings.database_url,
            host=settings.db_host,
            port=settings.db_port,
            user=settings.db_user,
            password=settings.db_password,
            database=settings.db_name,
            filename=settings.sqlite_file,
        )

    def masked_url(self) -> str:
        """URL safe for logs (password hidden)."""
        if not self.url:
            return "<none>"
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except ArgumentError:
            return "<unparseable>"


def _calculate_pool_size() -> int:
    """
    Pool size based on CPU cores.
    Formula: (2 * CPU cores) + 1, capped at 20.
    """
    cores = os.cpu_count() or 4
    return min(cores * 2 + 1, 20)


def _as_statement(statement: str | Executable) -> Executable:
    if isinstance(statement, str):
        return text(statement)
    return statement


class DatabaseAdapter(ABC):
    """
    Capability interface shared by all backends.

    Each adapter owns one engine (and its connection pool) plus a session
    factory bound to it.
    """

    name: str = ""

    def __init__(self, config: DatabaseConfig):
        self.config = config
        self.engine: Engine = self._create_engine()
        self._session_factory = sessionmaker(
            bind=self.engine,
            autoflush=False,
            autocommit=False,
        )

    @abstractmethod
    def _create_engine(self) -> Engine:
        """Build the SQLAlchemy engine for this backend."""

    def session(self) -> Session:
        """Open a new session. Caller is responsible for closing it."""
        return self._session_factory()

    @contextmanager
    def transaction(self) -> Generator[Session, None, None]:
        """
        Run a block atomically.

        Commits when the block exits normally; rolls back and re-raises when
        it raises.
        """
        session = self.session()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            logger.warning("Transaction rolled back", backend=self.name)
            raise
        finally:
            session.close()

    def execute(self, statement: str | Executable, params: dict[str, Any] | None = None) -> int:
        """Run a write statement in its own transaction. Returns affected rows."""
        with self.transaction() as session:
            result = session.execute(_as_statement(statement), params or {})
            return result.rowcount

    def query_one(self, statement: str | Executable, params: dict[str, Any] | None = None) -> Row | None:
        with self.session() as session:
            return session.execute(_as_statement(statement), params or {}).first()

    def query_many(self, statement: str | Executable, params: dict[str, Any] | None = None) -> list[Row]:
        with self.session() as session:
            return list(session.execute(_as_statement(statement), params or {}).all())

    def ping(self) -> bool:
        """Round-trip a trivial query. Raises on connection failure."""
        row = self.query_one("SELECT 1")
        return row is not None and row[0] == 1

    def dispose(self) -> None:
        self.engine.dispose()


class PostgreSQLAdapter(DatabaseAdapter):
    name = DatabaseType.POSTGRESQL

    @staticmethod
    def normalize_url(url: str) -> str:
        """Point bare postgres URLs at the psycopg (v3) driver."""
        if url.startswith("postgres://"):
            return "postgresql+psycopg://" + url[len("postgres://"):]
        if url.startswith("postgresql://"):
            return "postgresql+psycopg://" + url[len("postgresql://"):]
        return url

    def _create_engine(self) -> Engine:
        if not self.config.url:
            raise DatabaseConfigurationError("PostgreSQL URL is required")

        return create_engine(
            self.normalize_url(self.config.url),
            pool_pre_ping=True,  # Verify connections before using
            pool_size=_calculate_pool_size(),
            max_overflow=15,
            pool_timeout=30,
            pool_recycle=1800,
            connect_args={"connect_timeout": 10},
            echo=False,
        )


class MySQLAdapter(DatabaseAdapter):
    name = DatabaseType.MYSQL

    def build_url(self) -> str | URL:
        if self.config.url:
            url = self.config.url
            if url.startswith("mysql://"):
                return "mysql+pymysql://" + url[len("mysql://"):]
            return url

        return URL.create(
            "mysql+pymysql",
            username=self.config.user or MYSQL_DEFAULT_USER,
            password=self.config.password or "",
            host=self.config.host or MYSQL_DEFAULT_HOST,
            port=self.config.port or MYSQL_DEFAULT_PORT,
            database=self.config.database or DEFAULT_DATABASE_NAME,
        )

    def _create_engine(self) -> Engine:
        return create_engine(
            self.build_url(),
            pool_pre_ping=True,
            pool_size=_calculate_pool_size(),
            max_overflow=15,
            pool_timeout=30,
            pool_recycle=1800,  # MySQL drops idle connections after wait_timeout
            connect_args={"connect_timeout": 10},
            echo=False,
        )


class SQLiteAdapter(DatabaseAdapter):
    name = DatabaseType.SQLITE

    @property
    def target(self) -> str:
        return self.config.filename or self.config.url or SQLITE_DEFAULT_FILE

    @property
    def is_memory(self) -> bool:
        return self.target in (SQLITE_MEMORY, "sqlite://", "sqlite:///:memory:")

    def build_url(self) -> str:
        target = self.target
        if self.is_memory:
            return "sqlite://"
        if target.startswith("sqlite:"):
            return target
        return f"sqlite:///{target}"

    def _create_engine(self) -> Engine:
        kwargs: dict[str, Any] = {
            "connect_args": {"check_same_thread": False},
            "echo": False,
        }
        # One shared connection so every session sees the same in-memory database
        if self.is_memory:
            kwargs["poolclass"] = StaticPool

        return create_engine(self.build_url(), **kwargs)


ADAPTERS: dict[str, type[DatabaseAdapter]] = {
    DatabaseType.POSTGRESQL: PostgreSQLAdapter,
    DatabaseType.MYSQL: MySQLAdapter,
    DatabaseType.SQLITE: SQLiteAdapter,
}


class DatabaseProvider:
    """
    Process-wide holder of the active adapter.

    initialize() is memoized: once an adapter exists, later calls return it
    unchanged, whatever config they pass. reset() disposes it.
    """

    _adapter: DatabaseAdapter | None = None
    _config: DatabaseConfig | None = None

    @classmethod
    def initialize(cls, config: DatabaseConfig) -> DatabaseAdapter:
        if cls._adapter is not None:
            return cls._adapter

        adapter_cls = ADAPTERS.get(config.type)
        if adapter_cls is None:
            raise DatabaseConfigurationError(f"Unsupported database type: {config.type}")

        cls._adapter = adapter_cls(config)
        cls._config = config
        logger.info(
            "Database provider initialized",
            backend=config.type,
            url=config.masked_url(),
        )
        return cls._adapter

    @classmethod
    def get_db(cls) -> DatabaseAdapter:
        if cls._adapter is None:
            raise DatabaseConfigurationError(
                "Database provider not initialized. Call DatabaseProvider.initialize() first."
            )
        return cls._adapter

    @classmethod
    def get_config(cls) -> DatabaseConfig | None:
        return cls._config

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._adapter is not None

    @classmethod
    def reset(cls) -> None:
        if cls._adapter is not None:
            cls._adapter.dispose()
        cls._adapter = None
        cls._config = None
