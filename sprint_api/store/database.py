from __future__ import annotations

import logging
import time

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool

from sprint_api.core.config import settings

_log = logging.getLogger("sprint_api.sql")


class Base(DeclarativeBase):
    pass


def create_db_engine(url: str | None = None, sql_log_enabled: bool | None = None) -> Engine:
    url = url or settings.database_url
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql://", 1)

    kwargs: dict = {}
    if url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        # in-memory databases live inside a single connection
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    engine = create_engine(url, **kwargs)
    if settings.sql_log_enabled if sql_log_enabled is None else sql_log_enabled:
        _install_sql_logging(engine)
    return engine


def _install_sql_logging(engine: Engine) -> None:
    @event.listens_for(engine, "before_cursor_execute")
    def _before(conn, cursor, statement, parameters, context, executemany):
        context._query_start_time = time.perf_counter()

    @event.listens_for(engine, "after_cursor_execute")
    def _after(conn, cursor, statement, parameters, context, executemany):
        started = getattr(context, "_query_start_time", None)
        if started is None:
            return
        query = statement if len(statement) < 200 else statement[:200] + "..."
        dur_ms = int((time.perf_counter() - started) * 1000)
        _log.info("sql", extra={"extra": {"statement": query, "duration_ms": dur_ms}})


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, expire_on_commit=False)
