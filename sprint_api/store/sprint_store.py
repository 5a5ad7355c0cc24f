from __future__ import annotations

import datetime as dt
import logging
from typing import Protocol

from sqlalchemy import Date, Integer, String, Text, delete, func, select, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Mapped, mapped_column

from sprint_api.models.common import Page, PageRequest, Sprint
from sprint_api.store.database import Base, create_session_factory


class SprintRow(Base):
    __tablename__ = "sprint"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(String(255))
    goal: Mapped[str | None] = mapped_column(Text)
    state: Mapped[str | None] = mapped_column(String(32))
    start_date: Mapped[dt.date | None] = mapped_column(Date)
    end_date: Mapped[dt.date | None] = mapped_column(Date)


SORTABLE_FIELDS = ("id", "name", "goal", "state", "start_date", "end_date")


def sync_id_sequence(session) -> None:
    """Move the PostgreSQL id sequence past the highest stored id.

    Rows saved under a caller-chosen id do not advance the serial sequence.
    """
    if session.get_bind().dialect.name != "postgresql":
        return
    table = SprintRow.__tablename__
    session.execute(
        text(f"SELECT setval(pg_get_serial_sequence('{table}', 'id'), (SELECT COALESCE(MAX(id), 1) FROM {table}))")
    )


class SprintStore(Protocol):
    def save(self, sprint: Sprint) -> Sprint: ...

    def find_all(self, page_request: PageRequest) -> Page[Sprint]: ...

    def find_by_id(self, sprint_id: int) -> Sprint | None: ...

    def delete_by_id(self, sprint_id: int) -> None: ...


class SqlSprintStore:
    """SprintStore backed by a SQLAlchemy engine; one session per call."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._sessions = create_session_factory(engine)
        self._log = logging.getLogger("sprint_api.store")

    @property
    def dialect(self) -> str:
        return self._engine.dialect.name

    def create_schema(self) -> None:
        Base.metadata.create_all(self._engine)

    def save(self, sprint: Sprint) -> Sprint:
        with self._sessions.begin() as session:
            # merge inserts when id is None or unknown, updates otherwise
            row = session.merge(SprintRow(**sprint.model_dump()))
            session.flush()
            if sprint.id is not None:
                sync_id_sequence(session)
            saved = Sprint.model_validate(row)
        self._log.debug("sprint_saved", extra={"extra": {"id": saved.id}})
        return saved

    def find_all(self, page_request: PageRequest) -> Page[Sprint]:
        order_by = [
            getattr(SprintRow, o.field).desc() if o.direction == "desc" else getattr(SprintRow, o.field).asc()
            for o in page_request.sort
        ] or [SprintRow.id.asc()]
        stmt = select(SprintRow).order_by(*order_by).offset(page_request.offset).limit(page_request.size)
        with self._sessions() as session:
            total = session.scalar(select(func.count()).select_from(SprintRow)) or 0
            rows = session.scalars(stmt).all()
            content = [Sprint.model_validate(r) for r in rows]
        return Page[Sprint](content=content, number=page_request.page, size=page_request.size, total_elements=total)

    def find_by_id(self, sprint_id: int) -> Sprint | None:
        with self._sessions() as session:
            row = session.get(SprintRow, sprint_id)
            return Sprint.model_validate(row) if row is not None else None

    def delete_by_id(self, sprint_id: int) -> None:
        with self._sessions.begin() as session:
            result = session.execute(delete(SprintRow).where(SprintRow.id == sprint_id))
        self._log.debug("sprint_deleted", extra={"extra": {"id": sprint_id, "rows": result.rowcount}})
