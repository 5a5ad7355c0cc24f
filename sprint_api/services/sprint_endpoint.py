from __future__ import annotations

import logging
from functools import lru_cache

from fastapi import Depends

from sprint_api.core.config import settings
from sprint_api.core.errors import BadRequestAlert
from sprint_api.core.result import Result
from sprint_api.models.common import Page, PageRequest, Sprint
from sprint_api.store.database import create_db_engine
from sprint_api.store.sprint_store import SprintStore, SqlSprintStore

ENTITY_NAME = "sprint"


@lru_cache(maxsize=1)
def get_sprint_store() -> SprintStore:
    store = SqlSprintStore(create_db_engine(settings.database_url))
    store.create_schema()
    return store


class SprintEndpoint:
    """Create/update/list/get/delete for sprints, delegating persistence to a store."""

    def __init__(self, store: SprintStore, log: logging.Logger | None = None) -> None:
        self._store = store
        self._log = log or logging.getLogger("sprint_api.sprints")

    def _log_sprint(self, action: str, sprint: Sprint) -> None:
        if self._log.isEnabledFor(logging.DEBUG):
            self._log.debug("rest_request", extra={"extra": {"action": action, "sprint": sprint.model_dump(mode="json")}})

    def create(self, sprint: Sprint) -> Result[Sprint]:
        self._log_sprint("create", sprint)
        if sprint.id is not None:
            return Result.fail(BadRequestAlert("A new sprint cannot already have an ID", ENTITY_NAME, "idexists"))
        return Result.ok(self._store.save(sprint))

    def update(self, sprint: Sprint) -> Result[Sprint]:
        self._log_sprint("update", sprint)
        if sprint.id is None:
            return Result.fail(BadRequestAlert("Invalid id", ENTITY_NAME, "idnull"))
        return Result.ok(self._store.save(sprint))

    def list(self, page_request: PageRequest) -> Page[Sprint]:
        self._log.debug(
            "rest_request",
            extra={"extra": {"action": "list", "page": page_request.page, "size": page_request.size}},
        )
        return self._store.find_all(page_request)

    def get(self, sprint_id: int) -> Sprint | None:
        self._log.debug("rest_request", extra={"extra": {"action": "get", "id": sprint_id}})
        return self._store.find_by_id(sprint_id)

    def delete(self, sprint_id: int) -> None:
        # no existence check: deleting an unknown id still succeeds
        self._log.debug("rest_request", extra={"extra": {"action": "delete", "id": sprint_id}})
        self._store.delete_by_id(sprint_id)


def get_sprint_endpoint(store: SprintStore = Depends(get_sprint_store)) -> SprintEndpoint:
    return SprintEndpoint(store)
