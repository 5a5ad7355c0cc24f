import logging

import pytest

from sprint_api.core.errors import BadRequestAlert
from sprint_api.models.common import Page, PageRequest, Sprint
from sprint_api.services.sprint_endpoint import SprintEndpoint


class RecordingStore:
    def __init__(self):
        self.calls = []
        self.rows = {}

    def save(self, sprint):
        self.calls.append(("save", sprint))
        saved = sprint.model_copy(update={"id": sprint.id or len(self.rows) + 1})
        self.rows[saved.id] = saved
        return saved

    def find_all(self, page_request):
        self.calls.append(("find_all", page_request))
        rows = list(self.rows.values())
        chunk = rows[page_request.offset:page_request.offset + page_request.size]
        return Page[Sprint](content=chunk, number=page_request.page, size=page_request.size, total_elements=len(rows))

    def find_by_id(self, sprint_id):
        self.calls.append(("find_by_id", sprint_id))
        return self.rows.get(sprint_id)

    def delete_by_id(self, sprint_id):
        self.calls.append(("delete_by_id", sprint_id))
        self.rows.pop(sprint_id, None)


def test_create_with_id_fails_without_store_call():
    store = RecordingStore()
    result = SprintEndpoint(store).create(Sprint(id=5, name="S1"))
    assert not result.is_ok
    assert isinstance(result.error, BadRequestAlert)
    assert result.error.error_key == "idexists"
    assert result.error.entity_name == "sprint"
    assert store.calls == []


def test_create_assigns_id():
    store = RecordingStore()
    result = SprintEndpoint(store).create(Sprint(name="S1"))
    assert result.is_ok
    assert result.unwrap().id == 1
    assert [c[0] for c in store.calls] == ["save"]


def test_update_without_id_fails_without_store_call():
    store = RecordingStore()
    result = SprintEndpoint(store).update(Sprint(name="S1"))
    assert result.error.error_key == "idnull"
    assert result.error.status_code == 400
    assert store.calls == []


def test_update_returns_saved_value():
    store = RecordingStore()
    sprint = Sprint(id=7, name="renamed")
    result = SprintEndpoint(store).update(sprint)
    assert result.unwrap() == sprint
    assert store.calls == [("save", sprint)]


def test_get_missing_is_none():
    assert SprintEndpoint(RecordingStore()).get(42) is None


def test_delete_is_idempotent():
    store = RecordingStore()
    endpoint = SprintEndpoint(store)
    endpoint.delete(3)
    endpoint.delete(3)
    assert store.calls == [("delete_by_id", 3), ("delete_by_id", 3)]


def test_list_passes_page_request():
    store = RecordingStore()
    endpoint = SprintEndpoint(store)
    for i in range(3):
        endpoint.create(Sprint(name=f"S{i}"))
    page = endpoint.list(PageRequest(page=0, size=2))
    assert len(page.content) == 2
    assert page.total_elements == 3
    assert page.total_pages == 2


def test_unwrap_raises_error():
    result = SprintEndpoint(RecordingStore()).create(Sprint(id=1))
    with pytest.raises(BadRequestAlert) as exc:
        result.unwrap()
    assert exc.value.code == "idexists"


def test_sprint_body_not_serialized_without_debug(monkeypatch):
    log = logging.getLogger("sprint_api.tests.quiet")
    log.setLevel(logging.INFO)

    def fail_dump(self, **kwargs):
        raise AssertionError("model_dump called")

    monkeypatch.setattr(Sprint, "model_dump", fail_dump)
    endpoint = SprintEndpoint(RecordingStore(), log)
    assert endpoint.update(Sprint(id=3, name="S3")).is_ok
    assert endpoint.create(Sprint(id=3)).error.error_key == "idexists"
