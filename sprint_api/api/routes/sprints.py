from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Query, Response

from sprint_api.core.config import settings
from sprint_api.core.errors import NotFound
from sprint_api.models.common import MAX_ID, ApiError, Sprint
from sprint_api.services.sprint_endpoint import ENTITY_NAME, SprintEndpoint, get_sprint_endpoint
from sprint_api.store.sprint_store import SORTABLE_FIELDS
from sprint_api.utils.headers import entity_creation_alert, entity_deletion_alert, entity_update_alert
from sprint_api.utils.pagination import build_page_request, pagination_headers

router = APIRouter(prefix="/sprints")


def _base_url() -> str:
    return f"{settings.api_prefix.rstrip('/')}/sprints"


@router.post(
    "",
    response_model=Sprint,
    status_code=201,
    responses={400: {"model": ApiError}},
)
def create_sprint(
    sprint: Sprint,
    response: Response,
    svc: SprintEndpoint = Depends(get_sprint_endpoint),
):
    """Create a new sprint. The body must not carry an id."""
    result = svc.create(sprint).unwrap()
    response.headers["Location"] = f"{_base_url()}/{result.id}"
    response.headers.update(entity_creation_alert(ENTITY_NAME, str(result.id)))
    return result


@router.put(
    "",
    response_model=Sprint,
    responses={400: {"model": ApiError}},
)
def update_sprint(
    sprint: Sprint,
    response: Response,
    svc: SprintEndpoint = Depends(get_sprint_endpoint),
):
    """Update (or insert under the given id) an existing sprint."""
    result = svc.update(sprint).unwrap()
    response.headers.update(entity_update_alert(ENTITY_NAME, str(sprint.id)))
    return result


@router.get(
    "",
    response_model=list[Sprint],
    responses={400: {"model": ApiError}},
)
def list_sprints(
    response: Response,
    page: int = Query(default=0, ge=0, le=MAX_ID // settings.page_max_size),
    size: int = Query(default=settings.page_default_size, ge=1, le=settings.page_max_size),
    sort: list[str] = Query(default=[], description="field[,field...][,asc|desc]"),
    svc: SprintEndpoint = Depends(get_sprint_endpoint),
):
    page_request = build_page_request(page, size, sort, SORTABLE_FIELDS)
    result = svc.list(page_request)
    response.headers.update(pagination_headers(result, _base_url()))
    return result.content


@router.get(
    "/{sprint_id}",
    response_model=Sprint,
    responses={404: {"model": ApiError}},
)
def get_sprint(
    sprint_id: int = Path(ge=1, le=MAX_ID),
    svc: SprintEndpoint = Depends(get_sprint_endpoint),
):
    sprint = svc.get(sprint_id)
    if sprint is None:
        raise NotFound("Sprint not found", {"id": sprint_id})
    return sprint


@router.delete("/{sprint_id}")
def delete_sprint(
    sprint_id: int = Path(ge=1, le=MAX_ID),
    svc: SprintEndpoint = Depends(get_sprint_endpoint),
):
    svc.delete(sprint_id)
    return Response(status_code=200, headers=entity_deletion_alert(ENTITY_NAME, str(sprint_id)))
