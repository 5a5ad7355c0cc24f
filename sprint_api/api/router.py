from fastapi import APIRouter

from sprint_api.api.routes.sprints import router as sprints_router
from sprint_api.core.config import settings

api_router = APIRouter(prefix=settings.api_prefix.rstrip("/"))
api_router.include_router(sprints_router, tags=["sprints"])
