from __future__ import annotations

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sprint_api.api.router import api_router
from sprint_api.core.config import settings
from sprint_api.core.errors import install_exception_handlers
from sprint_api.core.logging import configure_logging, RequestIdMiddleware
from sprint_api.services.sprint_endpoint import get_sprint_store
from sprint_api.store.sprint_store import SqlSprintStore
from sprint_api.utils.headers import exposed_headers

configure_logging()

app = FastAPI(
    title="Sprint API",
    version="0.1.0",
)

# CORS: no origins allowed by default; clients that are allowed may read the alert/pagination headers
app.add_middleware(
    CORSMiddleware,
    allow_origins=[],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=exposed_headers(),
)

app.add_middleware(RequestIdMiddleware)

app.include_router(api_router)

install_exception_handlers(app)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@app.get("/ready")
def ready(store: SqlSprintStore = Depends(get_sprint_store)) -> dict:
    return {
        "status": "ok",
        "app_name": settings.app_name,
        "database": getattr(store, "dialect", "unknown"),
    }
