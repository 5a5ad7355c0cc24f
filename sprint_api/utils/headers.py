from __future__ import annotations

from sprint_api.core.config import settings


def _prefix(app_name: str | None) -> str:
    return f"X-{app_name or settings.app_name}"


def alert_headers(message: str, param: str, app_name: str | None = None) -> dict[str, str]:
    prefix = _prefix(app_name)
    return {f"{prefix}-alert": message, f"{prefix}-params": param}


def entity_creation_alert(entity_name: str, entity_id: str, app_name: str | None = None) -> dict[str, str]:
    return alert_headers(f"{app_name or settings.app_name}.{entity_name}.created", entity_id, app_name)


def entity_update_alert(entity_name: str, entity_id: str, app_name: str | None = None) -> dict[str, str]:
    return alert_headers(f"{app_name or settings.app_name}.{entity_name}.updated", entity_id, app_name)


def entity_deletion_alert(entity_name: str, entity_id: str, app_name: str | None = None) -> dict[str, str]:
    return alert_headers(f"{app_name or settings.app_name}.{entity_name}.deleted", entity_id, app_name)


def failure_alert(entity_name: str, error_key: str, app_name: str | None = None) -> dict[str, str]:
    prefix = _prefix(app_name)
    return {f"{prefix}-error": f"error.{error_key}", f"{prefix}-params": entity_name}


def exposed_headers(app_name: str | None = None) -> list[str]:
    """Headers a browser client must be allowed to read (CORS ``expose_headers``)."""
    prefix = _prefix(app_name)
    return ["Location", "Link", "X-Total-Count", f"{prefix}-alert", f"{prefix}-error", f"{prefix}-params"]
