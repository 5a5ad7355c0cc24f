from __future__ import annotations

from typing import Iterable
from urllib.parse import urlencode

from sprint_api.core.errors import BadRequest
from sprint_api.models.common import Page, PageRequest, SortOrder

_DIRECTIONS = {"asc", "desc"}


def parse_sort(values: Iterable[str], allowed: Iterable[str]) -> tuple[SortOrder, ...]:
    """Parse ``sort`` query values of the form ``field[,field...][,asc|desc]``.

    A trailing direction applies to every field listed before it in the same value.
    """
    allowed = set(allowed)
    orders: list[SortOrder] = []
    for raw in values:
        parts = [p.strip() for p in raw.split(",") if p.strip()]
        if not parts:
            continue
        direction = "asc"
        if parts[-1].lower() in _DIRECTIONS:
            direction = parts.pop().lower()
        for name in parts:
            if name not in allowed:
                raise BadRequest("Unknown sort property", {"sort": raw, "property": name, "allowed": sorted(allowed)})
            orders.append(SortOrder(field=name, direction=direction))
    return tuple(orders)


def build_page_request(page: int, size: int, sort: Iterable[str], allowed: Iterable[str]) -> PageRequest:
    return PageRequest(page=page, size=size, sort=parse_sort(sort, allowed))


def page_uri(base_url: str, page: int, size: int) -> str:
    return f"{base_url}?{urlencode({'page': page, 'size': size})}"


def pagination_headers(page: Page, base_url: str) -> dict[str, str]:
    links: list[str] = []
    if page.number + 1 < page.total_pages:
        links.append(f'<{page_uri(base_url, page.number + 1, page.size)}>; rel="next"')
    if page.number > 0:
        links.append(f'<{page_uri(base_url, page.number - 1, page.size)}>; rel="prev"')
    last_page = max(page.total_pages - 1, 0)
    links.append(f'<{page_uri(base_url, last_page, page.size)}>; rel="last"')
    links.append(f'<{page_uri(base_url, 0, page.size)}>; rel="first"')
    return {"X-Total-Count": str(page.total_elements), "Link": ",".join(links)}
