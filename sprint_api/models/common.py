from __future__ import annotations

import datetime as dt
import math
from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

# ids are stored as signed 64-bit integers
MAX_ID = 2**63 - 1


class ApiErrorItem(BaseModel):
    code: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
    correlation_id: str = ""


class ApiError(BaseModel):
    error: ApiErrorItem


class Sprint(BaseModel):
    model_config = ConfigDict(extra="ignore", from_attributes=True)

    id: int | None = Field(None, ge=1, le=MAX_ID)
    name: str | None = None
    goal: str | None = None
    state: str | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None


class SortOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: str
    direction: Literal["asc", "desc"] = "asc"


class PageRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int = Field(0, ge=0)
    size: int = Field(20, ge=1)
    sort: tuple[SortOrder, ...] = ()

    @property
    def offset(self) -> int:
        return self.page * self.size


class Page(BaseModel, Generic[T]):
    content: list[T]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_elements / self.size) if self.size else 1
