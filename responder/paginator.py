"""
Adapter around a length-aware paginator.

Page arithmetic belongs to the wrapped paginator; this only reads its state.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .resources import LengthAwarePaginator


class Pagination(BaseModel):
    total: int = Field(description="Total number of items across all pages")
    count: int = Field(description="Items on this page")
    per_page: int
    current_page: int = Field(description="Current page number (1-indexed)")
    total_pages: int
    has_next: bool
    has_prev: bool
    next_url: Optional[str] = None
    prev_url: Optional[str] = None


class PaginatorAdapter:
    def __init__(self, paginator: LengthAwarePaginator):
        self.paginator = paginator

    def get_total(self) -> int:
        return self.paginator.total()

    def get_count(self) -> int:
        return self.paginator.count()

    def get_per_page(self) -> int:
        return self.paginator.per_page()

    def get_current_page(self) -> int:
        return self.paginator.current_page()

    def get_last_page(self) -> int:
        return self.paginator.last_page()

    def get_url(self, page: int) -> str:
        return self.paginator.url(page)

    def to_pagination(self) -> Pagination:
        current = self.get_current_page()
        last = self.get_last_page()
        has_next = current < last
        has_prev = current > 1
        return Pagination(
            total=self.get_total(),
            count=self.get_count(),
            per_page=self.get_per_page(),
            current_page=current,
            total_pages=last,
            has_next=has_next,
            has_prev=has_prev,
            next_url=self.get_url(current + 1) if has_next else None,
            prev_url=self.get_url(current - 1) if has_prev else None,
        )
