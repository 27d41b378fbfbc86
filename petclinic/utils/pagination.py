"""페이지네이션 유틸리티 모듈.

Pagination utility module.
Provides the Page model handed to list views, carrying the items of the
current page and the metadata needed to draw page links.
"""

import math
from typing import Any, Sequence

from pydantic import BaseModel


class Page(BaseModel):
    """페이지네이션 결과 모델.

    Pagination result model.

    Attributes:
        items: 현재 페이지 항목 목록 (Items for the current page)
        total: 전체 항목 수 (Total count across all pages)
        page: 현재 페이지 번호 (Current page number, 1-based)
        per_page: 페이지당 항목 수 (Items per page)
        pages: 전체 페이지 수 (Total number of pages)
    """

    items: list[Any]
    total: int
    page: int
    per_page: int
    pages: int

    @property
    def is_empty(self) -> bool:
        return self.total == 0


def build_page(items: Sequence[Any], total: int, page: int, per_page: int) -> Page:
    """조회 결과로 Page를 구성합니다.

    Build a Page from one page of items and the total count.
    ``pages`` is ``ceil(total / per_page)``.
    """
    pages: int = math.ceil(total / per_page) if per_page > 0 else 0
    return Page(items=list(items), total=total, page=page, per_page=per_page, pages=pages)
