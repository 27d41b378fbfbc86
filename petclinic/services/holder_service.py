"""보호자 서비스 — 보호자 등록/검색/수정 비즈니스 로직.

Holder Service — Business logic for registering, searching and updating
holders.
"""

import math

from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.config import settings
from petclinic.models.holder import Holder
from petclinic.repositories.holder_repository import holder_repository
from petclinic.schemas.holder import HolderForm
from petclinic.utils.exceptions import BadRequestError, NotFoundError
from petclinic.utils.logger import get_logger
from petclinic.utils.pagination import Page, build_page

logger = get_logger(__name__)


class HolderService:
    """보호자 관련 비즈니스 로직을 처리하는 서비스.

    Service handling holder business logic.
    """

    def form_values(self, holder: Holder | None = None) -> dict[str, object]:
        """폼 초기값을 구성합니다.

        Initial form values: the stored holder's fields, or blanks for a
        new holder.
        """
        if holder is None:
            return {name: "" for name in HolderForm.model_fields}
        return {name: getattr(holder, name) for name in HolderForm.model_fields}

    async def get_holder(self, db: AsyncSession, holder_id: int) -> Holder:
        """보호자를 반려동물/방문 기록과 함께 조회합니다.

        Retrieve a holder with pets and visits.

        Raises:
            NotFoundError: 보호자를 찾을 수 없을 때 (Holder not found)
        """
        holder: Holder | None = await holder_repository.get_detail(db, holder_id)
        if holder is None:
            raise NotFoundError(f"Holder {holder_id} not found")
        return holder

    async def find_holders(
        self,
        db: AsyncSession,
        last_name: str | None,
        page: int = 1,
    ) -> Page:
        """성 접두어로 보호자를 검색합니다. 빈 문자열은 전체 검색.

        Search holders by last-name prefix; an empty or missing name is the
        broadest possible search. A page past the end is answered with the
        last page.

        Raises:
            BadRequestError: 페이지 번호가 1 미만일 때 (Page number below 1)
        """
        if page < 1:
            raise BadRequestError("Page number must be 1 or greater")
        per_page: int = settings.HOLDERS_PAGE_SIZE
        prefix: str = (last_name or "").strip()
        items, total = await holder_repository.find_by_last_name(db, prefix, page=page, per_page=per_page)
        if not items and total > 0:
            # 범위를 넘은 페이지 → 마지막 페이지 (Out-of-range page falls back to the last one)
            page = math.ceil(total / per_page)
            items, total = await holder_repository.find_by_last_name(db, prefix, page=page, per_page=per_page)
        return build_page(items, total, page, per_page)

    async def create_holder(self, db: AsyncSession, data: HolderForm) -> Holder:
        """새 보호자를 등록합니다 (Register a new holder)."""
        holder: Holder = await holder_repository.create(db, data.model_dump())
        logger.info("Created holder #%s (%s %s)", holder.id, holder.first_name, holder.last_name)
        return holder

    async def update_holder(self, db: AsyncSession, holder: Holder, data: HolderForm) -> Holder:
        """보호자 정보를 수정합니다 (Update a stored holder)."""
        holder = await holder_repository.update(db, holder, data.model_dump())
        logger.info("Updated holder #%s", holder.id)
        return holder


# 싱글턴 인스턴스 — Singleton instance
holder_service: HolderService = HolderService()
