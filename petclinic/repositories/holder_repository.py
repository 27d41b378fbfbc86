"""보호자 레포지토리 — 보호자 조회 및 저장 쿼리.

Holder Repository — Lookup, search and save queries for holders.
Pets, pet types and visits are loaded with the holder (selectin), so the
returned object graph can be rendered without further queries.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.models.holder import Holder
from petclinic.repositories.base import BaseRepository


class HolderRepository(BaseRepository[Holder]):
    """보호자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the holders table.
    """

    def __init__(self) -> None:
        super().__init__(Holder)

    async def get_detail(self, db: AsyncSession, holder_id: int) -> Holder | None:
        """보호자를 반려동물/방문 기록과 함께 새로 조회합니다.

        Retrieve a holder with pets, pet types and visits, refreshing any
        copy already held in the session so the view always sees fresh data.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            holder_id: 보호자 ID (Holder id)

        Returns:
            Holder | None: 보호자 또는 None (Holder or None)
        """
        return await self.get_by_id(db, holder_id, populate_existing=True)

    async def find_by_last_name(
        self,
        db: AsyncSession,
        last_name: str,
        page: int = 1,
        per_page: int = 5,
    ) -> tuple[Sequence[Holder], int]:
        """성(last name) 접두어로 보호자를 검색합니다.

        Search holders whose last name starts with ``last_name``,
        case-insensitively. An empty string matches every holder.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            last_name: 성 접두어 (Last name prefix)
            page: 페이지 번호, 1부터 시작 (Page number, 1-based)
            per_page: 페이지당 항목 수 (Items per page)

        Returns:
            tuple[Sequence[Holder], int]: (보호자 목록, 전체 개수) (Holders, total count)
        """
        query: Select = select(Holder).order_by(Holder.last_name, Holder.id)
        if last_name:
            query = query.where(Holder.last_name.istartswith(last_name, autoescape=True))
        return await self.get_paginated(db, query, page=page, per_page=per_page)


# 싱글턴 인스턴스 — Singleton instance
holder_repository: HolderRepository = HolderRepository()
