"""동물 종류 레포지토리.

Pet Type Repository — Queries for the shared pet type classifications.
"""

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.models.pet import PetType
from petclinic.repositories.base import BaseRepository


class PetTypeRepository(BaseRepository[PetType]):
    """동물 종류 테이블 레포지토리 (Repository for the types table)."""

    def __init__(self) -> None:
        super().__init__(PetType)

    async def find_pet_types(self, db: AsyncSession) -> list[PetType]:
        """이름순으로 모든 동물 종류를 조회합니다 (All pet types, ordered by name)."""
        return list(await self.get_all(db, order_by=PetType.name))

    async def get_by_name(self, db: AsyncSession, name: str) -> PetType | None:
        """이름으로 동물 종류를 조회합니다 (대소문자 무시).

        Retrieve a pet type by name, compared case-insensitively.
        """
        query: Select = select(PetType).where(func.lower(PetType.name) == name.lower())
        result = await db.execute(query)
        return result.scalars().first()


# 싱글턴 인스턴스 — Singleton instance
pet_type_repository: PetTypeRepository = PetTypeRepository()
