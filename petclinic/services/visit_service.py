"""진료 방문 서비스 — 방문 기록 추가.

Visit Service — Records a new visit on a holder's pet.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.models.holder import Holder
from petclinic.models.pet import Visit
from petclinic.repositories.holder_repository import holder_repository
from petclinic.schemas.pet import VisitForm
from petclinic.utils.logger import get_logger

logger = get_logger(__name__)


class VisitService:
    """진료 방문 비즈니스 로직 (Visit business logic)."""

    async def add_visit(
        self,
        db: AsyncSession,
        holder: Holder,
        pet_id: int,
        visit: Visit,
        data: VisitForm,
    ) -> Visit:
        """검증된 값을 대기 중인 방문에 채우고 반려동물에 추가한 뒤 보호자를 저장합니다.

        Fill the pending visit from the validated form, attach it to the
        pet through the holder, and save the holder.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            holder: 보호자 (Holder owning the pet)
            pet_id: 반려동물 ID (Pet id)
            visit: 미리 생성된 빈 방문 (Pending visit created by the preload)
            data: 검증된 방문 폼 (Validated visit form)

        Returns:
            Visit: 저장된 방문 (The persisted visit)
        """
        visit.visit_date = data.visit_date
        visit.description = data.description
        holder.add_visit(pet_id, visit)
        await holder_repository.save(db, holder)
        logger.info("Added visit #%s to pet #%s of holder #%s", visit.id, pet_id, holder.id)
        return visit


# 싱글턴 인스턴스 — Singleton instance
visit_service: VisitService = VisitService()
