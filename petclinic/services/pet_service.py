"""반려동물 서비스 — 반려동물 등록/수정 비즈니스 로직.

Pet Service — Business logic for adding and editing a holder's pets,
including the checks that need stored data: duplicate names within the
holder, pet type lookup, and birth dates in the future.
"""

from datetime import date

from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.models.holder import Holder
from petclinic.models.pet import Pet, PetType
from petclinic.repositories.holder_repository import holder_repository
from petclinic.repositories.pet_type_repository import pet_type_repository
from petclinic.schemas.pet import PetForm
from petclinic.utils.binding import BoundForm
from petclinic.utils.exceptions import NotFoundError
from petclinic.utils.logger import get_logger

logger = get_logger(__name__)


class PetService:
    """반려동물 관련 비즈니스 로직을 처리하는 서비스.

    Service handling pet business logic.
    """

    def form_values(self, pet: Pet | None = None) -> dict[str, object]:
        """폼 초기값 (Initial form values for a stored or new pet)."""
        if pet is None:
            return {"name": "", "birth_date": "", "type": ""}
        return {
            "name": pet.name,
            "birth_date": pet.birth_date,
            "type": pet.type.name if pet.type is not None else "",
        }

    def get_pet(self, holder: Holder, pet_id: int) -> Pet:
        """보호자의 반려동물을 ID로 찾습니다.

        Raises:
            NotFoundError: 이 보호자의 반려동물이 아닐 때 (No such pet for this holder)
        """
        pet: Pet | None = holder.get_pet(pet_id)
        if pet is None:
            raise NotFoundError(f"Pet {pet_id} not found for holder {holder.id}")
        return pet

    async def list_pet_types(self, db: AsyncSession) -> list[PetType]:
        return await pet_type_repository.find_pet_types(db)

    async def check_pet(
        self,
        db: AsyncSession,
        holder: Holder,
        bound: BoundForm[PetForm],
        pet_id: int | None = None,
    ) -> PetType | None:
        """저장된 데이터가 필요한 검증을 수행합니다.

        Run the checks that need stored data and record failures on the
        binding result. Returns the resolved pet type, or None when the
        type could not be resolved.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            holder: 보호자 (Holder the pet belongs to)
            bound: 바인딩된 폼 (Bound pet form)
            pet_id: 수정 중인 반려동물 ID, 신규면 None (Edited pet id, None when new)
        """
        result = bound.result
        name: str = bound.values.get("name", "").strip()
        if name and not result.has_field_errors("name"):
            existing: Pet | None = holder.get_pet_by_name(name, ignore_new=pet_id is None)
            if existing is not None and existing.id != pet_id:
                result.reject_value("name", "duplicate", "already exists")

        data = bound.data
        if data is not None and data.birth_date is not None and data.birth_date > date.today():
            result.reject_value("birth_date", "type_mismatch", "invalid date")

        pet_type: PetType | None = None
        type_name: str = bound.values.get("type", "").strip()
        if type_name and not result.has_field_errors("type"):
            pet_type = await pet_type_repository.get_by_name(db, type_name)
            if pet_type is None:
                result.reject_value("type", "type_mismatch", "type not found")
        return pet_type

    async def add_pet(
        self,
        db: AsyncSession,
        holder: Holder,
        data: PetForm,
        pet_type: PetType,
    ) -> Pet:
        """보호자에게 새 반려동물을 추가하고 저장합니다.

        Add a new pet to the holder and save the holder.
        """
        pet = Pet(name=data.name, birth_date=data.birth_date, type=pet_type)
        holder.add_pet(pet)
        await holder_repository.save(db, holder)
        logger.info("Added pet #%s (%s) to holder #%s", pet.id, pet.name, holder.id)
        return pet

    async def update_pet(
        self,
        db: AsyncSession,
        holder: Holder,
        pet: Pet,
        data: PetForm,
        pet_type: PetType,
    ) -> Pet:
        """기존 반려동물 정보를 수정하고 저장합니다.

        Copy the validated fields onto the stored pet and save the holder.
        """
        pet.name = data.name
        pet.birth_date = data.birth_date
        pet.type = pet_type
        holder.add_pet(pet)
        await holder_repository.save(db, holder)
        logger.info("Updated pet #%s of holder #%s", pet.id, holder.id)
        return pet


# 싱글턴 인스턴스 — Singleton instance
pet_service: PetService = PetService()
