"""보호자 SQLAlchemy ORM 모델 정의.

Holder (clinic client) SQLAlchemy ORM model definition.

Tables:
    - holders: 보호자 (Clinic clients owning one or more pets)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.database import Base

if TYPE_CHECKING:
    from petclinic.models.pet import Pet, Visit


class Holder(Base):
    """보호자 모델 — 반려동물을 소유한 병원 고객.

    Holder model — A clinic client and the pets they own.
    The pet list is unique by pet identity and ordered by pet name.

    Attributes:
        id: 고유 식별자, 저장소가 부여 (Numeric id assigned by the store)
        first_name: 이름 (First name)
        last_name: 성 (Last name, used for search)
        address: 주소 (Street address)
        city: 도시 (City)
        telephone: 전화번호, 숫자 10자리 (10-digit telephone number)

    Relationships:
        pets: 소유 반려동물 목록 (Owned pets, cascade delete)
    """

    __tablename__ = "holders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    # 성 — 검색 키이므로 인덱스 (Indexed, searched by prefix)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    address: Mapped[str] = mapped_column(String(255), nullable=False)
    city: Mapped[str] = mapped_column(String(80), nullable=False)
    telephone: Mapped[str] = mapped_column(String(20), nullable=False)

    # 비동기 세션에서는 지연 로딩이 불가하므로 selectin 로딩 사용
    # Async sessions cannot lazy-load, so collections load with selectin
    pets: Mapped[list[Pet]] = relationship(
        "Pet",
        back_populates="holder",
        cascade="all, delete-orphan",
        order_by="Pet.name",
        lazy="selectin",
    )

    def add_pet(self, pet: Pet) -> None:
        """반려동물을 추가합니다. 이미 목록에 있으면 무시합니다.

        Add a pet to this holder unless it is already in the list.
        """
        if pet not in self.pets:
            self.pets.append(pet)

    def get_pet(self, pet_id: int | None) -> Pet | None:
        """ID로 반려동물을 찾습니다 (Return the pet with the given id, or None)."""
        if pet_id is None:
            return None
        for pet in self.pets:
            if not pet.is_new and pet.id == pet_id:
                return pet
        return None

    def get_pet_by_name(self, name: str, ignore_new: bool = False) -> Pet | None:
        """이름으로 반려동물을 찾습니다 (대소문자 무시).

        Return the pet with the given name, compared case-insensitively.

        Args:
            name: 찾을 이름 (Pet name)
            ignore_new: True이면 아직 저장되지 않은 반려동물은 건너뜀
                        (Skip pets that have not been saved yet)
        """
        wanted = name.lower()
        for pet in self.pets:
            if ignore_new and pet.is_new:
                continue
            if pet.name is not None and pet.name.lower() == wanted:
                return pet
        return None

    def add_visit(self, pet_id: int | None, visit: Visit) -> None:
        """지정한 반려동물에 진료 방문을 추가합니다.

        Attach a visit to the pet identified by ``pet_id``.

        Raises:
            ValueError: pet_id가 없거나 이 보호자의 반려동물이 아닐 때
                        (Missing pet id, or no such pet for this holder)
        """
        if pet_id is None:
            raise ValueError("Pet identifier must not be null!")
        pet = self.get_pet(pet_id)
        if pet is None:
            raise ValueError("Invalid Pet identifier!")
        pet.add_visit(visit)

    def __repr__(self) -> str:
        return f"<Holder id={self.id} {self.first_name} {self.last_name}>"
