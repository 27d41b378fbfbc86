"""반려동물 관련 SQLAlchemy ORM 모델 정의.

Pet-related SQLAlchemy ORM model definitions.
Includes PetType (shared classification), Pet (owned by a Holder)
and Visit (a veterinary visit recorded for a Pet).

Tables:
    - types: 동물 종류 (Pet classifications, e.g. cat/dog)
    - pets: 반려동물 (Pets, belong to a holder)
    - visits: 진료 방문 (Visits, belong to a pet)
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any

from sqlalchemy import Date, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petclinic.database import Base

if TYPE_CHECKING:
    from petclinic.models.holder import Holder


class PetType(Base):
    """동물 종류 모델 — 여러 반려동물이 참조로 공유.

    Pet type model — A named classification shared by reference across pets.
    """

    __tablename__ = "types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(80), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"<PetType {self.name}>"


class Pet(Base):
    """반려동물 모델 — 정확히 한 보호자에 속함.

    Pet model — Belongs to exactly one holder and carries its visit history,
    ordered by visit date.

    Attributes:
        id: 고유 식별자 (Numeric id assigned by the store)
        holder_id: 보호자 FK (Holder foreign key)
        type_id: 동물 종류 FK (Pet type foreign key)
        name: 이름 (Pet name, unique per holder)
        birth_date: 생년월일 (Birth date)

    Relationships:
        holder: 보호자 역참조 (Back-reference to the owning holder)
        type: 동물 종류 (Pet type)
        visits: 진료 방문 목록 (Visits, cascade delete)
    """

    __tablename__ = "pets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 보호자 FK — CASCADE: 보호자 삭제 시 반려동물도 삭제
    holder_id: Mapped[int] = mapped_column(Integer, ForeignKey("holders.id", ondelete="CASCADE"), nullable=False, index=True)
    type_id: Mapped[int] = mapped_column(Integer, ForeignKey("types.id"), nullable=False)
    name: Mapped[str] = mapped_column(String(30), nullable=False)
    birth_date: Mapped[date] = mapped_column(Date, nullable=False)

    holder: Mapped[Holder] = relationship("Holder", back_populates="pets")
    type: Mapped[PetType] = relationship("PetType", lazy="selectin")
    visits: Mapped[list[Visit]] = relationship(
        "Visit",
        back_populates="pet",
        cascade="all, delete-orphan",
        order_by="Visit.visit_date",
        lazy="selectin",
    )

    def add_visit(self, visit: Visit) -> None:
        """진료 방문을 추가합니다 (Append a visit to this pet's history)."""
        self.visits.append(visit)

    def __repr__(self) -> str:
        return f"<Pet id={self.id} {self.name}>"


class Visit(Base):
    """진료 방문 모델 — 반려동물의 방문 기록.

    Visit model — A dated, described veterinary visit of one pet.
    Created only through ``Pet.add_visit`` / ``Holder.add_visit``.
    The visit date defaults to today.
    """

    __tablename__ = "visits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    pet_id: Mapped[int] = mapped_column(Integer, ForeignKey("pets.id", ondelete="CASCADE"), nullable=False, index=True)
    visit_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    pet: Mapped[Pet] = relationship("Pet", back_populates="visits")

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("visit_date", date.today())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Visit id={self.id} {self.visit_date}>"
