"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    holder: 보호자 (Clinic clients)
    pet: 반려동물, 동물 종류, 진료 방문 (Pets, pet types and visits)
"""

from petclinic.models.holder import Holder
from petclinic.models.pet import Pet, PetType, Visit

__all__ = [
    "Holder",
    "Pet", "PetType", "Visit",
]
