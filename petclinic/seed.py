"""초기 데이터 시드 스크립트 — 동물 종류와 샘플 보호자 생성.

Seed script — Creates the pet types and a few sample holders with pets
and visits.

Usage:
    python -m petclinic.seed

Creates:
    - 6개 동물 종류: bird, cat, dog, hamster, lizard, snake (6 pet types)
    - 샘플 보호자 3명과 반려동물, 방문 기록 (3 sample holders with pets and visits)
"""

import asyncio
from datetime import date

from petclinic.database import async_session, engine, Base
from petclinic.models import Holder, Pet, PetType, Visit
from petclinic.repositories.pet_type_repository import pet_type_repository
from petclinic.utils.logger import get_logger

logger = get_logger(__name__)

PET_TYPES: list[str] = ["bird", "cat", "dog", "hamster", "lizard", "snake"]

# (이름, 성, 주소, 도시, 전화, [(반려동물, 생일, 종류, [(방문일, 내용)])])
SAMPLE_HOLDERS: list[tuple] = [
    ("George", "Franklin", "110 W. Liberty St.", "Madison", "6085551023", [
        ("Leo", date(2010, 9, 7), "cat", []),
    ]),
    ("Betty", "Davis", "638 Cardinal Ave.", "Sun Prairie", "6085551749", [
        ("Basil", date(2012, 8, 6), "hamster", []),
    ]),
    ("Jean", "Coleman", "105 N. Lake St.", "Monona", "6085552654", [
        ("Samantha", date(2012, 9, 4), "cat", [(date(2013, 1, 1), "rabies shot")]),
        ("Max", date(2012, 9, 4), "cat", [(date(2013, 1, 2), "neutered")]),
    ]),
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts pet types and
    sample holders.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        # 동물 종류가 하나라도 있으면 시드된 것으로 간주
        if await pet_type_repository.exists(db, {}):
            logger.info("Already seeded. Skipping.")
            return

        types: dict[str, PetType] = {}
        for name in PET_TYPES:
            types[name] = await pet_type_repository.create(db, {"name": name})

        for first, last, address, city, telephone, pets in SAMPLE_HOLDERS:
            holder = Holder(first_name=first, last_name=last, address=address, city=city, telephone=telephone)
            for pet_name, birth_date, type_name, visits in pets:
                pet = Pet(name=pet_name, birth_date=birth_date, type=types[type_name])
                holder.add_pet(pet)
                for visit_date, description in visits:
                    pet.add_visit(Visit(visit_date=visit_date, description=description))
            db.add(holder)

        await db.commit()
        logger.info("Seeded %d pet types and %d holders", len(types), len(SAMPLE_HOLDERS))


if __name__ == "__main__":
    asyncio.run(seed())
