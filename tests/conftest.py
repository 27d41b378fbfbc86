"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite database, session and httpx client
fixtures. Every test gets a fresh schema on its own engine, so no data
survives between tests and no PostgreSQL server is needed.
"""

from collections.abc import AsyncGenerator
from datetime import date

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from petclinic.database import Base, get_db
from petclinic.main import app
from petclinic.models import Holder, Pet, PetType, Visit

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 단일 커넥션을 공유하는 인메모리 DB에 스키마를 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def pet_types(db: AsyncSession) -> dict[str, PetType]:
    """기본 동물 종류(cat, dog, hamster)를 생성합니다."""
    result = {}
    for name in ("cat", "dog", "hamster"):
        pet_type = PetType(name=name)
        db.add(pet_type)
        result[name] = pet_type
    await db.flush()
    return result


async def make_holder(
    db: AsyncSession,
    first_name: str,
    last_name: str,
    pets: list[tuple[str, PetType]] | None = None,
) -> Holder:
    """반려동물을 가진 보호자를 생성합니다."""
    holder = Holder(
        first_name=first_name,
        last_name=last_name,
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )
    for name, pet_type in pets or []:
        holder.add_pet(Pet(name=name, birth_date=date(2020, 1, 1), type=pet_type))
    db.add(holder)
    await db.flush()
    return holder


@pytest_asyncio.fixture
async def george(db: AsyncSession, pet_types) -> Holder:
    """반려견 Max(방문 기록 1건)를 가진 보호자 George Franklin을 생성합니다."""
    holder = Holder(
        first_name="George",
        last_name="Franklin",
        address="110 W. Liberty St.",
        city="Madison",
        telephone="6085551023",
    )
    max_ = Pet(name="Max", birth_date=date.today(), type=pet_types["dog"])
    holder.add_pet(max_)
    max_.add_visit(Visit(description="rabies shot"))
    db.add(holder)
    await db.flush()
    return holder


def pet_of(holder: Holder, name: str) -> Pet:
    pet = holder.get_pet_by_name(name)
    assert pet is not None
    return pet
