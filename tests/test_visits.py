"""진료 방문 화면 테스트.

Visit page tests — the preload shared by both handlers, redirect after a
valid submission, redisplay without saving on validation errors, and the
disallowed id field.
"""

from datetime import date
from unittest.mock import AsyncMock

from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.models import Visit
from petclinic.repositories.holder_repository import holder_repository
from tests.conftest import make_holder, pet_of


def _url(holder_id: int, pet_id: int) -> str:
    return f"/holders/{holder_id}/pets/{pet_id}/visits/new"


async def _visit_count(db: AsyncSession) -> int:
    return (await db.execute(select(func.count()).select_from(Visit))).scalar() or 0


class TestVisitForm:
    """방문 등록 폼 표시 테스트."""

    async def test_init_new_visit_form(self, client: AsyncClient, george):
        """폼에 반려동물/보호자 정보와 오늘 날짜 표시."""
        max_ = pet_of(george, "Max")
        res = await client.get(_url(george.id, max_.id))
        assert res.status_code == 200
        assert "<h2>New Visit</h2>" in res.text
        assert "<td>Max</td>" in res.text
        assert "<td>George Franklin</td>" in res.text
        assert f'name="visit_date" value="{date.today().isoformat()}"' in res.text
        assert "rabies shot" in res.text

    async def test_preload_leaves_pet_visits_untouched(self, client: AsyncClient, george):
        """폼 표시만으로는 반려동물의 방문 기록이 늘지 않음."""
        max_ = pet_of(george, "Max")
        res = await client.get(_url(george.id, max_.id))
        assert res.status_code == 200
        assert [v.description for v in max_.visits] == ["rabies shot"]

    async def test_unknown_pet(self, client: AsyncClient, george):
        """존재하지 않는 반려동물은 404."""
        res = await client.get(_url(george.id, 9999))
        assert res.status_code == 404

    async def test_pet_of_another_holder(self, client: AsyncClient, db: AsyncSession, george, pet_types):
        """다른 보호자의 반려동물은 404."""
        betty = await make_holder(db, "Betty", "Davis", [("Basil", pet_types["hamster"])])
        res = await client.get(_url(george.id, pet_of(betty, "Basil").id))
        assert res.status_code == 404

    async def test_unknown_holder(self, client: AsyncClient, george):
        """존재하지 않는 보호자는 404."""
        res = await client.get(_url(9999, pet_of(george, "Max").id))
        assert res.status_code == 404


class TestVisitSubmit:
    """방문 등록 처리 테스트."""

    async def test_process_new_visit_form_success(self, client: AsyncClient, db: AsyncSession, george):
        """유효한 제출 — 보호자 상세로 리다이렉트, 방문 저장."""
        max_id = pet_of(george, "Max").id
        res = await client.post(_url(george.id, max_id), data={
            "visit_date": "2024-03-15",
            "description": "Visit Description",
        })
        assert res.status_code == 303
        assert res.headers["location"] == f"/holders/{george.id}"

        holder = await holder_repository.get_detail(db, george.id)
        visits = holder.get_pet(max_id).visits
        assert len(visits) == 2
        added = next(v for v in visits if v.description == "Visit Description")
        assert added.visit_date == date(2024, 3, 15)
        assert added.pet_id == max_id

    async def test_process_new_visit_form_default_date(self, client: AsyncClient, db: AsyncSession, george):
        """날짜를 제출하지 않으면 오늘 날짜로 저장."""
        max_id = pet_of(george, "Max").id
        res = await client.post(_url(george.id, max_id), data={"description": "check-up"})
        assert res.status_code == 303

        holder = await holder_repository.get_detail(db, george.id)
        added = next(v for v in holder.get_pet(max_id).visits if v.description == "check-up")
        assert added.visit_date == date.today()

    async def test_process_new_visit_form_has_errors(self, client: AsyncClient, db: AsyncSession, george, monkeypatch):
        """설명 누락 시 같은 폼을 오류와 함께 재표시, 저장 호출 없음."""
        save = AsyncMock()
        monkeypatch.setattr(holder_repository, "save", save)
        before = await _visit_count(db)

        res = await client.post(_url(george.id, pet_of(george, "Max").id), data={
            "visit_date": "2024-03-15",
            "description": "   ",
        })
        assert res.status_code == 200
        assert "<h2>New Visit</h2>" in res.text
        assert 'data-error-code="not_blank"' in res.text
        assert 'value="2024-03-15"' in res.text
        save.assert_not_called()
        assert await _visit_count(db) == before

    async def test_process_new_visit_form_blank_date(self, client: AsyncClient, db: AsyncSession, george):
        """빈 날짜는 필수 오류."""
        before = await _visit_count(db)
        res = await client.post(_url(george.id, pet_of(george, "Max").id), data={
            "visit_date": "",
            "description": "check-up",
        })
        assert res.status_code == 200
        assert 'data-error-code="required"' in res.text
        assert await _visit_count(db) == before

    async def test_process_new_visit_form_invalid_date(self, client: AsyncClient, george):
        """날짜 형식이 아니면 오류와 함께 입력값 유지."""
        res = await client.post(_url(george.id, pet_of(george, "Max").id), data={
            "visit_date": "not-a-date",
            "description": "check-up",
        })
        assert res.status_code == 200
        assert 'value="not-a-date"' in res.text
        assert 'class="help-inline"' in res.text

    async def test_id_is_not_bindable(self, client: AsyncClient, db: AsyncSession, george):
        """폼으로 전달된 id는 무시되고 저장소가 id를 부여."""
        max_id = pet_of(george, "Max").id
        res = await client.post(_url(george.id, max_id), data={
            "id": "999",
            "visit_date": "2024-03-15",
            "description": "with id",
        })
        assert res.status_code == 303

        added = (await db.execute(select(Visit).where(Visit.description == "with id"))).scalar_one()
        assert added.id != 999
        assert added.pet_id == max_id
