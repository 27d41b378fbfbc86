"""반려동물 화면 테스트.

Pet page tests — add and edit a holder's pets.
Covers required fields, duplicate names, unknown types and future birth dates.
"""

from datetime import date, timedelta

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.repositories.holder_repository import holder_repository
from tests.conftest import pet_of


def _url(holder_id: int) -> str:
    return f"/holders/{holder_id}/pets"


class TestPetCreate:
    """반려동물 등록 테스트."""

    async def test_init_creation_form(self, client: AsyncClient, george):
        """등록 폼에 동물 종류 목록 표시 (이름순)."""
        res = await client.get(f"{_url(george.id)}/new")
        assert res.status_code == 200
        assert "<h2>New Pet</h2>" in res.text
        assert "<b>George Franklin</b>" in res.text
        cat, dog, hamster = (res.text.index(f'<option value="{n}"') for n in ("cat", "dog", "hamster"))
        assert cat < dog < hamster

    async def test_process_creation_form_success(self, client: AsyncClient, db: AsyncSession, george):
        """등록 성공 시 보호자 상세로 리다이렉트, 반려동물 저장."""
        res = await client.post(f"{_url(george.id)}/new", data={
            "name": "Betty",
            "birth_date": "2015-02-12",
            "type": "cat",
        })
        assert res.status_code == 303
        assert res.headers["location"] == f"/holders/{george.id}"

        holder = await holder_repository.get_detail(db, george.id)
        betty = pet_of(holder, "Betty")
        assert betty.birth_date == date(2015, 2, 12)
        assert betty.type.name == "cat"
        assert sorted(p.name for p in holder.pets) == ["Betty", "Max"]

    async def test_process_creation_form_missing_fields(self, client: AsyncClient, db: AsyncSession, george):
        """이름/생일 누락 시 폼 재표시."""
        res = await client.post(f"{_url(george.id)}/new", data={"type": "cat"})
        assert res.status_code == 200
        assert 'data-error-code="not_blank"' in res.text
        assert 'data-error-code="required"' in res.text

        holder = await holder_repository.get_detail(db, george.id)
        assert len(holder.pets) == 1

    async def test_process_creation_form_duplicate_name(self, client: AsyncClient, george):
        """같은 보호자 내 이름 중복(대소문자 무시) 시 오류."""
        res = await client.post(f"{_url(george.id)}/new", data={
            "name": "max",
            "birth_date": "2015-02-12",
            "type": "dog",
        })
        assert res.status_code == 200
        assert 'data-error-code="duplicate"' in res.text
        assert "already exists" in res.text

    async def test_process_creation_form_unknown_type(self, client: AsyncClient, george):
        """존재하지 않는 동물 종류는 오류."""
        res = await client.post(f"{_url(george.id)}/new", data={
            "name": "Rex",
            "birth_date": "2015-02-12",
            "type": "dragon",
        })
        assert res.status_code == 200
        assert 'data-error-code="type_mismatch"' in res.text
        assert "type not found" in res.text

    async def test_process_creation_form_future_birth_date(self, client: AsyncClient, george):
        """미래 생일은 오류."""
        tomorrow = (date.today() + timedelta(days=1)).isoformat()
        res = await client.post(f"{_url(george.id)}/new", data={
            "name": "Rex",
            "birth_date": tomorrow,
            "type": "dog",
        })
        assert res.status_code == 200
        assert "invalid date" in res.text

    async def test_creation_form_unknown_holder(self, client: AsyncClient, pet_types):
        """존재하지 않는 보호자 시 404."""
        res = await client.get(f"{_url(9999)}/new")
        assert res.status_code == 404


class TestPetUpdate:
    """반려동물 수정 테스트."""

    async def test_init_update_form(self, client: AsyncClient, george):
        """수정 폼에 저장된 값 표시."""
        max_ = pet_of(george, "Max")
        res = await client.get(f"{_url(george.id)}/{max_.id}/edit")
        assert res.status_code == 200
        assert "<h2>Pet</h2>" in res.text
        assert 'value="Max"' in res.text
        assert f'value="{date.today().isoformat()}"' in res.text
        assert '<option value="dog" selected>' in res.text

    async def test_process_update_form_success(self, client: AsyncClient, db: AsyncSession, george):
        """수정 성공 — 같은 이름 유지는 중복이 아님."""
        max_id = pet_of(george, "Max").id
        res = await client.post(f"{_url(george.id)}/{max_id}/edit", data={
            "name": "Max",
            "birth_date": "2014-05-01",
            "type": "cat",
        })
        assert res.status_code == 303
        assert res.headers["location"] == f"/holders/{george.id}"

        holder = await holder_repository.get_detail(db, george.id)
        max_ = holder.get_pet(max_id)
        assert max_.birth_date == date(2014, 5, 1)
        assert max_.type.name == "cat"
        assert len(max_.visits) == 1

    async def test_process_update_form_duplicate_name(self, client: AsyncClient, db: AsyncSession, george, pet_types):
        """다른 반려동물의 이름으로 변경 시 오류."""
        await client.post(f"{_url(george.id)}/new", data={
            "name": "Leo",
            "birth_date": "2016-03-03",
            "type": "cat",
        })
        max_id = pet_of(george, "Max").id
        res = await client.post(f"{_url(george.id)}/{max_id}/edit", data={"name": "Leo"})
        assert res.status_code == 200
        assert 'data-error-code="duplicate"' in res.text

        holder = await holder_repository.get_detail(db, george.id)
        assert holder.get_pet(max_id).name == "Max"

    async def test_update_unknown_pet(self, client: AsyncClient, george):
        """보호자에 속하지 않은 반려동물 수정 시 404."""
        res = await client.get(f"{_url(george.id)}/9999/edit")
        assert res.status_code == 404
