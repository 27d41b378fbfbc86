"""도메인 모델 테스트 — Holder/Pet/Visit 연산 (DB 없이).

Domain model tests on transient objects, no database involved.
"""

from datetime import date

import pytest

from petclinic.models import Holder, Pet, PetType, Visit


def _holder() -> Holder:
    return Holder(first_name="George", last_name="Franklin", address="a", city="b", telephone="6085551023")


def _saved_pet(pet_id: int, name: str) -> Pet:
    return Pet(id=pet_id, name=name, birth_date=date(2020, 1, 1), type=PetType(name="dog"))


class TestHolderPets:
    """보호자의 반려동물 목록 연산."""

    def test_add_pet_ignores_duplicates(self):
        holder = _holder()
        pet = _saved_pet(1, "Max")
        holder.add_pet(pet)
        holder.add_pet(pet)
        assert holder.pets == [pet]

    def test_get_pet_by_id(self):
        holder = _holder()
        max_ = _saved_pet(1, "Max")
        holder.add_pet(max_)
        assert holder.get_pet(1) is max_
        assert holder.get_pet(2) is None
        assert holder.get_pet(None) is None

    def test_get_pet_by_name_is_case_insensitive(self):
        holder = _holder()
        max_ = _saved_pet(1, "Max")
        holder.add_pet(max_)
        assert holder.get_pet_by_name("mAX") is max_
        assert holder.get_pet_by_name("Leo") is None

    def test_get_pet_by_name_ignore_new(self):
        """ignore_new=True이면 저장 전 반려동물은 제외."""
        holder = _holder()
        unsaved = Pet(name="Leo", birth_date=date(2020, 1, 1))
        holder.add_pet(unsaved)
        assert unsaved.is_new
        assert holder.get_pet_by_name("Leo") is unsaved
        assert holder.get_pet_by_name("Leo", ignore_new=True) is None


class TestHolderVisits:
    """보호자를 통한 진료 방문 추가."""

    def test_add_visit_to_pet(self):
        holder = _holder()
        max_ = _saved_pet(7, "Max")
        holder.add_pet(max_)
        visit = Visit(description="rabies shot")
        holder.add_visit(7, visit)
        assert max_.visits == [visit]

    def test_add_visit_without_pet_id(self):
        holder = _holder()
        with pytest.raises(ValueError, match="must not be null"):
            holder.add_visit(None, Visit(description="x"))

    def test_add_visit_unknown_pet(self):
        holder = _holder()
        holder.add_pet(_saved_pet(7, "Max"))
        with pytest.raises(ValueError, match="Invalid Pet identifier"):
            holder.add_visit(8, Visit(description="x"))


class TestVisit:
    def test_visit_date_defaults_to_today(self):
        visit = Visit()
        assert visit.visit_date == date.today()
        assert visit.is_new

    def test_visit_date_can_be_given(self):
        assert Visit(visit_date=date(2024, 1, 2)).visit_date == date(2024, 1, 2)
