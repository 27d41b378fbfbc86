"""FastAPI 의존성 주입 모듈 — 폼 데이터 및 모델 속성 미리 로드.

FastAPI dependency injection module — form data and model-attribute
preloading.

Preload Flow:
    1. 경로 변수(holder_id, pet_id)를 추출 (Path variables are extracted)
    2. 레포지토리에서 보호자를 새로 조회 (The holder is freshly loaded)
    3. 보호자 안에서 반려동물을 찾음 (The pet is located within the holder)
    4. 결과를 렌더 모델로 반환 — GET/POST 핸들러가 공유
       (The result is returned as the render model shared by GET and POST)
"""

from typing import Annotated, Any

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.database import get_db
from petclinic.models.holder import Holder
from petclinic.models.pet import Pet, PetType, Visit
from petclinic.services.holder_service import holder_service
from petclinic.services.pet_service import pet_service


async def get_form_data(request: Request) -> dict[str, str]:
    """제출된 폼 필드를 문자열 딕셔너리로 반환합니다.

    Return the submitted form fields as a flat string dict (file uploads
    are ignored).
    """
    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


async def load_holder(
    holder_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Holder:
    """경로의 보호자를 조회합니다 — 모델 속성 "holder".

    Load the holder named by the path (model attribute "holder").

    Raises:
        NotFoundError: 보호자가 없을 때 (Holder not found)
    """
    return await holder_service.get_holder(db, holder_id)


async def load_pet_types(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[PetType]:
    """동물 종류 목록 — 모델 속성 "types" (Model attribute "types")."""
    return await pet_service.list_pet_types(db)


async def load_pet_with_visit(
    pet_id: int,
    holder: Annotated[Holder, Depends(load_holder)],
) -> dict[str, Any]:
    """진료 방문 폼의 렌더 모델을 미리 구성합니다.

    Preload the render model for the visit form: the holder, the pet
    found within it, and a new blank visit for that pet. Runs before both
    the GET and POST handlers so the data is always fresh.

    The pending visit is attached to the pet only once the submission
    validates, so a blank visit never reaches the session.

    Raises:
        NotFoundError: 보호자 또는 반려동물이 없을 때 (Holder or pet not found)
    """
    pet: Pet = pet_service.get_pet(holder, pet_id)
    return {"holder": holder, "pet": pet, "visit": Visit()}
