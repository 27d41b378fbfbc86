"""반려동물 라우터 — 보호자의 반려동물 등록/수정 엔드포인트.

Pet Router — endpoints to add and edit a holder's pets.
Every handler gets the holder and the pet type list preloaded.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.api.deps import get_form_data, load_holder, load_pet_types
from petclinic.database import get_db
from petclinic.models.holder import Holder
from petclinic.models.pet import Pet, PetType
from petclinic.schemas.pet import PetForm
from petclinic.services.pet_service import pet_service
from petclinic.utils.binding import bind_form
from petclinic.views import redirect, render

VIEWS_PETS_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm"

router: APIRouter = APIRouter()


@router.get("/holders/{holder_id}/pets/new", response_class=HTMLResponse)
async def init_creation_form(
    holder: Annotated[Holder, Depends(load_holder)],
    types: Annotated[list[PetType], Depends(load_pet_types)],
) -> HTMLResponse:
    """신규 반려동물 폼 (Show the blank pet form)."""
    return render(
        VIEWS_PETS_CREATE_OR_UPDATE_FORM,
        {"holder": holder, "types": types, "values": pet_service.form_values()},
    )


@router.post("/holders/{holder_id}/pets/new")
async def process_creation_form(
    holder: Annotated[Holder, Depends(load_holder)],
    types: Annotated[list[PetType], Depends(load_pet_types)],
    form: Annotated[dict[str, str], Depends(get_form_data)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """반려동물을 등록합니다. 검증 실패 시 폼을 다시 표시.

    Add a pet to the holder, or redisplay the form with field errors.
    """
    bound = bind_form(PetForm, "pet", form)
    pet_type = await pet_service.check_pet(db, holder, bound)
    if bound.result.has_errors() or bound.data is None or pet_type is None:
        return render(
            VIEWS_PETS_CREATE_OR_UPDATE_FORM,
            {"holder": holder, "types": types, "values": bound.values, "result": bound.result},
        )

    await pet_service.add_pet(db, holder, bound.data, pet_type)
    await db.commit()
    return redirect(f"/holders/{holder.id}")


@router.get("/holders/{holder_id}/pets/{pet_id}/edit", response_class=HTMLResponse)
async def init_update_form(
    pet_id: int,
    holder: Annotated[Holder, Depends(load_holder)],
    types: Annotated[list[PetType], Depends(load_pet_types)],
) -> HTMLResponse:
    """반려동물 수정 폼 (Show the edit form preloaded from the stored pet)."""
    pet: Pet = pet_service.get_pet(holder, pet_id)
    return render(
        VIEWS_PETS_CREATE_OR_UPDATE_FORM,
        {"holder": holder, "pet": pet, "types": types, "values": pet_service.form_values(pet)},
    )


@router.post("/holders/{holder_id}/pets/{pet_id}/edit")
async def process_update_form(
    pet_id: int,
    holder: Annotated[Holder, Depends(load_holder)],
    types: Annotated[list[PetType], Depends(load_pet_types)],
    form: Annotated[dict[str, str], Depends(get_form_data)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """반려동물 정보를 수정합니다 (Update the pet, or redisplay the form)."""
    pet: Pet = pet_service.get_pet(holder, pet_id)
    bound = bind_form(PetForm, "pet", form, initial=pet_service.form_values(pet))
    pet_type = await pet_service.check_pet(db, holder, bound, pet_id=pet.id)
    if bound.result.has_errors() or bound.data is None or pet_type is None:
        return render(
            VIEWS_PETS_CREATE_OR_UPDATE_FORM,
            {"holder": holder, "pet": pet, "types": types, "values": bound.values, "result": bound.result},
        )

    await pet_service.update_pet(db, holder, pet, bound.data, pet_type)
    await db.commit()
    return redirect(f"/holders/{holder.id}")
