"""진료 방문 라우터 — 반려동물 방문 기록 추가 엔드포인트.

Visit Router — endpoints to record a new visit for a holder's pet.
``load_pet_with_visit`` runs before both handlers and provides the
holder, the pet and the pending visit.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.api.deps import get_form_data, load_pet_with_visit
from petclinic.database import get_db
from petclinic.schemas.pet import VisitForm
from petclinic.services.visit_service import visit_service
from petclinic.utils.binding import bind_form, to_form_value
from petclinic.views import redirect, render

VIEWS_VISIT_FORM = "pets/createOrUpdateVisitForm"

router: APIRouter = APIRouter()


def _visit_values(model: dict[str, Any]) -> dict[str, Any]:
    visit = model["visit"]
    return {"visit_date": visit.visit_date, "description": visit.description}


@router.get("/holders/{holder_id}/pets/{pet_id}/visits/new", response_class=HTMLResponse)
async def init_new_visit_form(
    model: Annotated[dict[str, Any], Depends(load_pet_with_visit)],
) -> HTMLResponse:
    """진료 방문 등록 폼 (Show the new-visit form)."""
    values = {name: to_form_value(value) for name, value in _visit_values(model).items()}
    return render(VIEWS_VISIT_FORM, {**model, "values": values})


@router.post("/holders/{holder_id}/pets/{pet_id}/visits/new")
async def process_new_visit_form(
    pet_id: int,
    model: Annotated[dict[str, Any], Depends(load_pet_with_visit)],
    form: Annotated[dict[str, str], Depends(get_form_data)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """진료 방문을 저장합니다. 검증 실패 시 같은 폼을 오류와 함께 다시 표시.

    Bind and validate the visit; on success add it to the pet through the
    holder, save the holder and redirect to the holder page. On failure
    the same form is shown again with field errors and nothing is saved.
    """
    bound = bind_form(VisitForm, "visit", form, initial=_visit_values(model))
    if bound.result.has_errors() or bound.data is None:
        return render(VIEWS_VISIT_FORM, {**model, "values": bound.values, "result": bound.result})

    holder = model["holder"]
    await visit_service.add_visit(db, holder, pet_id, model["visit"], bound.data)
    await db.commit()
    return redirect(f"/holders/{holder.id}")
