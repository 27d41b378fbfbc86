"""보호자 라우터 — 보호자 등록/검색/상세/수정 엔드포인트.

Holder Router — endpoints to register, find, show and edit holders.
Static paths (/new, /find) are declared before /{holder_id}.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse, Response
from sqlalchemy.ext.asyncio import AsyncSession

from petclinic.api.deps import get_form_data, load_holder
from petclinic.database import get_db
from petclinic.models.holder import Holder
from petclinic.schemas.holder import HolderForm
from petclinic.services.holder_service import holder_service
from petclinic.utils.binding import BindingResult, bind_form
from petclinic.views import redirect, render

VIEWS_HOLDER_CREATE_OR_UPDATE_FORM = "holders/createOrUpdateHolderForm"

router: APIRouter = APIRouter()


@router.get("/new", response_class=HTMLResponse)
async def init_creation_form() -> HTMLResponse:
    """신규 보호자 등록 폼 (Show the blank holder form)."""
    return render(VIEWS_HOLDER_CREATE_OR_UPDATE_FORM, {"values": holder_service.form_values()})


@router.post("/new")
async def process_creation_form(
    form: Annotated[dict[str, str], Depends(get_form_data)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """보호자를 등록합니다. 검증 실패 시 폼을 다시 표시.

    Register a holder, or redisplay the form with field errors.
    """
    bound = bind_form(HolderForm, "holder", form)
    if bound.result.has_errors() or bound.data is None:
        return render(VIEWS_HOLDER_CREATE_OR_UPDATE_FORM, {"values": bound.values, "result": bound.result})

    holder: Holder = await holder_service.create_holder(db, bound.data)
    await db.commit()
    return redirect(f"/holders/{holder.id}")


@router.get("/find", response_class=HTMLResponse)
async def init_find_form() -> HTMLResponse:
    """보호자 검색 폼 (Show the find form)."""
    return render("holders/findHolders", {"last_name": ""})


@router.get("")
async def process_find_form(
    db: Annotated[AsyncSession, Depends(get_db)],
    last_name: str = "",
    page: int = 1,
) -> Response:
    """성 접두어로 보호자를 검색합니다.

    Search holders by last-name prefix:
    no match redisplays the find form, one match redirects to the holder,
    several matches show the paginated list.
    """
    result_page = await holder_service.find_holders(db, last_name, page)
    if result_page.is_empty:
        result = BindingResult("holder")
        result.reject_value("last_name", "not_found", "has not been found")
        return render("holders/findHolders", {"last_name": last_name, "result": result})

    if result_page.total == 1 and len(result_page.items) == 1:
        return redirect(f"/holders/{result_page.items[0].id}")

    return render("holders/holdersList", {"page": result_page, "last_name": last_name})


@router.get("/{holder_id}/edit", response_class=HTMLResponse)
async def init_update_holder_form(
    holder: Annotated[Holder, Depends(load_holder)],
) -> HTMLResponse:
    """보호자 수정 폼 (Show the edit form preloaded from the stored holder)."""
    return render(
        VIEWS_HOLDER_CREATE_OR_UPDATE_FORM,
        {"holder": holder, "values": holder_service.form_values(holder)},
    )


@router.post("/{holder_id}/edit")
async def process_update_holder_form(
    holder: Annotated[Holder, Depends(load_holder)],
    form: Annotated[dict[str, str], Depends(get_form_data)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """보호자 정보를 수정합니다. 제출되지 않은 필드는 저장된 값 유지.

    Update the holder; fields missing from the submission keep their
    stored values.
    """
    bound = bind_form(HolderForm, "holder", form, initial=holder_service.form_values(holder))
    if bound.result.has_errors() or bound.data is None:
        return render(
            VIEWS_HOLDER_CREATE_OR_UPDATE_FORM,
            {"holder": holder, "values": bound.values, "result": bound.result},
        )

    await holder_service.update_holder(db, holder, bound.data)
    await db.commit()
    return redirect(f"/holders/{holder.id}")


@router.get("/{holder_id}", response_class=HTMLResponse)
async def show_holder(
    holder: Annotated[Holder, Depends(load_holder)],
) -> HTMLResponse:
    """보호자 상세 — 반려동물과 방문 기록 포함 (Holder with pets and visits)."""
    return render("holders/holderDetails", {"holder": holder})
