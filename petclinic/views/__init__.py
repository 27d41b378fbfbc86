"""서버 렌더링 화면 패키지 — 화면 이름으로 HTML 페이지를 렌더링.

Server-rendered views package.
Controllers address pages by view name (e.g. ``pets/createOrUpdateVisitForm``)
and hand over the render model; ``render`` looks the view up and wraps its
content in the shared layout.
"""

from typing import Any, Callable

from fastapi import status
from fastapi.responses import HTMLResponse, RedirectResponse

from petclinic.views import holders, layout, pets

# 화면 이름 → 렌더 함수 — View name to render function
VIEWS: dict[str, Callable[[dict[str, Any]], tuple[str, str]]] = {
    "welcome": layout.welcome,
    "error": layout.error,
    "holders/findHolders": holders.find_holders,
    "holders/holdersList": holders.holders_list,
    "holders/holderDetails": holders.holder_details,
    "holders/createOrUpdateHolderForm": holders.create_or_update_holder_form,
    "pets/createOrUpdatePetForm": pets.create_or_update_pet_form,
    "pets/createOrUpdateVisitForm": pets.create_or_update_visit_form,
}


def render(view_name: str, model: dict[str, Any], status_code: int = status.HTTP_200_OK) -> HTMLResponse:
    """화면 이름과 렌더 모델로 HTML 응답을 만듭니다.

    Render the named view with the given model.

    Raises:
        KeyError: 등록되지 않은 화면 이름 (Unknown view name)
    """
    title, content = VIEWS[view_name](model)
    return HTMLResponse(layout.render_page(title, content), status_code=status_code)


def redirect(url: str) -> RedirectResponse:
    """POST 후 리다이렉트 — Redirect-after-post with 303 See Other."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)
