"""API 라우터 패키지 — 모든 화면 엔드포인트 통합.

API Router package — Aggregates every page endpoint into a single router
for inclusion in the FastAPI application.

Included routers:
    - holders: 보호자 등록/검색/상세/수정 (/holders...)
    - pets: 반려동물 등록/수정 (/holders/{holder_id}/pets...)
    - visits: 진료 방문 등록 (/holders/{holder_id}/pets/{pet_id}/visits/new)
"""

from fastapi import APIRouter

from petclinic.api.holders import router as holders_router
from petclinic.api.pets import router as pets_router
from petclinic.api.visits import router as visits_router

clinic_router: APIRouter = APIRouter()

# 반려동물/방문 경로는 /holders/{holder_id} 하위에 중첩 (nested under holders)
clinic_router.include_router(pets_router, tags=["Pets"])
clinic_router.include_router(visits_router, tags=["Visits"])
clinic_router.include_router(holders_router, prefix="/holders", tags=["Holders"])
