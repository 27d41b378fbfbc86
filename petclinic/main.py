"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 오류 화면, 라우터 등록.

FastAPI application entry point — Middleware, error view and router
registration.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from petclinic.config import settings
from petclinic.middleware.axiom_logging import AxiomLoggingMiddleware
from petclinic.utils.logger import get_logger
from petclinic.views import render

logger = get_logger(__name__)

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom 요청 로깅 미들웨어 — Axiom request/response logging
app.add_middleware(AxiomLoggingMiddleware)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> HTMLResponse:
    """HTTP 오류를 오류 화면으로 렌더링합니다.

    Render HTTP errors (e.g. unknown holder or pet) through the error view,
    keeping the original status code.
    """
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.detail)
    return render("error", {"status_code": exc.status_code, "detail": exc.detail}, status_code=exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> HTMLResponse:
    """잘못된 경로/쿼리 값을 오류 화면으로 렌더링합니다.

    Render malformed path or query values (e.g. ``/holders/abc``) through
    the error view instead of a JSON body.
    """
    names = ", ".join(str(error["loc"][-1]) for error in exc.errors() if error.get("loc"))
    detail = f"Invalid value for {names}" if names else "Invalid request"
    logger.info("%s %s -> 422 %s", request.method, request.url.path, detail)
    return render("error", {"status_code": 422, "detail": detail}, status_code=422)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
async def welcome() -> HTMLResponse:
    """환영 화면 (Welcome page)."""
    return render("welcome", {})


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from petclinic.api import clinic_router  # noqa: E402

app.include_router(clinic_router)
