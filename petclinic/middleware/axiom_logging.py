"""Axiom 요청 로깅 미들웨어.

Axiom request logging middleware.
Captures request/response data and sends structured logs to Axiom.
Logs: endpoint, method, submitted form/query data, status code,
redirect target and error reason. Sensitive fields are masked.
"""

import json
import re
import time
from typing import Any
from urllib.parse import parse_qsl

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from axiom_py import Client as AxiomClient

from petclinic.config import settings
from petclinic.utils.logger import get_logger

logger = get_logger(__name__)

# 마스킹 대상 필드 패턴 — Fields to mask in logged data
_SENSITIVE_KEYS = re.compile(
    r"(password|passwd|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 제외 경로 — Paths excluded from logging
_SKIP_PATHS = {"/health", "/docs", "/redoc", "/openapi.json"}

# 오류 본문에서 추출하는 상세 메시지 — Detail paragraph of the error view
_ERROR_DETAIL = re.compile(r'<p class="error-detail">(.*?)</p>', re.DOTALL)


def _mask_dict(data: Any, depth: int = 0) -> Any:
    """민감 필드 자동 마스킹 — Recursively mask sensitive fields in dicts/lists."""
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            k: "***" if _SENSITIVE_KEYS.search(k) else _mask_dict(v, depth + 1)
            for k, v in data.items()
        }
    if isinstance(data, list):
        return [_mask_dict(item, depth + 1) for item in data[:20]]
    return _truncate(data)


def _truncate(value: Any, max_len: int = 2000) -> Any:
    """로그 크기 제한 — Truncate large values to prevent oversized logs."""
    if isinstance(value, str) and len(value) > max_len:
        return value[:max_len] + "...(truncated)"
    return value


def _parse_body(content_type: str, body: bytes) -> Any:
    """요청 본문 파싱 — Decode a form or JSON request body for logging."""
    if content_type.startswith("application/x-www-form-urlencoded"):
        return dict(parse_qsl(body.decode("utf-8"), keep_blank_values=True))
    if content_type.startswith("application/json"):
        return json.loads(body)
    return "(unsupported body)"


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """모든 요청/응답을 Axiom에 로깅하는 미들웨어.

    Middleware that logs every request and response to Axiom.
    Passes requests straight through when Axiom is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 제외 경로 스킵 — Skip excluded paths
        if request.url.path in _SKIP_PATHS:
            return await call_next(request)

        # Axiom 미설정시 패스스루 — Pass through if Axiom not configured
        if not self._client:
            return await call_next(request)

        start_time = time.time()

        method = request.method
        path = request.url.path
        query_params = dict(request.query_params) if request.query_params else None

        # 폼 제출 본문 읽기 — Read the submitted body (only for methods with body)
        request_body: Any = None
        if method in ("POST", "PUT", "PATCH"):
            try:
                body_bytes = await request.body()
                if body_bytes:
                    request_body = _mask_dict(_parse_body(request.headers.get("content-type", ""), body_bytes))
            except (json.JSONDecodeError, UnicodeDecodeError):
                request_body = "(undecodable body)"

        error_detail: str | None = None
        location: str | None = None
        status_code: int = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
            location = response.headers.get("location")

            # 오류 응답시 본문에서 사유 추출 — Extract error detail from error pages
            if status_code >= 400:
                resp_body = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")

                text = resp_body.decode("utf-8", errors="replace")
                match = _ERROR_DETAIL.search(text)
                error_detail = (match.group(1) if match else text)[:500]

                # 소비한 본문을 다시 응답으로 반환 — Re-wrap consumed body
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            error_detail = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            duration_ms = round((time.time() - start_time) * 1000, 2)

            log_event: dict[str, Any] = {
                "method": method,
                "path": path,
                "status_code": status_code,
                "duration_ms": duration_ms,
            }
            if query_params:
                log_event["query_params"] = _mask_dict(query_params)
            if request_body is not None:
                log_event["request_body"] = request_body
            if location:
                log_event["redirect"] = location
            if error_detail:
                log_event["error"] = error_detail

            # 로깅 실패가 요청 처리에 영향주지 않도록 경고만 남김
            # A failed ingest is logged locally and never breaks the request
            try:
                self._client.ingest_events(self._dataset, [log_event])
            except Exception as exc:
                logger.warning("Axiom ingest failed: %s", exc)

        return response
