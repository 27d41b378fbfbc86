"""커스텀 HTTP 예외 클래스 모듈.

Custom HTTP exception classes module.
Provides pre-configured HTTPException subclasses so call sites do not
have to spell out status codes. They are rendered by the error view
registered in ``petclinic.main``.

Usage:
    from petclinic.utils.exceptions import NotFoundError
    raise NotFoundError("Holder not found")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 보호자/반려동물을 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a holder or pet referenced by the URL does not exist.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when a request cannot be processed at all (as opposed to
    field-level validation failures, which redisplay the form).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)
