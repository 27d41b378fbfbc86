"""공통 폼 필드 타입 및 검증기.

Common form field types and validators shared by the form schemas.
Errors are raised as ``PydanticCustomError`` so each failure carries a
stable error code (e.g. ``not_blank``) next to its display message.
"""

import re
from datetime import date
from typing import Annotated, Any

from pydantic import AfterValidator, BeforeValidator
from pydantic_core import PydanticCustomError

_TEN_DIGITS = re.compile(r"^\d{10}$")


def not_blank(value: str) -> str:
    """공백 문자열 거부 — Reject empty or whitespace-only strings."""
    if not value or not value.strip():
        raise PydanticCustomError("not_blank", "must not be blank")
    return value


def ten_digits(value: str) -> str:
    """전화번호 형식 검사 — Telephone must be exactly ten digits."""
    if not _TEN_DIGITS.match(value):
        raise PydanticCustomError("telephone", "must be a 10-digit number")
    return value


def blank_to_none(value: Any) -> Any:
    # 빈 입력 필드는 None으로 취급 (An empty input box means "no value")
    if isinstance(value, str) and not value.strip():
        return None
    return value


def required(value: Any) -> Any:
    """값 필수 — Reject a missing value."""
    if value is None:
        raise PydanticCustomError("required", "is required")
    return value


# 공백 불가 문자열 — Non-blank string field
NotBlankStr = Annotated[str, AfterValidator(not_blank)]

# 숫자 10자리 전화번호 — Ten-digit telephone field
TelephoneStr = Annotated[str, AfterValidator(not_blank), AfterValidator(ten_digits)]

# 필수 날짜 (ISO 형식 문자열 입력) — Required ISO date field
RequiredDate = Annotated[date | None, BeforeValidator(blank_to_none), AfterValidator(required)]
