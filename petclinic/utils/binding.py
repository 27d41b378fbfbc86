"""폼 바인딩 유틸리티 모듈.

Form binding utility module.
Binds submitted form fields onto a Pydantic form schema, on top of the
values preloaded from the record being edited, and collects field-level
errors into a ``BindingResult`` so the form view can be redisplayed.

Disallowed fields (``id`` by default) are dropped before binding, so a
client can never overwrite a storage-assigned identifier.

Usage:
    bound = bind_form(VisitForm, "visit", submitted, initial=values)
    if bound.result.has_errors():
        ...  # redisplay the form with bound.values and bound.result
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

FormType = TypeVar("FormType", bound=BaseModel)

# 바인딩 금지 필드 — Fields never bound from a submission
DEFAULT_DISALLOWED_FIELDS: frozenset[str] = frozenset({"id"})


@dataclass(frozen=True)
class FieldError:
    """단일 필드 오류 (One field error: field name, error code, message)."""

    field: str
    code: str
    message: str


class BindingResult:
    """폼 객체 하나에 대한 필드 오류 모음.

    Field errors collected for one bound form object.

    Attributes:
        object_name: 모델 속성 이름 (Model attribute name, e.g. "holder")
    """

    def __init__(self, object_name: str) -> None:
        self.object_name: str = object_name
        self._errors: dict[str, list[FieldError]] = {}

    def reject_value(self, field_name: str, code: str, message: str) -> None:
        """필드 오류를 등록합니다 (Register an error against a field)."""
        self._errors.setdefault(field_name, []).append(FieldError(field_name, code, message))

    def has_errors(self) -> bool:
        return bool(self._errors)

    def has_field_errors(self, field_name: str) -> bool:
        return field_name in self._errors

    def field_errors(self, field_name: str) -> list[FieldError]:
        return list(self._errors.get(field_name, []))

    def field_error_codes(self, field_name: str) -> list[str]:
        return [e.code for e in self._errors.get(field_name, [])]

    @property
    def error_count(self) -> int:
        return sum(len(errors) for errors in self._errors.values())


@dataclass
class BoundForm(Generic[FormType]):
    """바인딩 결과 — 재표시용 원본 값, 검증된 데이터, 오류.

    Result of binding a submission.

    Attributes:
        values: 폼 재표시용 문자열 값 (Raw string values for redisplay)
        data: 검증된 스키마 인스턴스, 실패 시 None (Validated schema, None on failure)
        result: 필드 오류 모음 (Collected field errors)
    """

    values: dict[str, str]
    data: FormType | None
    result: BindingResult = field(default_factory=lambda: BindingResult("form"))


def to_form_value(value: Any) -> str:
    """모델 값을 폼 입력 문자열로 변환합니다 (Render a model value as an input string)."""
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def bind_form(
    schema: type[FormType],
    object_name: str,
    submitted: Mapping[str, Any],
    initial: Mapping[str, Any] | None = None,
    disallowed_fields: frozenset[str] = DEFAULT_DISALLOWED_FIELDS,
) -> BoundForm[FormType]:
    """제출된 폼 필드를 스키마에 바인딩하고 검증합니다.

    Bind submitted form fields onto ``schema`` and validate them.
    Submitted fields override ``initial``; fields the schema does not
    declare, and ``disallowed_fields``, are ignored.

    Args:
        schema: Pydantic 폼 스키마 클래스 (Form schema class)
        object_name: 모델 속성 이름 (Model attribute name for the result)
        submitted: 제출된 폼 데이터 (Submitted form data)
        initial: 미리 로드된 값 (Values preloaded from the edited record)
        disallowed_fields: 바인딩 금지 필드 (Fields never bound)

    Returns:
        BoundForm: 재표시 값, 검증된 데이터, 오류 (Values, validated data, errors)
    """
    allowed = [name for name in schema.model_fields if name not in disallowed_fields]

    values: dict[str, str] = {name: "" for name in allowed}
    if initial:
        for name in allowed:
            if name in initial:
                values[name] = to_form_value(initial[name])
    for name in allowed:
        if name in submitted:
            values[name] = to_form_value(submitted[name])

    result = BindingResult(object_name)
    try:
        data: FormType | None = schema.model_validate(values)
    except ValidationError as exc:
        data = None
        for error in exc.errors():
            loc = error.get("loc") or ("",)
            result.reject_value(str(loc[0]), error["type"], error["msg"])

    return BoundForm(values=values, data=data, result=result)
