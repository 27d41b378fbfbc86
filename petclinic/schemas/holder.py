"""보호자 폼 스키마 정의.

Holder form schema definition.
The ``id`` field is intentionally absent: ids are assigned by the store
and never bound from a submission.
"""

from pydantic import BaseModel, ConfigDict, Field

from petclinic.schemas.common import NotBlankStr, TelephoneStr


class HolderForm(BaseModel):
    """보호자 등록/수정 폼 스키마.

    Holder create/update form schema.

    Attributes:
        first_name: 이름 (First name, not blank)
        last_name: 성 (Last name, not blank)
        address: 주소 (Address, not blank)
        city: 도시 (City, not blank)
        telephone: 전화번호 (Telephone, exactly 10 digits)
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    first_name: NotBlankStr = Field(default="", validate_default=True)
    last_name: NotBlankStr = Field(default="", validate_default=True)
    address: NotBlankStr = Field(default="", validate_default=True)
    city: NotBlankStr = Field(default="", validate_default=True)
    telephone: TelephoneStr = Field(default="", validate_default=True)
