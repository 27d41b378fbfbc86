"""반려동물 및 진료 방문 폼 스키마 정의.

Pet and visit form schema definitions.
Checks that need the database (duplicate names, pet type lookup) are
done by the pet service after the schema validates.
"""

from pydantic import BaseModel, ConfigDict, Field

from petclinic.schemas.common import NotBlankStr, RequiredDate


class PetForm(BaseModel):
    """반려동물 등록/수정 폼 스키마.

    Pet create/update form schema.

    Attributes:
        name: 이름 (Pet name, not blank)
        birth_date: 생년월일 (Birth date, ISO format, required)
        type: 동물 종류 이름 (Pet type name, e.g. "dog")
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    name: NotBlankStr = Field(default="", validate_default=True)
    birth_date: RequiredDate = Field(default=None, validate_default=True)
    type: NotBlankStr = Field(default="", validate_default=True)


class VisitForm(BaseModel):
    """진료 방문 등록 폼 스키마.

    Visit creation form schema.

    Attributes:
        visit_date: 방문 일자 (Visit date, ISO format, required)
        description: 진료 내용 (Free-text description, not blank)
    """

    model_config = ConfigDict(extra="ignore", str_strip_whitespace=True)

    visit_date: RequiredDate = Field(default=None, validate_default=True)
    description: NotBlankStr = Field(default="", validate_default=True)
