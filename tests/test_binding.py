"""폼 바인딩 테스트.

Form binding tests — merge over preloaded values, disallowed fields and
error codes.
"""

from datetime import date

from petclinic.schemas.holder import HolderForm
from petclinic.schemas.pet import PetForm, VisitForm
from petclinic.utils.binding import BindingResult, bind_form, to_form_value

STORED = {
    "first_name": "George",
    "last_name": "Franklin",
    "address": "110 W. Liberty St.",
    "city": "Madison",
    "telephone": "6085551023",
}


class TestBindForm:
    """bind_form 동작."""

    def test_submitted_values_override_initial(self):
        bound = bind_form(HolderForm, "holder", {"city": "Monona"}, initial=STORED)
        assert not bound.result.has_errors()
        assert bound.data is not None
        assert bound.data.city == "Monona"
        assert bound.data.first_name == "George"

    def test_id_is_dropped(self):
        bound = bind_form(HolderForm, "holder", {**STORED, "id": "42"})
        assert "id" not in bound.values
        assert bound.data is not None
        assert not hasattr(bound.data, "id")

    def test_disallowed_fields_are_configurable(self):
        bound = bind_form(HolderForm, "holder", {"city": "Monona"}, initial=STORED,
                          disallowed_fields=frozenset({"id", "city"}))
        assert "city" not in bound.values
        assert bound.result.field_error_codes("city") == ["not_blank"]

    def test_unknown_fields_are_ignored(self):
        bound = bind_form(HolderForm, "holder", {**STORED, "owner": "x"})
        assert "owner" not in bound.values
        assert not bound.result.has_errors()

    def test_error_codes(self):
        bound = bind_form(HolderForm, "holder", {**STORED, "first_name": " ", "telephone": "12345"})
        assert bound.data is None
        assert bound.result.object_name == "holder"
        assert bound.result.field_error_codes("first_name") == ["not_blank"]
        assert bound.result.field_error_codes("telephone") == ["telephone"]
        assert bound.result.error_count == 2
        assert bound.values["telephone"] == "12345"

    def test_dates(self):
        bound = bind_form(PetForm, "pet", {"name": "Leo", "birth_date": "2020-02-29", "type": "cat"})
        assert bound.data is not None
        assert bound.data.birth_date == date(2020, 2, 29)

        missing = bind_form(VisitForm, "visit", {"description": "check-up"})
        assert missing.result.field_error_codes("visit_date") == ["required"]

    def test_initial_date_is_rendered_iso(self):
        bound = bind_form(VisitForm, "visit", {"description": "x"}, initial={"visit_date": date(2024, 3, 15)})
        assert bound.values["visit_date"] == "2024-03-15"
        assert bound.data is not None
        assert bound.data.visit_date == date(2024, 3, 15)


class TestBindingResult:
    def test_reject_value(self):
        result = BindingResult("pet")
        assert not result.has_errors()
        result.reject_value("name", "duplicate", "already exists")
        assert result.has_errors()
        assert result.has_field_errors("name")
        assert not result.has_field_errors("type")
        assert result.field_errors("name")[0].message == "already exists"


def test_to_form_value():
    assert to_form_value(None) == ""
    assert to_form_value(date(2024, 1, 5)) == "2024-01-05"
    assert to_form_value(3) == "3"
