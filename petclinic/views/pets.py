"""반려동물 화면 — 반려동물 폼과 진료 방문 폼.

Pet views: the pet create/update form and the new-visit form.
"""

from typing import Any

from petclinic.models.holder import Holder
from petclinic.models.pet import Pet, PetType
from petclinic.views.layout import esc, input_field, select_field


def create_or_update_pet_form(model: dict[str, Any]) -> tuple[str, str]:
    holder: Holder = model["holder"]
    pet: Pet | None = model.get("pet")
    types: list[PetType] = model.get("types", [])
    values: dict[str, str] = model["values"]
    result = model.get("result")
    is_new = pet is None or pet.is_new
    action = f"/holders/{holder.id}/pets/new" if is_new else f"/holders/{holder.id}/pets/{pet.id}/edit"
    content = (
        f"<h2>{'New ' if is_new else ''}Pet</h2>"
        f'<form method="post" action="{action}" id="add-pet-form">'
        f"<p>Holder: <b>{esc(holder.first_name)} {esc(holder.last_name)}</b></p>"
        f"{input_field('Name', 'name', values, result)}"
        f"{input_field('Birth Date', 'birth_date', values, result, input_type='date')}"
        f"{select_field('Type', 'type', [t.name for t in types], values, result)}"
        f"<button type=\"submit\">{'Add Pet' if is_new else 'Update Pet'}</button>"
        "</form>"
    )
    return "Pet", content


def create_or_update_visit_form(model: dict[str, Any]) -> tuple[str, str]:
    holder: Holder = model["holder"]
    pet: Pet = model["pet"]
    values: dict[str, str] = model["values"]
    result = model.get("result")
    previous = "".join(
        f"<tr><td>{esc(v.visit_date)}</td><td>{esc(v.description)}</td></tr>"
        for v in pet.visits
    )
    content = (
        "<h2>New Visit</h2>"
        "<b>Pet</b>"
        '<table id="visit-pet">'
        "<thead><tr><th>Name</th><th>Birth Date</th><th>Type</th><th>Holder</th></tr></thead>"
        "<tr>"
        f"<td>{esc(pet.name)}</td>"
        f"<td>{esc(pet.birth_date)}</td>"
        f"<td>{esc(pet.type.name if pet.type else '')}</td>"
        f"<td>{esc(holder.first_name)} {esc(holder.last_name)}</td>"
        "</tr>"
        "</table>"
        f'<form method="post" action="/holders/{holder.id}/pets/{pet.id}/visits/new" id="visit-form">'
        f"{input_field('Date', 'visit_date', values, result, input_type='date')}"
        f"{input_field('Description', 'description', values, result)}"
        '<button type="submit">Add Visit</button>'
        "</form>"
        "<b>Previous Visits</b>"
        '<table id="previous-visits">'
        "<tr><th>Date</th><th>Description</th></tr>"
        f"{previous}"
        "</table>"
    )
    return "New Visit", content
