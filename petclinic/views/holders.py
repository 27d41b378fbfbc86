"""보호자 화면 — 검색, 목록, 상세, 등록/수정 폼.

Holder views: find form, search result list, holder details and the
create/update form.
"""

from typing import Any

from petclinic.models.holder import Holder
from petclinic.utils.pagination import Page
from petclinic.views.layout import esc, field_errors, input_field


def find_holders(model: dict[str, Any]) -> tuple[str, str]:
    result = model.get("result")
    last_name: str = model.get("last_name", "")
    css = "form-group has-error" if result is not None and result.has_field_errors("last_name") else "form-group"
    content = (
        "<h2>Find Holders</h2>"
        '<form action="/holders" method="get" id="search-holder-form">'
        f'<div class="{css}">'
        '<label for="last_name">Last name</label>'
        f'<input type="text" id="last_name" name="last_name" value="{esc(last_name)}">'
        f"{field_errors(result, 'last_name')}"
        "</div>"
        '<button type="submit">Find Holder</button>'
        "</form>"
        '<a class="btn" href="/holders/new">Add Holder</a>'
    )
    return "Find Holders", content


def holders_list(model: dict[str, Any]) -> tuple[str, str]:
    page: Page = model["page"]
    last_name: str = model.get("last_name", "")
    rows: list[str] = []
    for holder in page.items:
        pets = ", ".join(esc(p.name) for p in holder.pets)
        rows.append(
            "<tr>"
            f'<td><a href="/holders/{holder.id}">{esc(holder.first_name)} {esc(holder.last_name)}</a></td>'
            f"<td>{esc(holder.address)}</td>"
            f"<td>{esc(holder.city)}</td>"
            f"<td>{esc(holder.telephone)}</td>"
            f"<td>{pets}</td>"
            "</tr>"
        )

    links: list[str] = []
    if page.pages > 1:
        for number in range(1, page.pages + 1):
            if number == page.page:
                links.append(f"<span>{number}</span>")
            else:
                links.append(f'<a href="/holders?page={number}&amp;last_name={esc(last_name)}">{number}</a>')

    content = (
        "<h2>Holders</h2>"
        '<table id="holders">'
        "<thead><tr><th>Name</th><th>Address</th><th>City</th><th>Telephone</th><th>Pets</th></tr></thead>"
        f"<tbody>{''.join(rows)}</tbody>"
        "</table>"
        f'<div class="pagination">Pages: {"".join(links) or "<span>1</span>"} '
        f"(page {page.page} of {page.pages}, {page.total} holders)</div>"
    )
    return "Holders", content


def holder_details(model: dict[str, Any]) -> tuple[str, str]:
    holder: Holder = model["holder"]
    pets: list[str] = []
    for pet in holder.pets:
        visits = "".join(
            f"<tr><td>{esc(v.visit_date)}</td><td>{esc(v.description)}</td></tr>"
            for v in pet.visits
        )
        pets.append(
            "<tr>"
            "<td><dl>"
            f"<dt>Name</dt><dd>{esc(pet.name)}</dd>"
            f"<dt>Birth Date</dt><dd>{esc(pet.birth_date)}</dd>"
            f"<dt>Type</dt><dd>{esc(pet.type.name if pet.type else '')}</dd>"
            "</dl></td>"
            "<td><table class=\"visits\">"
            "<thead><tr><th>Visit Date</th><th>Description</th></tr></thead>"
            f"<tbody>{visits}</tbody>"
            "</table>"
            f'<a href="/holders/{holder.id}/pets/{pet.id}/edit">Edit Pet</a> '
            f'<a href="/holders/{holder.id}/pets/{pet.id}/visits/new">Add Visit</a>'
            "</td>"
            "</tr>"
        )

    content = (
        "<h2>Holder Information</h2>"
        '<table id="holder">'
        f"<tr><th>Name</th><td><b>{esc(holder.first_name)} {esc(holder.last_name)}</b></td></tr>"
        f"<tr><th>Address</th><td>{esc(holder.address)}</td></tr>"
        f"<tr><th>City</th><td>{esc(holder.city)}</td></tr>"
        f"<tr><th>Telephone</th><td>{esc(holder.telephone)}</td></tr>"
        "</table>"
        f'<a class="btn" href="/holders/{holder.id}/edit">Edit Holder</a> '
        f'<a class="btn" href="/holders/{holder.id}/pets/new">Add New Pet</a>'
        "<h2>Pets and Visits</h2>"
        f'<table id="pets">{"".join(pets)}</table>'
    )
    return "Holder Information", content


def create_or_update_holder_form(model: dict[str, Any]) -> tuple[str, str]:
    values: dict[str, str] = model["values"]
    result = model.get("result")
    holder: Holder | None = model.get("holder")
    is_new = holder is None or holder.is_new
    action = "/holders/new" if is_new else f"/holders/{holder.id}/edit"
    content = (
        f"<h2>{'New ' if is_new else ''}Holder</h2>"
        f'<form method="post" action="{action}" id="add-holder-form">'
        f"{input_field('First Name', 'first_name', values, result)}"
        f"{input_field('Last Name', 'last_name', values, result)}"
        f"{input_field('Address', 'address', values, result)}"
        f"{input_field('City', 'city', values, result)}"
        f"{input_field('Telephone', 'telephone', values, result)}"
        f"<button type=\"submit\">{'Add Holder' if is_new else 'Update Holder'}</button>"
        "</form>"
    )
    return "Holder", content
