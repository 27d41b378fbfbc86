"""공통 HTML 레이아웃 및 폼 헬퍼.

Shared HTML layout and form helpers used by every view.
Pages are plain template strings with ``{{NAME}}`` placeholders; every
dynamic value goes through ``esc`` before it is substituted.
"""

import html
from typing import Any, Iterable

from petclinic.config import settings
from petclinic.utils.binding import BindingResult, to_form_value

LAYOUT_HTML = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{APP_NAME}} :: {{TITLE}}</title>
<style>
body{font-family:system-ui,sans-serif;background:#f4f4f4;color:#222;margin:0}
nav{background:#34302d;padding:12px 24px}
nav a{color:#f1f1f1;margin-right:18px;text-decoration:none;font-weight:bold}
nav a:hover{color:#6db33f}
main{max-width:880px;margin:24px auto;background:#fff;border-radius:8px;padding:24px 32px}
table{border-collapse:collapse;width:100%;margin-bottom:16px}
th,td{text-align:left;padding:6px 8px;border-bottom:1px solid #ddd;vertical-align:top}
label{display:block;font-size:13px;color:#555;margin:10px 0 4px}
input,select{width:100%;padding:8px;border:1px solid #bbb;border-radius:4px;box-sizing:border-box}
.has-error input,.has-error select{border-color:#c0392b}
.help-inline{color:#c0392b;font-size:12px}
button,.btn{display:inline-block;margin-top:16px;padding:8px 16px;border:none;border-radius:4px;background:#6db33f;color:#fff;text-decoration:none;cursor:pointer}
.pagination a,.pagination span{margin-right:6px}
</style>
</head>
<body>
<nav>
<a href="/">Home</a>
<a href="/holders/find">Find holders</a>
</nav>
<main>
{{CONTENT}}
</main>
</body>
</html>"""


def esc(value: Any) -> str:
    """HTML 이스케이프 — Escape any value for HTML output."""
    return html.escape(to_form_value(value), quote=True)


def render_page(title: str, content: str) -> str:
    """레이아웃에 본문을 채워 넣습니다 (Wrap content in the page layout)."""
    return (
        LAYOUT_HTML.replace("{{APP_NAME}}", esc(settings.APP_NAME))
        .replace("{{TITLE}}", esc(title))
        .replace("{{CONTENT}}", content)
    )


def field_errors(result: BindingResult | None, name: str) -> str:
    if result is None or not result.has_field_errors(name):
        return ""
    return "".join(
        f'<span class="help-inline" data-error-code="{esc(e.code)}">{esc(e.message)}</span>'
        for e in result.field_errors(name)
    )


def input_field(
    label: str,
    name: str,
    values: dict[str, str],
    result: BindingResult | None,
    input_type: str = "text",
) -> str:
    """라벨/입력/오류 표시가 포함된 입력 필드 (Labelled input with its errors)."""
    css = "form-group has-error" if result is not None and result.has_field_errors(name) else "form-group"
    return (
        f'<div class="{css}">'
        f'<label for="{name}">{esc(label)}</label>'
        f'<input type="{input_type}" id="{name}" name="{name}" value="{esc(values.get(name, ""))}">'
        f"{field_errors(result, name)}"
        "</div>"
    )


def select_field(
    label: str,
    name: str,
    options: Iterable[str],
    values: dict[str, str],
    result: BindingResult | None,
) -> str:
    """선택 목록 필드 (Labelled select box with its errors)."""
    current: str = values.get(name, "")
    css = "form-group has-error" if result is not None and result.has_field_errors(name) else "form-group"
    rendered: list[str] = []
    for option in options:
        selected = " selected" if option == current else ""
        rendered.append(f'<option value="{esc(option)}"{selected}>{esc(option)}</option>')
    return (
        f'<div class="{css}">'
        f'<label for="{name}">{esc(label)}</label>'
        f'<select id="{name}" name="{name}">{"".join(rendered)}</select>'
        f"{field_errors(result, name)}"
        "</div>"
    )


def welcome(model: dict[str, Any]) -> tuple[str, str]:
    return "Home", f"<h2>Welcome</h2><p>{esc(settings.APP_NAME)} keeps the records of our holders, their pets and every visit.</p>"


def error(model: dict[str, Any]) -> tuple[str, str]:
    status_code = model.get("status_code", 500)
    return "Error", (
        "<h2>Something happened...</h2>"
        f'<p class="error-status">{esc(status_code)}</p>'
        f'<p class="error-detail">{esc(model.get("detail", ""))}</p>'
    )
