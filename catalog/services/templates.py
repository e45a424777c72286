from __future__ import annotations

"""Placeholder substitution for description and spec templates."""

from typing import List, Sequence

PLACEHOLDERS = ("{{name}}", "{{category}}", "{{pcs}}", "{{hours}}")


def render(template: str, name: str, category: str, pieces: int, build_hours: int) -> str:
    """Replace ``{{name}}``, ``{{category}}``, ``{{pcs}}`` and ``{{hours}}``.

    Unknown placeholders are left untouched.
    """
    values = dict(zip(PLACEHOLDERS, (name, category, str(pieces), str(build_hours))))
    for token, value in values.items():
        template = template.replace(token, value)
    return template


def render_all(
    templates: Sequence[str], name: str, category: str, pieces: int, build_hours: int
) -> List[str]:
    return [render(item, name, category, pieces, build_hours) for item in templates]
