"""Category: a named coding label within a project/research question."""

from __future__ import annotations

from typing import Any

from qcamap.model.base import Entity

# Field values the remote service assigns to a freshly created category.
CATEGORY_DEFAULTS: dict[str, Any] = {
    "type": "C",
    "isInsignificant": 0,
    "color": "#E4E4E4",
    "definition": None,
    "anchorExamples": None,
    "codingRules": None,
    "mainCategoryId": None,
}


class Category(Entity):
    """Proxy over a category record.

    Typical fields: id, name, number, ordering, color, type, definition,
    codingRules, researchQuestionId. ``ordering`` is always present since
    sorting rewrites it.
    """

    def __init__(self, record: dict[str, Any]) -> None:
        record.setdefault("ordering", None)
        super().__init__(record)


def new_category_record(
    name: str, research_question_id: int, number: int, ordering: int
) -> dict[str, Any]:
    """Build the body of a category creation request."""
    return {
        **CATEGORY_DEFAULTS,
        "name": name,
        "number": number,
        "ordering": ordering,
        "researchQuestionId": research_question_id,
        "id": None,
    }
