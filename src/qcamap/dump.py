"""Plain-data export and text summary of a loaded project."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from qcamap.model.project import Project


def project_to_dict(project: Project) -> dict[str, Any]:
    return {
        "projectId": project.project_id,
        "researchQuestionId": project.research_question_id,
        "categories": [dict(category.record) for category in project.categories],
        "documents": [
            {**doc.record, "markers": [dict(marker.record) for marker in doc.markers]}
            for doc in project.documents
        ],
    }


def format_summary(project: Project) -> str:
    counts: dict[Any, int] = {}
    for marker in project.iter_markers():
        counts[marker.categoryId] = counts.get(marker.categoryId, 0) + 1

    lines = [
        f"Project {project.project_id} / research question {project.research_question_id}",
        "",
        f"Categories ({len(project.categories)}):",
    ]
    for category in sorted(project.categories, key=lambda c: c.record.get("ordering") or 0):
        lines.append(
            f"  {category.record.get('ordering') or '-':>3}. {category.name}"
            f"  [id={category.id}, markers={counts.get(category.id, 0)}]"
        )
    lines.append("")
    lines.append(f"Documents ({len(project.documents)}):")
    for doc in project.documents:
        lines.append(f"  {doc.record.get('title', doc.id)}  [id={doc.id}, markers={len(doc.markers)}]")
    return "\n".join(lines)
