"""Document: a content unit of a project, owning its markers."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from qcamap.client import marker_path, markers_path
from qcamap.model.base import Entity
from qcamap.model.marker import Marker

if TYPE_CHECKING:
    from qcamap.model.category import Category
    from qcamap.model.project import Project

logger = logging.getLogger(__name__)


class Document(Entity):
    """Proxy over a document record (id, title, ordering, contentType, contentLength, ...)."""

    def __init__(self, project: Project, record: dict[str, Any]) -> None:
        super().__init__(record)
        self.project = project
        self.markers: list[Marker] = []

    @property
    def _markers_path(self) -> str:
        return markers_path(self.project.project_id, self.project.research_question_id, self.id)

    async def load(self) -> None:
        await self.load_markers()

    async def load_markers(self) -> list[Marker]:
        """Replace ``markers`` with the remote marker listing."""
        records = await self.project.transport.request("GET", self._markers_path)
        self.markers = [Marker(self, record) for record in records or []]
        logger.debug("Loaded %d markers for document %s", len(self.markers), self.id)
        return self.markers

    async def create_marker(self) -> Marker:
        raise NotImplementedError("Creating markers is not implemented")

    async def update_marker(self, marker: Marker) -> None:
        """Push the marker's full record to the remote service."""
        path = marker_path(
            self.project.project_id, self.project.research_question_id, self.id, marker.id
        )
        await self.project.transport.request("PUT", path, body=marker.record)

    async def delete_marker(self, marker: Marker) -> None:
        raise NotImplementedError("Deleting markers is not implemented")

    async def copy_marker_to_other_category(self, marker: Marker, other_category: Category) -> Marker:
        """Create a copy of ``marker`` under ``other_category`` in this document.

        The copy is appended to ``markers`` only once the remote service has
        returned it with its assigned id.
        """
        record = dict(marker.record)
        record["id"] = None
        record["categoryId"] = other_category.id
        created = await self.project.transport.request("POST", self._markers_path, body=record)
        copy = Marker(self, created)
        self.markers.append(copy)
        return copy
