"""Marker: a coded text span inside one document."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from qcamap.errors import InvalidArgumentError
from qcamap.model.base import Entity, is_record

if TYPE_CHECKING:
    from qcamap.model.document import Document


class Marker(Entity):
    """Proxy over a marker record (id, start, end, categoryId, ...).

    Holds a non-owning reference to its document, which performs all
    remote synchronization on the marker's behalf.
    """

    def __init__(self, document: Document, record: dict[str, Any]) -> None:
        if document is None or not is_record(record):
            raise InvalidArgumentError("Marker requires an owning document and a record")
        super().__init__(record)
        self.document = document

    async def update(self) -> None:
        await self.document.update_marker(self)

    async def delete(self) -> None:
        await self.document.delete_marker(self)
