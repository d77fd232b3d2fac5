"""Project: root aggregate of documents and categories.

Loads the whole project graph from the remote service and implements the
bulk category maintenance operations:

- merge: reassign every marker of some categories to a base category
- duplicate: copy every marker of a category into a new category
- sort_categories: alphabetical re-ordering of the category list

None of these are transactional. A failed remote call aborts the operation
and leaves whatever was already written in place.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from qcamap.client import categories_path, category_path, contents_path
from qcamap.errors import CategoryNotFoundError, ProjectStateError
from qcamap.model.category import Category, new_category_record
from qcamap.model.document import Document

if TYPE_CHECKING:
    from qcamap.client import Transport
    from qcamap.model.marker import Marker

logger = logging.getLogger(__name__)


class LoadState(enum.Enum):
    UNLOADED = "unloaded"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"


class Project:
    """A QCAmap project scoped to one research question."""

    def __init__(self, project_id: int, research_question_id: int, transport: Transport) -> None:
        self.project_id = project_id
        self.research_question_id = research_question_id
        self.transport = transport
        self.documents: list[Document] = []
        self.categories: list[Category] = []
        self.state = LoadState.UNLOADED

    def __repr__(self) -> str:
        return (
            f"Project(project_id={self.project_id!r}, "
            f"research_question_id={self.research_question_id!r}, state={self.state.value})"
        )

    # ── Loading ───────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch documents (with their markers) and categories concurrently.

        The first failure propagates; the other fetch is not awaited further.
        A project can only be loaded once.
        """
        if self.state is not LoadState.UNLOADED:
            raise ProjectStateError(f"Project already {self.state.value}; create a new Project to reload")

        self.state = LoadState.LOADING
        try:
            await asyncio.gather(self._load_documents(), self._load_categories())
        except BaseException:
            self.state = LoadState.FAILED
            raise
        self.state = LoadState.LOADED
        logger.info(
            "Loaded project %s: %d documents, %d categories, %d markers",
            self.project_id,
            len(self.documents),
            len(self.categories),
            self.count_markers(),
        )

    async def _load_documents(self) -> list[Document]:
        # {"projectId": 26562, "title": "review-15261.txt", "ordering": 1, "contentType": "text",
        #  "contentLength": 8772, "id": 138986, ...}
        records = await self.transport.request("GET", contents_path(self.project_id))
        self.documents = [Document(self, record) for record in records or []]
        await asyncio.gather(*(doc.load() for doc in self.documents))
        return self.documents

    async def _load_categories(self) -> list[Category]:
        # {"type": "C", "number": 21, "ordering": 1, "name": "not design", "color": "#E4E4E4",
        #  "researchQuestionId": 39860, "id": 644530, ...}
        records = await self.transport.request(
            "GET", categories_path(self.project_id, self.research_question_id)
        )
        self.categories = [Category(record) for record in records or []]
        return self.categories

    # ── Lookup & traversal ────────────────────────────────────

    def get_category_by_name(self, name: str) -> Category:
        for category in self.categories:
            if category.name == name:
                return category
        raise CategoryNotFoundError(name)

    def get_document_by_id(self, document_id: int) -> Document:
        for doc in self.documents:
            if doc.id == document_id:
                return doc
        raise LookupError(f"Document {document_id!r} does not exist!")

    def iter_markers(self) -> Iterator[Marker]:
        for doc in self.documents:
            yield from doc.markers

    def iter_markers_of_category(self, category: Category) -> Iterator[Marker]:
        for marker in self.iter_markers():
            if marker.categoryId == category.id:
                yield marker

    def count_markers(self, category: Category | None = None) -> int:
        markers = self.iter_markers() if category is None else self.iter_markers_of_category(category)
        return sum(1 for _ in markers)

    def empty_categories(self) -> list[Category]:
        """Categories that currently have no markers in any document."""
        used = {marker.categoryId for marker in self.iter_markers()}
        return [category for category in self.categories if category.id not in used]

    # ── Category writes ───────────────────────────────────────

    async def create_category(self, name: str) -> Category:
        """Create a category remotely and append it once the remote returns its id."""
        number = max((c.record.get("number") or 0 for c in self.categories), default=0) + 1
        record = new_category_record(
            name, self.research_question_id, number=number, ordering=len(self.categories) + 1
        )
        created = await self.transport.request(
            "POST", categories_path(self.project_id, self.research_question_id), body=record
        )
        category = Category(created)
        self.categories.append(category)
        logger.info("Created category %r (id=%s)", category.name, category.id)
        return category

    async def update_category(self, category: Category) -> None:
        path = category_path(self.project_id, self.research_question_id, category.id)
        await self.transport.request("PUT", path, body=category.record)

    # ── Maintenance operations ────────────────────────────────

    async def merge(
        self, base_category_name: str, *other_category_names: str, rename_merged: bool = False
    ) -> int:
        """Move every marker of the other categories to the base category.

        Marker updates are sent concurrently; all must succeed. The emptied
        categories are left in place. With ``rename_merged`` they are renamed
        to "<name> (merged into <base>)" afterwards, one at a time.

        Returns the number of markers moved.
        """
        base = self.get_category_by_name(base_category_name)
        others = [self.get_category_by_name(name) for name in other_category_names]
        others = list({category.id: category for category in others if category.id != base.id}.values())

        updates = []
        for other in others:
            for marker in list(self.iter_markers_of_category(other)):
                logger.info(
                    "Changing marker (%s, %s, %s) from category %s to category %s",
                    marker.id, marker.start, marker.end, other.name, base.name,
                )
                marker.categoryId = base.id
                updates.append(marker.update())
        await asyncio.gather(*updates)

        if rename_merged:
            for other in others:
                other.name = f"{other.name} (merged into {base.name})"
                await self.update_category(other)
        return len(updates)

    async def duplicate(self, base_category_name: str, new_category_name: str) -> Category:
        """Create ``new_category_name`` holding a copy of every marker of the base category.

        The original markers are not touched.
        """
        base = self.get_category_by_name(base_category_name)
        sources = list(self.iter_markers_of_category(base))

        new_category = await self.create_category(new_category_name)
        for marker in sources:
            logger.info(
                "Copying marker (%s, %s, %s) from category %s to category %s",
                marker.id, marker.start, marker.end, base.name, new_category.name,
            )
        await asyncio.gather(
            *(marker.document.copy_marker_to_other_category(marker, new_category) for marker in sources)
        )
        return new_category

    async def sort_categories(self) -> None:
        """Sort categories by name and renumber their 1-based ``ordering``.

        Updates are pushed strictly one after another; the remote service
        does not handle concurrent ordering updates reliably.
        """
        self.categories.sort(key=lambda category: category.name)
        for index, category in enumerate(self.categories):
            category.ordering = index + 1
        for category in self.categories:
            await self.update_category(category)
        logger.info("Sorted %d categories", len(self.categories))
