"""In-memory object graph mirroring a remote QCAmap project.

    Project
    ├── documents: [Document]
    │   └── markers: [Marker]   (each references a Category by categoryId)
    └── categories: [Category]
"""

from qcamap.model.base import Entity
from qcamap.model.category import Category
from qcamap.model.document import Document
from qcamap.model.marker import Marker
from qcamap.model.project import LoadState, Project

__all__ = ["Category", "Document", "Entity", "LoadState", "Marker", "Project"]
