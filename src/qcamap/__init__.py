"""qcamap: async data-access layer for QCAmap qualitative coding projects."""

from qcamap.client import AiohttpTransport, Transport
from qcamap.config import QcamapConfig, load_config
from qcamap.core import open_project
from qcamap.errors import (
    CategoryNotFoundError,
    HTTPError,
    InvalidArgumentError,
    LocationError,
    ProjectStateError,
    QcamapError,
    TransportError,
)
from qcamap.model import Category, Document, LoadState, Marker, Project

__all__ = [
    "AiohttpTransport",
    "Category",
    "CategoryNotFoundError",
    "Document",
    "HTTPError",
    "InvalidArgumentError",
    "LoadState",
    "LocationError",
    "Marker",
    "Project",
    "ProjectStateError",
    "QcamapConfig",
    "QcamapError",
    "Transport",
    "TransportError",
    "load_config",
    "open_project",
]
