"""Entry point: turn a coding view URL into a loaded Project."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from qcamap.location import CodingLocation, parse_coding_url
from qcamap.model.project import Project

if TYPE_CHECKING:
    from qcamap.client import Transport

logger = logging.getLogger(__name__)


async def open_project(
    location: str | CodingLocation, transport: Transport, *, host: str = "www.qcamap.org"
) -> Project:
    """Build and load the project addressed by ``location``.

    The loaded project is returned to the caller; nothing is kept globally.
    """
    if isinstance(location, str):
        location = parse_coding_url(location, host=host)
    project = Project(location.project_id, location.research_question_id, transport)
    await project.load()
    logger.info("Project loaded.")
    return project
