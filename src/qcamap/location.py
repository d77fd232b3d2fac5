"""Extract project and research question ids from a coding view URL."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import urlsplit

from qcamap.errors import LocationError

_CODING_PATH = re.compile(r"/ui/projects/(?P<project_id>[0-9]+)/rq/(?P<research_question_id>[0-9]+)/coding")


@dataclass(frozen=True)
class CodingLocation:
    project_id: int
    research_question_id: int


def parse_coding_url(url: str, host: str = "www.qcamap.org") -> CodingLocation:
    """Parse ``https://<host>/ui/projects/{p}/rq/{rq}/coding``.

    Anything after ``/coding`` (sub-paths, query, fragment) is ignored.
    """
    parts = urlsplit(url)
    if parts.netloc != host:
        raise LocationError(f"Current URL doesn't match QCAmap coding view: {url}")
    match = _CODING_PATH.match(parts.path)
    if not match:
        raise LocationError(f"Current URL doesn't match QCAmap coding view: {url}")
    return CodingLocation(
        project_id=int(match.group("project_id")),
        research_question_id=int(match.group("research_question_id")),
    )
