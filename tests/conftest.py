"""Shared fixtures: an in-memory stand-in for the QCAmap REST API."""

from __future__ import annotations

import asyncio
import copy

import pytest

from qcamap.client import categories_path, contents_path, markers_path
from qcamap.errors import HTTPError
from qcamap.model.project import Project

PROJECT_ID = 26562
RQ_ID = 39860

DOCUMENTS = [
    {"id": 101, "projectId": PROJECT_ID, "title": "review-1.txt", "ordering": 1,
     "contentType": "text", "contentLength": 8772},
    {"id": 102, "projectId": PROJECT_ID, "title": "review-2.txt", "ordering": 2,
     "contentType": "text", "contentLength": 4120},
]

CATEGORIES = [
    {"id": 1, "name": "Design", "number": 1, "ordering": 1, "type": "C", "color": "#E4E4E4",
     "definition": None, "codingRules": None, "researchQuestionId": RQ_ID},
    {"id": 2, "name": "Not design", "number": 2, "ordering": 2, "type": "C", "color": "#E4E4E4",
     "definition": None, "codingRules": None, "researchQuestionId": RQ_ID},
    {"id": 3, "name": "Aesthetics", "number": 3, "ordering": 3, "type": "C", "color": "#E4E4E4",
     "definition": None, "codingRules": None, "researchQuestionId": RQ_ID},
    {"id": 4, "name": "bugs", "number": 4, "ordering": 4, "type": "C", "color": "#E4E4E4",
     "definition": None, "codingRules": None, "researchQuestionId": RQ_ID},
]

MARKERS = {
    101: [
        {"id": 10, "start": 0, "end": 5, "categoryId": 2, "contentDefintionId": 101},
        {"id": 11, "start": 6, "end": 12, "categoryId": 1, "contentDefintionId": 101},
        {"id": 12, "start": 20, "end": 30, "categoryId": 3, "contentDefintionId": 101},
    ],
    102: [
        {"id": 13, "start": 0, "end": 8, "categoryId": 2, "contentDefintionId": 102},
        {"id": 14, "start": 9, "end": 15, "categoryId": 3, "contentDefintionId": 102},
        {"id": 15, "start": 16, "end": 20, "categoryId": 1, "contentDefintionId": 102},
    ],
}


class FakeTransport:
    """Records every request and serves canned listings.

    POST echoes the body back with a fresh id, PUT returns nothing.
    ``fail(method, path)`` makes a route answer with an error status.
    """

    def __init__(self) -> None:
        self.responses: dict[tuple[str, str], object] = {}
        self.failures: dict[tuple[str, str], int] = {}
        self.calls: list[tuple[str, str, object]] = []
        self.in_flight = 0
        self.max_in_flight: dict[str, int] = {}
        self._next_id = 1000

    def add(self, method: str, path: str, response: object) -> None:
        self.responses[(method, path)] = response

    def fail(self, method: str, path: str, status: int = 500) -> None:
        self.failures[(method, path)] = status

    def calls_for(self, method: str) -> list[tuple[str, str, object]]:
        return [call for call in self.calls if call[0] == method]

    async def request(self, method: str, path: str, *, body=None):
        self.calls.append((method, path, copy.deepcopy(body)))
        self.in_flight += 1
        self.max_in_flight[method] = max(self.max_in_flight.get(method, 0), self.in_flight)
        try:
            # Yield so concurrently issued requests overlap.
            await asyncio.sleep(0)
            await asyncio.sleep(0)
        finally:
            self.in_flight -= 1

        if (method, path) in self.failures:
            raise HTTPError(self.failures[(method, path)], method, path)
        if method == "POST":
            created = dict(body)
            created["id"] = self._next_id
            self._next_id += 1
            return created
        if method == "PUT":
            return None
        return copy.deepcopy(self.responses[(method, path)])


@pytest.fixture
def remote() -> FakeTransport:
    transport = FakeTransport()
    transport.add("GET", contents_path(PROJECT_ID), DOCUMENTS)
    transport.add("GET", categories_path(PROJECT_ID, RQ_ID), CATEGORIES)
    for doc_id, markers in MARKERS.items():
        transport.add("GET", markers_path(PROJECT_ID, RQ_ID, doc_id), markers)
    return transport


@pytest.fixture
def loaded_project(remote: FakeTransport):
    async def _load() -> Project:
        project = Project(PROJECT_ID, RQ_ID, remote)
        await project.load()
        return project

    return _load
