"""Exception types raised by the qcamap package."""

from __future__ import annotations


class QcamapError(Exception):
    """Base class for all qcamap errors."""


class HTTPError(QcamapError):
    """A remote call returned a non-success status."""

    def __init__(self, status: int, method: str, path: str) -> None:
        self.status = status
        self.method = method
        self.path = path
        super().__init__(f"HTTP error! status: {status} ({method} {path})")


class CategoryNotFoundError(QcamapError, LookupError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Category {name!r} does not exist!")


class InvalidArgumentError(QcamapError, ValueError):
    pass


class ProjectStateError(QcamapError, RuntimeError):
    pass


class LocationError(QcamapError, ValueError):
    """The page location is not a QCAmap coding view."""


class TransportError(QcamapError):
    """A remote call got no usable response (connection failure, timeout)."""

    def __init__(self, method: str, path: str, cause: BaseException) -> None:
        self.method = method
        self.path = path
        super().__init__(f"Request failed: {method} {path}: {str(cause) or type(cause).__name__}")
