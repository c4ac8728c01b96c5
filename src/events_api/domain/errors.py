"""Domain error codes for the events catalog."""

from __future__ import annotations

from enum import Enum


class ErrorCode(Enum):
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    SPOT_NOT_FOUND = "SPOT_NOT_FOUND"
    SPOT_ALREADY_RESERVED = "SPOT_ALREADY_RESERVED"
    CATALOG_LOAD_FAILED = "CATALOG_LOAD_FAILED"


class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    code = ErrorCode.EVENT_NOT_FOUND

    def __init__(self, event_id: int) -> None:
        super().__init__("Event not found")
        self.event_id = event_id


class SpotNotFoundError(DomainError):
    code = ErrorCode.SPOT_NOT_FOUND

    def __init__(self, event_id: int, spot_name: str) -> None:
        super().__init__(f"Spot {spot_name} not found")
        self.event_id = event_id
        self.spot_name = spot_name


class SpotAlreadyReservedError(DomainError):
    code = ErrorCode.SPOT_ALREADY_RESERVED

    def __init__(self, event_id: int, spot_name: str) -> None:
        super().__init__(f"Spot {spot_name} already reserved")
        self.event_id = event_id
        self.spot_name = spot_name


class CatalogLoadError(DomainError):
    """Raised when the catalog payload cannot be turned into a store."""

    code = ErrorCode.CATALOG_LOAD_FAILED
