"""
Error taxonomy shared by the engine, the repositories and the HTTP layer.

- ValidationError: malformed or absent input (HTTP 400)
- NotFoundError: a referenced group, user or schedule does not exist (HTTP 404)
- DataAccessError: the storage layer failed (HTTP 500, details are not exposed)

None of these are retried inside the service.
"""

from typing import Any


class TimeSyncError(Exception):
    """Base class for errors reported to API callers"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(TimeSyncError):
    status_code = 400


class NotFoundError(TimeSyncError):
    status_code = 404

    def __init__(self, entity: str, entity_id: Any):
        self.entity = entity
        self.entity_id = str(entity_id)
        super().__init__(f"{entity.capitalize()} with ID {entity_id} not found")

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "entity": self.entity, "id": self.entity_id}


class DataAccessError(TimeSyncError):
    """Storage failure; the original exception is chained, never serialized"""

    status_code = 500

    def __init__(self, message: str = "A data access error occurred"):
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": "A data access error occurred"}
