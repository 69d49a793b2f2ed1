# app/system_services/exceptions.py
"""
Service-layer errors.
Routes translate these into HTTP responses; storage failures (SQLAlchemyError)
are not wrapped and reach the routes as-is.
"""


class ServiceError(Exception):
    """Base class for expected, caller-caused failures."""


class RecordNotFoundError(ServiceError):
    """An update targeted an id that does not exist."""

    def __init__(self, entity: str, record_id: str):
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} not found: {record_id}")


class InvalidReferenceError(ServiceError):
    """A payload points at a patient/disease/user that does not exist."""

    def __init__(self, field: str, record_id: str):
        self.field = field
        self.record_id = record_id
        super().__init__(f"{field} references a missing record: {record_id}")


class DuplicateRecordError(ServiceError):
    """A unique field already holds this value."""

    def __init__(self, field: str, value: str):
        self.field = field
        self.value = value
        super().__init__(f"{field} already exists: {value}")
