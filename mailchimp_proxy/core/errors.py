# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Service-level exceptions. Mapped to JSON responses in main.py."""
from typing import Dict, List


class ServiceError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict:
        return {"message": self.message}


class InvalidDataError(ServiceError):
    status_code = 400

    def __init__(self, errors: Dict[str, List[str]]):
        super().__init__("Invalid data given")
        self.errors = errors

    def to_response(self) -> dict:
        return {"message": self.message, "errors": self.errors}


class EntityNotFoundError(ServiceError):
    status_code = 404

    def __init__(self, entity: str, entity_id: str):
        super().__init__(f"{entity}[{entity_id}] not found")
        self.entity = entity
        self.entity_id = entity_id


class MailChimpError(ServiceError):
    """Any failure talking to the MailChimp API; message is passed through verbatim."""
    status_code = 400

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status


class ConflictError(ServiceError):
    status_code = 409
