"""
Custom exceptions for the Registrar platform.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ResourceNotFoundError(RegistrarException):
    """Raised when a requested resource is not found."""
    
    def __init__(self, entity_name: str, entity_id: Any):
        super().__init__(
            f"{entity_name} not found",
            error_code="not_found",
            details={"entity": entity_name, "id": entity_id}
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class BadJoinError(RegistrarException):
    """Raised when a foreign key references a record that does not exist."""
    
    def __init__(self, source: str, field: str, target: str, target_id: Any):
        super().__init__(
            f"{source}.{field} references missing {target} {target_id!r}",
            error_code="bad_join",
            details={"source": source, "field": field, "target": target, "id": target_id}
        )


class DatasetError(RegistrarException):
    """Raised when the dataset file is missing or malformed."""
    pass


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass
