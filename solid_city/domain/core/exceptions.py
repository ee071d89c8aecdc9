# solid_city/domain/core/exceptions.py
from typing import Any, Optional, List

class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass

class ContractViolationError(DomainException):
    """Raised when a variant cannot honour the contract of its capability."""
    def __init__(self, variant: str, capability: str, message: str):
        super().__init__(message)
        self.variant = variant
        self.capability = capability
        self.output: List[str] = []

class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details

class InvalidMemberError(ValidationError):
    """Raised when an object cannot be attached to a composite."""
    def __init__(self, member: Any, capability: str, message: Optional[str] = None):
        super().__init__(
            message or f"{type(member).__name__} does not implement {capability}",
            {"member": type(member).__name__, "capability": capability},
        )
        self.member = member
        self.capability = capability

class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: str):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id

class ExampleNotFoundError(ResourceNotFoundError):
    """Raised when no example is registered under the requested name."""
    def __init__(self, name: str):
        super().__init__("Example", name)
        self.name = name

class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
