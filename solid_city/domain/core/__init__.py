"""Core domain types shared by every example group."""

from .exceptions import (
    ConfigurationError,
    ContractViolationError,
    DomainException,
    ExampleNotFoundError,
    InvalidMemberError,
    ResourceNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ContractViolationError",
    "ValidationError",
    "InvalidMemberError",
    "ResourceNotFoundError",
    "ExampleNotFoundError",
    "ConfigurationError",
]
