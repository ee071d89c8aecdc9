"""Application layer: example catalog and the service that runs it."""

from .examples import ExampleDefinition, get_example, list_examples
from .service import ExampleApplicationService

__all__ = ["ExampleDefinition", "ExampleApplicationService", "get_example", "list_examples"]
