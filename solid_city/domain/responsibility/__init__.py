"""Single responsibility example group."""

from .workers import Electrician, Feeder, Gatekeeper, MultiTasker

__all__ = ["Gatekeeper", "Electrician", "Feeder", "MultiTasker"]
