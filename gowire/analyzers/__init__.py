"""Go source analysis: parsing, classification and domain aggregation."""

from __future__ import annotations

from .aggregator import DomainAggregator
from .classifier import ComponentClassifier, extract_domain_name, strip_suffixes
from .go_source import GoFile, GoParseError, GoSourceParser

__all__ = [
    "ComponentClassifier",
    "DomainAggregator",
    "GoFile",
    "GoParseError",
    "GoSourceParser",
    "extract_domain_name",
    "strip_suffixes",
]
