"""Text generators for Go wiring code and architecture diagrams."""

from .diagram import DiagramGenerator
from .wire import WireGenerator

__all__ = ["DiagramGenerator", "WireGenerator"]
