"""Core data models shared across gowire components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class DatabaseBackend(str, Enum):
    """Storage flavours the wiring generator knows how to connect to."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    SQLITE = "sqlite"


@dataclass
class TypeDeclaration:
    """A raw `type X ...` declaration found in a Go source file."""

    name: str
    kind: str  # "struct", "interface" or "other"
    path: str
    package: str
    references: List[str] = field(default_factory=list)

    @property
    def is_struct(self) -> bool:
        return self.kind == "struct"

    @property
    def is_interface(self) -> bool:
        return self.kind == "interface"


@dataclass
class ComponentInfo:
    """A classified declaration belonging to one domain."""

    name: str
    type: str  # "entity", "interface" or "struct"
    path: str
    package: str
    is_port: bool = False
    is_adapter: bool = False
    type_name: str = ""
    category: Optional[str] = None
    references: List[str] = field(default_factory=list)


@dataclass
class DomainInfo:
    """All discovered components of one business domain."""

    name: str
    entity: Optional[ComponentInfo] = None
    service_port: Optional[ComponentInfo] = None
    repo_port: Optional[ComponentInfo] = None
    repo_adapter: Optional[ComponentInfo] = None
    handler: Optional[ComponentInfo] = None
    dependencies: List[str] = field(default_factory=list)

    def is_meaningful(self) -> bool:
        """Return True when the domain carries enough components to be reported."""
        if self.entity is not None or self.handler is not None or self.repo_adapter is not None:
            return True
        return self.service_port is not None and self.repo_port is not None

    def component_kinds(self) -> List[str]:
        kinds: List[str] = []
        if self.entity is not None:
            kinds.append("entity")
        if self.service_port is not None:
            kinds.append("service_port")
        if self.repo_port is not None:
            kinds.append("repo_port")
        if self.repo_adapter is not None:
            kinds.append("repo_adapter")
        if self.handler is not None:
            kinds.append("handler")
        return kinds
