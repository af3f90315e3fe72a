"""Renders architecture diagrams (Mermaid and ASCII) from discovered domains."""

from __future__ import annotations

from typing import List, Sequence, Set

from ..config import DIAGRAM_FORMATS, DIAGRAM_TYPES
from ..models import DomainInfo
from .wire import to_pascal_case

_LAYER_BOX = """\
┌─────────────────────────────────────────────┐
│        CLEAN ARCHITECTURE LAYERS            │
├─────────────────────────────────────────────┤
│                                             │
│  ┌───────────────────────────────────────┐  │
│  │   Presentation (HTTP Handlers)        │  │
│  └───────────────────────────────────────┘  │
│                    ▼                        │
│  ┌───────────────────────────────────────┐  │
│  │   Application (Services)              │  │
│  └───────────────────────────────────────┘  │
│                    ▼                        │
│  ┌───────────────────────────────────────┐  │
│  │   Domain (Entities & Ports)           │  │
│  └───────────────────────────────────────┘  │
│                    ▼                        │
│  ┌───────────────────────────────────────┐  │
│  │   Infrastructure (Repositories)       │  │
│  └───────────────────────────────────────┘  │
│                    ▼                        │
│             ┌──────────┐                    │
│             │ Database │                    │
│             └──────────┘                    │
│                                             │
└─────────────────────────────────────────────┘
"""

_CLASS_DEFS = [
    "    classDef handler fill:#667eea,stroke:#764ba2,color:#fff",
    "    classDef service fill:#10b981,stroke:#059669,color:#fff",
    "    classDef entity fill:#f59e0b,stroke:#d97706,color:#fff",
    "    classDef port fill:#ec4899,stroke:#db2777,color:#fff,stroke-dasharray: 5 5",
    "    classDef repo fill:#3b82f6,stroke:#2563eb,color:#fff",
]


class DiagramGenerator:
    """Formats a list of DomainInfo records as diagram text."""

    def __init__(self, domains: Sequence[DomainInfo], fmt: str = "mermaid", kind: str = "all") -> None:
        self.domains = list(domains)
        self.format = fmt if fmt in DIAGRAM_FORMATS else "mermaid"
        self.kind = kind if kind in DIAGRAM_TYPES else "all"

    def render(self) -> str:
        if self.format == "ascii":
            return self.render_ascii()
        if self.format == "both":
            return (
                "# Mermaid Diagram\n\n"
                + self.render_mermaid()
                + "\n\n# ASCII Diagram\n\n"
                + self.render_ascii()
            )
        return self.render_mermaid()

    def render_mermaid(self) -> str:
        if self.kind == "layers":
            body = self._layers_diagram()
        elif self.kind == "domain":
            body = self._domain_diagram()
        elif self.kind == "dependencies":
            body = self._dependency_diagram()
        else:
            body = self._full_diagram()
        return "```mermaid\n" + "\n".join(body) + "\n```\n"

    def _full_diagram(self) -> List[str]:
        lines = ["graph TB", '    subgraph "Presentation Layer"']
        for domain in self.domains:
            if domain.handler is not None:
                lines.append(f'        {domain.name}Handler["{to_pascal_case(domain.name)} Handler"]')
        lines.extend(["    end", ""])

        if any(domain.service_port is not None for domain in self.domains):
            lines.append('    subgraph "Application Layer"')
            for domain in self.domains:
                if domain.service_port is not None:
                    lines.append(
                        f'        {domain.name}Service["{to_pascal_case(domain.name)} Service<br/>(Port/Interface)"]'
                    )
            lines.extend(["    end", ""])

        lines.append('    subgraph "Domain Layer"')
        for domain in self.domains:
            title = to_pascal_case(domain.name)
            if domain.entity is not None:
                lines.append(f'        {domain.name}Entity["{title} Entity"]')
            if domain.repo_port is not None:
                lines.append(f'        {domain.name}RepoPort["{title} Repository<br/>(Port/Interface)"]')
        lines.extend(["    end", ""])

        lines.append('    subgraph "Infrastructure Layer"')
        for domain in self.domains:
            if domain.repo_adapter is not None:
                adapter = f"{to_pascal_case(domain.repo_adapter.package)} {to_pascal_case(domain.name)} Repo"
                lines.append(f'        {domain.name}Repo["{adapter}<br/>(Adapter)"]')
        lines.append("    DB[(Database)]")
        lines.extend(["    end", ""])

        entity_names = {domain.name for domain in self.domains if domain.entity is not None}
        for domain in self.domains:
            lines.extend(self._full_edges(domain, entity_names))

        lines.append("")
        lines.extend(_CLASS_DEFS)
        for domain in self.domains:
            if domain.handler is not None:
                lines.append(f"    class {domain.name}Handler handler")
            if domain.service_port is not None:
                lines.append(f"    class {domain.name}Service port")
            if domain.entity is not None:
                lines.append(f"    class {domain.name}Entity entity")
            if domain.repo_port is not None:
                lines.append(f"    class {domain.name}RepoPort port")
            if domain.repo_adapter is not None:
                lines.append(f"    class {domain.name}Repo repo")
        return lines

    def _full_edges(self, domain: DomainInfo, entity_names: Set[str]) -> List[str]:
        name = domain.name
        handler = f"{name}Handler"
        service = f"{name}Service"
        entity = f"{name}Entity"
        repo_port = f"{name}RepoPort"
        repo = f"{name}Repo"

        edges: List[str] = []
        if domain.handler and domain.service_port:
            edges.append(f"    {handler} -->|calls| {service}")
        if domain.service_port and domain.entity:
            edges.append(f"    {service} -->|uses| {entity}")
        if domain.service_port and domain.repo_port:
            edges.append(f"    {service} -->|depends on| {repo_port}")
        if domain.handler and domain.service_port is None and domain.repo_port:
            edges.append(f"    {handler} -->|uses| {repo_port}")
        if domain.repo_adapter and domain.repo_port:
            edges.append(f"    {repo} -.->|implements| {repo_port}")
        if domain.repo_adapter:
            edges.append(f"    {repo} --> DB")
        if domain.entity:
            # Only entities declared in the Domain Layer subgraph get an edge.
            for dependency in domain.dependencies:
                if dependency not in entity_names:
                    continue
                edges.append(f"    {entity} -->|references| {dependency}Entity")
        return edges

    @staticmethod
    def _layers_diagram() -> List[str]:
        return [
            "graph TB",
            "    A[Presentation Layer<br/>HTTP Handlers] --> B[Application Layer<br/>Services]",
            "    B --> C[Domain Layer<br/>Entities & Ports]",
            "    B --> D[Infrastructure Layer<br/>Repositories]",
            "    D --> E[(Database)]",
            "",
            "    classDef layer fill:#667eea,stroke:#764ba2,color:#fff",
            "    class A,B,C,D layer",
        ]

    def _domain_diagram(self) -> List[str]:
        lines = ["graph LR"]
        for domain in self.domains:
            node = domain.name
            lines.append(f'    {node}["{to_pascal_case(node)} Domain"]')
            if domain.entity is not None:
                lines.append(f"    {node} --> {node}E[Entity]")
            if domain.service_port is not None:
                lines.append(f"    {node} --> {node}SP[Service Port]")
            if domain.repo_port is not None:
                lines.append(f"    {node} --> {node}RP[Repo Port]")
            if domain.repo_adapter is not None:
                lines.append(f"    {node} --> {node}R[Repo Adapter]")
            if domain.handler is not None:
                lines.append(f"    {node} --> {node}H[Handler]")
        return lines

    @staticmethod
    def _dependency_diagram() -> List[str]:
        return [
            "graph LR",
            "    CLI[gowire CLI] --> CMD[Commands<br/>wire, describe, serve]",
            "    CMD --> ORCH[Orchestrator]",
            "    ORCH --> SCAN[Source Scanner<br/>tree-sitter Go]",
            "    ORCH --> GEN[Generators<br/>wire, diagram]",
            "    GEN --> TMPL[Go Templates]",
            "    SVC[Service Mode<br/>FastAPI] --> ORCH",
        ]

    def render_ascii(self) -> str:
        lines = [_LAYER_BOX]
        if self.domains:
            lines.append("Discovered Domains:")
            for domain in self.domains:
                components: List[str] = []
                if domain.entity is not None:
                    components.append("Entity")
                if domain.service_port is not None:
                    components.append("Service Port")
                if domain.repo_port is not None:
                    components.append("Repository Port")
                if domain.repo_adapter is not None:
                    components.append(f"{to_pascal_case(domain.repo_adapter.package)} Repository")
                if domain.handler is not None:
                    components.append("Handler")
                entry = f"  • {to_pascal_case(domain.name)}: [{', '.join(components)}]"
                if domain.dependencies:
                    entry += f" depends on: {', '.join(domain.dependencies)}"
                lines.append(entry)

            lines.append("")
            lines.append("Legend:")
            lines.append("  Port = Interface (defines contract)")
            lines.append("  Adapter = Implementation (concrete)")
        return "\n".join(lines) + "\n"


__all__ = ["DiagramGenerator"]
