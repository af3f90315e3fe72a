"""Maps raw Go type declarations onto Clean-Architecture component roles."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Sequence

from ..logging import get_logger
from ..models import ComponentInfo, TypeDeclaration

DOMAIN_SUFFIXES: tuple[str, ...] = (
    "Repository",
    "Service",
    "Handler",
    "Entity",
    "Port",
    "Adapter",
    "Repo",
)

# Types ending with these are transport or plumbing types, not domain components.
DTO_SUFFIXES: tuple[str, ...] = (
    "Request",
    "Response",
    "DTO",
    "Config",
    "Error",
    "Result",
    "Option",
)

STORAGE_PACKAGES: tuple[str, ...] = ("postgres", "mysql", "mongo")

CATEGORY_ENTITY = "entity"
CATEGORY_SERVICE_PORT = "service_port"
CATEGORY_REPO_PORT = "repo_port"
CATEGORY_REPO_ADAPTER = "repo_adapter"
CATEGORY_HANDLER = "handler"


def strip_suffixes(name: str, suffixes: Sequence[str] = DOMAIN_SUFFIXES) -> str:
    """Remove known role suffixes until none applies.

    Each round strips the first suffix in ``suffixes`` that matches, so
    ``CustomerRepository`` becomes ``Customer`` and ``OrderServiceRepo``
    becomes ``Order``. Stripping an already-stripped name is a no-op.
    """
    current = name
    while True:
        for suffix in suffixes:
            if current.endswith(suffix):
                current = current[: -len(suffix)]
                break
        else:
            return current


def extract_domain_name(type_name: str) -> str:
    """Return the lowercase domain name for a Go type name."""
    return strip_suffixes(type_name).lower()


def _has_segment(path: str, segment: str) -> bool:
    return f"/{segment}/" in f"/{path}"


class ComponentClassifier:
    """Decides the architectural role of each discovered declaration."""

    def __init__(
        self,
        dto_suffixes: Sequence[str] = DTO_SUFFIXES,
        storage_packages: Sequence[str] = STORAGE_PACKAGES,
    ) -> None:
        self._dto_suffixes = tuple(dto_suffixes)
        self._storage_packages = tuple(storage_packages)
        self.logger = get_logger("classifier")

    def classify_all(self, declarations: Iterable[TypeDeclaration]) -> Iterator[ComponentInfo]:
        for declaration in declarations:
            component = self.classify(declaration)
            if component is not None:
                yield component

    def classify(self, declaration: TypeDeclaration) -> Optional[ComponentInfo]:
        """Return the component for a declaration, or None when it is not tracked."""
        if not (declaration.is_struct or declaration.is_interface):
            return None
        if declaration.name.endswith(self._dto_suffixes):
            return None
        if _has_segment(declaration.path, "valueobject"):
            return None

        name = extract_domain_name(declaration.name)
        if not name:
            return None

        component = ComponentInfo(
            name=name,
            type="interface",
            path=declaration.path,
            package=declaration.package,
            type_name=declaration.name,
            references=list(declaration.references),
        )
        if declaration.is_interface:
            component.is_port = True
        elif _has_segment(declaration.path, "entity"):
            component.type = "entity"
        else:
            component.type = "struct"
            component.is_adapter = True

        component.category = self._categorize(component)
        if component.category is None:
            self.logger.debug(
                "Unclassified component %s in %s", declaration.name, declaration.path
            )
        return component

    def _categorize(self, component: ComponentInfo) -> Optional[str]:
        path = component.path
        package = component.package
        if component.type == "entity" or "entity" in package:
            return CATEGORY_ENTITY
        if component.is_port and ("service" in path or "Service" in component.type_name):
            return CATEGORY_SERVICE_PORT
        if component.is_port and ("repository" in path or "Repository" in component.type_name):
            return CATEGORY_REPO_PORT
        if component.is_adapter and (
            "repository" in path or any(driver in package for driver in self._storage_packages)
        ):
            return CATEGORY_REPO_ADAPTER
        if "handler" in package or "handler" in path:
            return CATEGORY_HANDLER
        return None


__all__ = [
    "CATEGORY_ENTITY",
    "CATEGORY_HANDLER",
    "CATEGORY_REPO_ADAPTER",
    "CATEGORY_REPO_PORT",
    "CATEGORY_SERVICE_PORT",
    "ComponentClassifier",
    "DOMAIN_SUFFIXES",
    "DTO_SUFFIXES",
    "extract_domain_name",
    "strip_suffixes",
]
