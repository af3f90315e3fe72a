"""Groups classified components into per-domain records."""

from __future__ import annotations

from typing import Dict, Iterable, List

from ..logging import get_logger
from ..models import ComponentInfo, DomainInfo
from .classifier import (
    CATEGORY_ENTITY,
    CATEGORY_HANDLER,
    CATEGORY_REPO_ADAPTER,
    CATEGORY_REPO_PORT,
    CATEGORY_SERVICE_PORT,
    extract_domain_name,
)

_FIELD_BY_CATEGORY = {
    CATEGORY_ENTITY: "entity",
    CATEGORY_SERVICE_PORT: "service_port",
    CATEGORY_REPO_PORT: "repo_port",
    CATEGORY_REPO_ADAPTER: "repo_adapter",
    CATEGORY_HANDLER: "handler",
}


class DomainAggregator:
    """Folds a component stream into sorted, filtered DomainInfo records."""

    def __init__(self) -> None:
        self.logger = get_logger("aggregator")

    def aggregate(self, components: Iterable[ComponentInfo]) -> List[DomainInfo]:
        domains: Dict[str, DomainInfo] = {}
        for component in components:
            domain = domains.get(component.name)
            if domain is None:
                domain = DomainInfo(name=component.name)
                domains[component.name] = domain

            field_name = _FIELD_BY_CATEGORY.get(component.category or "")
            if field_name is None:
                continue
            previous = getattr(domain, field_name)
            if previous is not None:
                self.logger.debug(
                    "Replacing %s of domain %s: %s -> %s",
                    field_name,
                    domain.name,
                    previous.path,
                    component.path,
                )
            setattr(domain, field_name, component)

        retained = sorted(
            (domain for domain in domains.values() if domain.is_meaningful()),
            key=lambda domain: domain.name,
        )
        self._link_dependencies(retained)
        return retained

    @staticmethod
    def _link_dependencies(domains: List[DomainInfo]) -> None:
        names = {domain.name for domain in domains if domain.entity is not None}
        for domain in domains:
            if domain.entity is None:
                domain.dependencies = []
                continue
            referenced = {extract_domain_name(ref) for ref in domain.entity.references}
            domain.dependencies = sorted((referenced & names) - {domain.name})


__all__ = ["DomainAggregator"]
