"""Pipeline orchestration for the wire and describe flows."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from .analyzers import ComponentClassifier, DomainAggregator
from .config import GoWireConfig, load_config
from .generators import DiagramGenerator, WireGenerator
from .logging import get_logger
from .models import DomainInfo
from .repo_scanner import ScanRules, SourceScanner


class Orchestrator:
    """Coordinates scanning, classification and text generation for a Go project."""

    def __init__(
        self,
        scanner: SourceScanner | None = None,
        classifier: ComponentClassifier | None = None,
        aggregator: DomainAggregator | None = None,
    ) -> None:
        self._scanner_override = scanner
        self.classifier = classifier or ComponentClassifier()
        self.aggregator = aggregator or DomainAggregator()
        self.logger = get_logger("orchestrator")

    def discover_domains(self, path: str | Path) -> List[DomainInfo]:
        """Scan a project and return its domains sorted by name."""
        repo_path = Path(path).expanduser().resolve()
        config = load_config(repo_path)
        scanner = self._scanner_for(config)

        declarations = scanner.scan(repo_path, config.scan.root)
        components = self.classifier.classify_all(declarations)
        domains = self.aggregator.aggregate(components)
        self.logger.debug(
            "Discovered %d domains from %d declarations", len(domains), len(declarations)
        )
        return domains

    def run_wire(self, path: str | Path, *, output_dir: Optional[str] = None) -> List[Path]:
        """Generate main.go and wire.go; returns the written file paths."""
        repo_path = Path(path).expanduser().resolve()
        self.logger.info("Starting wire run for %s", repo_path)
        config = load_config(repo_path)

        generator = WireGenerator(
            repo_path,
            output_dir=output_dir or config.wire.output_dir,
            manifest=config.wire.manifest,
            env_file=config.wire.env_file,
            entity_dir=config.scan.entity_dir,
            scanner=self._scanner_for(config),
        )
        written = generator.generate()
        for file_path in written:
            self.logger.info("Wrote %s", file_path)
        return written

    def run_describe(
        self,
        path: str | Path,
        *,
        fmt: Optional[str] = None,
        kind: Optional[str] = None,
        output: Optional[str | Path] = None,
    ) -> str:
        """Render the architecture diagram, optionally writing it to ``output``."""
        repo_path = Path(path).expanduser().resolve()
        config = load_config(repo_path)
        domains = self.discover_domains(repo_path)

        generator = DiagramGenerator(
            domains,
            fmt=fmt or config.describe.format,
            kind=kind or config.describe.type,
        )
        diagram = generator.render()

        if output is not None:
            target = Path(output).expanduser()
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(diagram, encoding="utf-8")
            self.logger.info("Architecture diagram saved to %s", target)
        return diagram

    def _scanner_for(self, config: GoWireConfig) -> SourceScanner:
        if self._scanner_override is not None:
            return self._scanner_override
        return SourceScanner(ScanRules.from_config(config.scan))


__all__ = ["Orchestrator"]
