"""Directory walking and Go declaration discovery."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Sequence

from .analyzers.go_source import GoParseError, GoSourceParser
from .config import DEFAULT_ENTITY_DIR, DEFAULT_SCAN_ROOT, ScanConfig
from .logging import get_logger
from .models import TypeDeclaration

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    "node_modules",
    "vendor",
    "testdata",
}

DEFAULT_INCLUDE_PATHS: tuple[str, ...] = ("/core/", "/adapter/")

# Tool-internal packages that never hold architecture components.
DEFAULT_EXCLUDE_PATHS: tuple[str, ...] = (
    "/generator/",
    "/commands/",
    "/ui/",
    "/config/",
    "/provider/",
    "/cache/",
    "/orchestrator/",
    "/utils/",
)


@dataclass
class ScanRules:
    """Path filters applied to every candidate source file."""

    extension: str = ".go"
    test_suffix: str = "_test.go"
    include_paths: Sequence[str] = DEFAULT_INCLUDE_PATHS
    exclude_paths: Sequence[str] = DEFAULT_EXCLUDE_PATHS

    @classmethod
    def from_config(cls, config: ScanConfig) -> "ScanRules":
        return cls(
            include_paths=tuple(config.include_paths) or DEFAULT_INCLUDE_PATHS,
            exclude_paths=tuple(config.exclude_paths) or DEFAULT_EXCLUDE_PATHS,
        )

    def is_source(self, rel_path: str) -> bool:
        return rel_path.endswith(self.extension) and not rel_path.endswith(self.test_suffix)

    def accepts(self, rel_path: str) -> bool:
        """Return True when a path should be parsed during a full scan."""
        if not self.is_source(rel_path):
            return False
        padded = f"/{rel_path}"
        if any(pattern in padded for pattern in self.exclude_paths):
            return False
        return any(pattern in padded for pattern in self.include_paths)


@dataclass
class EntityScan:
    """Result of the entity-only scan used for wiring."""

    domains: List[str] = field(default_factory=list)
    type_names: Dict[str, str] = field(default_factory=dict)


def _iter_files(root: Path, directory: Path) -> Iterator[tuple[Path, str]]:
    for dirpath, dirnames, filenames in os.walk(directory):
        dirnames[:] = sorted(name for name in dirnames if name not in _EXCLUDED_DIRS)
        current_dir = Path(dirpath)
        for filename in sorted(filenames):
            path = current_dir / filename
            if not path.is_file():
                continue
            yield path, path.relative_to(root).as_posix()


class SourceScanner:
    """Walks a Go project and yields the type declarations it contains."""

    def __init__(
        self,
        rules: ScanRules | None = None,
        parser: GoSourceParser | None = None,
    ) -> None:
        self.rules = rules or ScanRules()
        self.parser = parser or GoSourceParser()
        self.logger = get_logger("scanner")

    def scan(self, root: str | Path, directory: str = DEFAULT_SCAN_ROOT) -> List[TypeDeclaration]:
        """Return every struct/interface declaration under ``root/directory``.

        Files that fail to parse are logged and skipped; the walk continues.
        """
        root_path = _resolve_root(root)
        scan_dir = root_path / directory
        if not scan_dir.is_dir():
            self.logger.debug("Scan directory not found: %s", scan_dir)
            return []

        declarations: List[TypeDeclaration] = []
        for path, rel_path in _iter_files(root_path, scan_dir):
            if not self.rules.accepts(rel_path):
                continue
            declarations.extend(self._parse(path, rel_path))
        self.logger.debug("Scanner found %d declarations under %s", len(declarations), directory)
        return declarations

    def scan_entities(self, root: str | Path, entity_dir: str = DEFAULT_ENTITY_DIR) -> EntityScan:
        """Return the distinct lowercase names of entity structs, in walk order."""
        root_path = _resolve_root(root)
        scan_dir = root_path / entity_dir
        result = EntityScan()
        if not scan_dir.is_dir():
            self.logger.warning("Entity directory not found: %s", entity_dir)
            return result

        for path, rel_path in _iter_files(root_path, scan_dir):
            if not self.rules.is_source(rel_path):
                continue
            for declaration in self._parse(path, rel_path):
                if not declaration.is_struct:
                    continue
                domain = declaration.name.lower()
                if domain in result.type_names:
                    continue
                result.domains.append(domain)
                result.type_names[domain] = declaration.name
        return result

    def _parse(self, path: Path, rel_path: str) -> List[TypeDeclaration]:
        try:
            parsed = self.parser.parse_file(path, rel_path)
        except GoParseError as exc:
            self.logger.warning("Failed to parse %s: %s", rel_path, exc)
            return []
        return parsed.declarations


def _resolve_root(root: str | Path) -> Path:
    root_path = Path(root).expanduser().resolve()
    if not root_path.exists():
        raise FileNotFoundError(f"Project path not found: {root}")
    if not root_path.is_dir():
        raise NotADirectoryError(f"Project path is not a directory: {root}")
    return root_path


__all__ = ["EntityScan", "ScanRules", "SourceScanner"]
