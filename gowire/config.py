"""Configuration loading for gowire (.gowire.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".gowire.yml"

DEFAULT_SCAN_ROOT = "internal"
DEFAULT_ENTITY_DIR = "internal/core/entity"
DEFAULT_OUTPUT_DIR = "cmd/api"
DEFAULT_MANIFEST = "go.mod"
DEFAULT_ENV_FILE = ".env"

DIAGRAM_FORMATS = ("mermaid", "ascii", "both")
DIAGRAM_TYPES = ("all", "domain", "layers", "dependencies")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScanConfig:
    """Where to look for Go sources and which paths to skip."""

    root: str = DEFAULT_SCAN_ROOT
    entity_dir: str = DEFAULT_ENTITY_DIR
    include_paths: List[str] = field(default_factory=list)
    exclude_paths: List[str] = field(default_factory=list)


@dataclass
class WireConfig:
    """Inputs and output location for wiring generation."""

    output_dir: str = DEFAULT_OUTPUT_DIR
    manifest: str = DEFAULT_MANIFEST
    env_file: str = DEFAULT_ENV_FILE


@dataclass
class DescribeConfig:
    """Default diagram rendering options."""

    format: str = "mermaid"
    type: str = "all"


@dataclass
class GoWireConfig:
    """Represents the settings defined in .gowire.yml."""

    root: Path
    scan: ScanConfig = field(default_factory=ScanConfig)
    wire: WireConfig = field(default_factory=WireConfig)
    describe: DescribeConfig = field(default_factory=DescribeConfig)


def load_config(config_path: Path) -> GoWireConfig:
    """Load configuration from disk, returning defaults when no file exists."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return GoWireConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    scan = ScanConfig()
    scan_data = _as_dict(data.get("scan"))
    if scan_data:
        scan.root = _as_str(scan_data.get("root")) or scan.root
        scan.entity_dir = _as_str(scan_data.get("entity_dir")) or scan.entity_dir
        scan.include_paths = _as_str_list(scan_data.get("include_paths"))
        scan.exclude_paths = _as_str_list(scan_data.get("exclude_paths"))

    wire = WireConfig()
    wire_data = _as_dict(data.get("wire"))
    if wire_data:
        wire.output_dir = _as_str(wire_data.get("output_dir")) or wire.output_dir
        wire.manifest = _as_str(wire_data.get("manifest")) or wire.manifest
        wire.env_file = _as_str(wire_data.get("env_file")) or wire.env_file

    describe = DescribeConfig()
    describe_data = _as_dict(data.get("describe"))
    if describe_data:
        describe.format = _as_choice(describe_data.get("format"), DIAGRAM_FORMATS, "format") or describe.format
        describe.type = _as_choice(describe_data.get("type"), DIAGRAM_TYPES, "type") or describe.type

    return GoWireConfig(root=root, scan=scan, wire=wire, describe=describe)


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_choice(value: Any, choices: Sequence[str], key: str) -> Optional[str]:
    text = _as_str(value)
    if text is None:
        return None
    if text not in choices:
        allowed = ", ".join(choices)
        raise ConfigError(f"describe.{key} must be one of: {allowed}")
    return text


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []
