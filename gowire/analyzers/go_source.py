"""Tree-sitter powered Go declaration parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..models import TypeDeclaration

GO_LANGUAGE = Language(tree_sitter_go.language())

_KIND_BY_NODE = {
    "struct_type": "struct",
    "interface_type": "interface",
}


class GoParseError(ValueError):
    """Raised when a Go source file cannot be read or parsed cleanly."""


@dataclass
class GoFile:
    """Package name and type declarations of a single Go file."""

    path: str
    package: str
    declarations: List[TypeDeclaration] = field(default_factory=list)


class GoSourceParser:
    """Extracts `type` declarations from Go sources using tree-sitter."""

    def __init__(self) -> None:
        self._parser = Parser(GO_LANGUAGE)

    def parse_file(self, path: Path, rel_path: str) -> GoFile:
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise GoParseError(f"cannot read {rel_path}: {exc}") from exc
        return self.parse(source, rel_path)

    def parse(self, source: str, rel_path: str) -> GoFile:
        """Parse Go source text, raising GoParseError on syntax errors."""
        source_bytes = source.encode("utf-8")
        tree = self._parser.parse(source_bytes)
        root = tree.root_node
        if root.has_error:
            line = self._first_error_line(root)
            raise GoParseError(f"syntax error in {rel_path} near line {line}")

        package = self._package_name(root, source_bytes)
        if not package:
            raise GoParseError(f"missing package clause in {rel_path}")

        declarations = [
            TypeDeclaration(
                name=name,
                kind=kind,
                path=rel_path,
                package=package,
                references=references,
            )
            for name, kind, references in self._collect_types(root, source_bytes)
        ]
        return GoFile(path=rel_path, package=package, declarations=declarations)

    @staticmethod
    def _node_text(node: Node, source_bytes: bytes) -> str:
        return source_bytes[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def _package_name(self, root: Node, source_bytes: bytes) -> str:
        for child in root.children:
            if child.type != "package_clause":
                continue
            for part in child.children:
                if part.type == "package_identifier":
                    return self._node_text(part, source_bytes)
        return ""

    def _collect_types(self, node: Node, source_bytes: bytes) -> Iterable[tuple[str, str, List[str]]]:
        for child in node.children:
            if child.type in {"type_spec", "type_alias"}:
                name_node = child.child_by_field_name("name")
                type_node = child.child_by_field_name("type")
                name = self._node_text(name_node, source_bytes) if name_node else ""
                if name and type_node is not None:
                    kind = "other"
                    if child.type == "type_spec":
                        kind = _KIND_BY_NODE.get(type_node.type, "other")
                    references: List[str] = []
                    if kind == "struct":
                        references = self._struct_references(type_node, source_bytes)
                    yield name, kind, references
            yield from self._collect_types(child, source_bytes)

    def _struct_references(self, struct_node: Node, source_bytes: bytes) -> List[str]:
        references: List[str] = []
        for field_list in struct_node.children:
            if field_list.type != "field_declaration_list":
                continue
            for declaration in field_list.named_children:
                if declaration.type != "field_declaration":
                    continue
                type_node = declaration.child_by_field_name("type")
                if type_node is None:
                    continue
                for name in self._type_identifiers(type_node, source_bytes):
                    if name not in references:
                        references.append(name)
        return references

    def _type_identifiers(self, node: Node, source_bytes: bytes) -> Iterable[str]:
        if node.type == "type_identifier":
            yield self._node_text(node, source_bytes)
            return
        for child in node.named_children:
            yield from self._type_identifiers(child, source_bytes)

    @staticmethod
    def _first_error_line(root: Node) -> int:
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node.start_point[0] + 1
            stack.extend(reversed(node.children))
        return root.start_point[0] + 1


__all__ = ["GoFile", "GoParseError", "GoSourceParser", "GO_LANGUAGE"]
