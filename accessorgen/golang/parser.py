"""Tree-sitter powered Go parser."""

from __future__ import annotations

from pathlib import Path
from typing import Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..errors import ParseError
from ..logging import get_logger
from ..models import CompilationUnit

GO_LANGUAGE = Language(tree_sitter_go.language())

logger = get_logger("golang.parser")


class GoParser:
    """Parses Go source files into compilation units."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def parse_file(self, path: Path | str) -> CompilationUnit:
        file_path = Path(path)
        try:
            source = file_path.read_bytes()
        except OSError as exc:
            raise ParseError(file_path, f"cannot read file: {exc}") from exc
        return self.parse_bytes(source, file_path)

    def parse_bytes(self, source: bytes, path: Path | str) -> CompilationUnit:
        file_path = Path(path)
        tree = self._get_parser().parse(source)
        root = tree.root_node
        if root.has_error:
            bad = _first_error(root)
            line = bad.start_point[0] + 1 if bad is not None else None
            raise ParseError(file_path, "syntax error", line=line)

        package_name = _package_name(root)
        if not package_name:
            raise ParseError(file_path, "missing package clause")

        logger.debug("Parsed %s (package %s)", file_path, package_name)
        return CompilationUnit(
            path=file_path,
            source=source,
            tree=tree,
            package_name=package_name,
            imports=tuple(collect_imports(root)),
        )

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(GO_LANGUAGE)
        return self._parser


def node_text(node: Node) -> str:
    text = node.text
    return text.decode("utf-8", errors="replace") if text is not None else ""


def collect_imports(root: Node) -> List[str]:
    """Extract import specs in declaration order, prefixed by their alias if any."""
    imports: List[str] = []
    for declaration in root.named_children:
        if declaration.type != "import_declaration":
            continue
        for spec in _iter_import_specs(declaration):
            path_node = spec.child_by_field_name("path")
            if path_node is None:
                continue
            text = node_text(path_node)
            name_node = spec.child_by_field_name("name")
            if name_node is not None:
                text = f"{node_text(name_node)} {text}"
            imports.append(text)
    return imports


def _iter_import_specs(declaration: Node) -> Iterator[Node]:
    for child in declaration.named_children:
        if child.type == "import_spec":
            yield child
        elif child.type == "import_spec_list":
            for spec in child.named_children:
                if spec.type == "import_spec":
                    yield spec


def _package_name(root: Node) -> str:
    for child in root.named_children:
        if child.type == "package_clause":
            for part in child.named_children:
                if part.type in {"package_identifier", "identifier"}:
                    return node_text(part)
    return ""


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


__all__ = ["GO_LANGUAGE", "GoParser", "collect_imports", "node_text"]
