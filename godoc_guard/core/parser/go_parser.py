# Copyright 2026 Cisco Systems, Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0


"""
Go source parser built on tree-sitter.

Turns a ``.go`` file into the ``SourceFile`` model the analyzers consume:
package clause, top-level declarations with their doc comments, comment
groups, imports and qualified call sites.

Comment grouping follows the Go toolchain: comments on adjacent lines form
one group, a comment sharing a line with code before it starts a group of
its own, and a group is the doc comment of the declaration that begins on
the line directly below it.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from ..common import is_generated
from ..exceptions import GoParseError, PackageLoadError
from ..models import (
    CallSite,
    Comment,
    CommentGroup,
    DeclKind,
    FuncDecl,
    GenDecl,
    ImportSpec,
    PackageDecl,
    Position,
    SourceFile,
    TypeSpec,
    ValueSpec,
)

logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

_DECL_KINDS = {
    "const_declaration": DeclKind.CONST,
    "var_declaration": DeclKind.VAR,
    "type_declaration": DeclKind.TYPE,
}

_SPEC_TYPES = {"const_spec", "var_spec", "type_spec", "type_alias"}

_STRING_TYPES = {"interpreted_string_literal", "raw_string_literal"}

# Statement terminators the grammar exposes as tokens; not source code.
_TERMINATOR_TYPES = {"\n", "\0"}

_ESCAPE_RE = re.compile(r"\\(?:x[0-9a-fA-F]{2}|u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|[0-7]{3}|.)", re.DOTALL)

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
}


def unquote(literal: str) -> str:
    """Decode a Go string literal (interpreted or raw) to its value."""
    if literal.startswith("`"):
        return literal[1:-1].replace("\r", "")
    return _ESCAPE_RE.sub(_unescape, literal[1:-1])


def _unescape(match: re.Match) -> str:
    seq = match.group(0)[1:]
    if seq[0] in "xuU":
        return chr(int(seq[1:], 16))
    if seq[0] in "01234567":
        return chr(int(seq, 8))
    return _SIMPLE_ESCAPES.get(seq, match.group(0))


class GoParser:
    """Parse Go source files into ``SourceFile`` models."""

    def __init__(self):
        self._parser = Parser(GO_LANGUAGE)

    def parse_file(self, path: str | Path) -> SourceFile:
        """
        Parse a Go file from disk.

        Args:
            path: Path to the ``.go`` file

        Returns:
            Parsed SourceFile

        Raises:
            PackageLoadError: If the file cannot be read
            GoParseError: If the file has syntax errors
        """
        path = Path(path)
        try:
            source = path.read_bytes()
        except OSError as e:
            raise PackageLoadError(f"Failed to read {path}: {e}") from e
        return self.parse_source(source, str(path))

    def parse_source(self, source: bytes | str, filename: str) -> SourceFile:
        """
        Parse Go source held in memory.

        Args:
            source: File contents
            filename: Name recorded in every position of the result

        Returns:
            Parsed SourceFile

        Raises:
            GoParseError: If the source has syntax errors or no package clause
        """
        if isinstance(source, str):
            source = source.encode("utf-8")

        tree = self._parser.parse(source)
        root = tree.root_node
        if root.has_error:
            error = _first_error(root)
            line, column = (error.start_point[0] + 1, error.start_point[1] + 1) if error else (0, 0)
            raise GoParseError(f"{filename}:{line}:{column}: syntax error")

        source_file = _FileBuilder(filename, root).build()
        logger.debug(
            "Parsed %s: %d declarations, %d comment groups",
            filename,
            len(source_file.decls),
            len(source_file.comments),
        )
        return source_file


def _first_error(node: Node) -> Node | None:
    stack = [node]
    while stack:
        current = stack.pop()
        if current.type == "ERROR" or current.is_missing:
            return current
        if current.has_error:
            stack.extend(reversed(current.children))
    return None


def _text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace")


class _FileBuilder:
    """Single-use state for turning one syntax tree into a SourceFile."""

    def __init__(self, filename: str, root: Node):
        self.filename = filename
        self.root = root
        self.comment_groups: list[CommentGroup] = []
        # Doc comment keyed by the (row, column) of the token it precedes
        self.lead_comments: dict[tuple[int, int], CommentGroup] = {}

    def build(self) -> SourceFile:
        self._extract_comments()

        package = self._extract_package()
        decls = []
        for child in self.root.named_children:
            if child.type in ("function_declaration", "method_declaration"):
                decls.append(self._build_func(child))
            elif child.type in _DECL_KINDS:
                decls.append(self._build_gen_decl(child))

        return SourceFile(
            path=self.filename,
            package=package,
            decls=tuple(decls),
            comments=tuple(self.comment_groups),
            imports=tuple(self._extract_imports()),
            calls=tuple(self._extract_calls()),
            generated=is_generated(self.comment_groups, package.position.line),
        )

    def _position(self, node: Node) -> Position:
        row, column = node.start_point
        return Position(self.filename, row + 1, column + 1)

    def _doc(self, node: Node) -> CommentGroup | None:
        return self.lead_comments.get(tuple(node.start_point))

    # ------------------------------------------------------------------
    # Comments
    # ------------------------------------------------------------------

    def _extract_comments(self) -> None:
        """Group comments and record which group leads which token."""
        current: list[Comment] = []
        current_end = -1
        current_trailing = False
        pending: CommentGroup | None = None
        pending_trailing = False
        pending_end = -1
        last_code_row = -1

        def flush():
            nonlocal current, pending, pending_trailing, pending_end
            if current:
                pending = CommentGroup(tuple(current))
                pending_trailing = current_trailing
                pending_end = current_end
                self.comment_groups.append(pending)
                current = []

        for leaf in _iter_leaves(self.root):
            if leaf.type != "comment":
                if leaf.type in _TERMINATOR_TYPES or leaf.start_byte == leaf.end_byte:
                    continue
                flush()
                row = leaf.start_point[0]
                if pending is not None and not pending_trailing and pending_end == row - 1:
                    self.lead_comments[tuple(leaf.start_point)] = pending
                pending = None
                last_code_row = leaf.end_point[0]
                continue

            row = leaf.start_point[0]
            if current:
                limit = current_end if current_trailing else current_end + 1
                if row <= limit:
                    current.append(Comment(_text(leaf), self._position(leaf)))
                    current_end = leaf.end_point[0]
                    continue
                flush()

            current = [Comment(_text(leaf), self._position(leaf))]
            current_end = leaf.end_point[0]
            current_trailing = row == last_code_row

        flush()

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def _extract_package(self) -> PackageDecl:
        for child in self.root.named_children:
            if child.type == "package_clause":
                name = next((c for c in child.named_children if c.type == "package_identifier"), None)
                if name is None:
                    break
                return PackageDecl(name=_text(name), position=self._position(child), doc=self._doc(child))
        raise GoParseError(f"{self.filename}: missing package clause")

    def _build_func(self, node: Node) -> FuncDecl:
        receiver = None
        if node.type == "method_declaration":
            receiver = self._receiver_type(node.child_by_field_name("receiver"))

        nested: list[GenDecl] = []
        body = node.child_by_field_name("body")
        if body is not None:
            for child in _iter_descendants(body):
                if child.type in _DECL_KINDS:
                    nested.append(self._build_gen_decl(child))

        return FuncDecl(
            name=_text(node.child_by_field_name("name")),
            position=self._position(node),
            end_line=node.end_point[0] + 1,
            doc=self._doc(node),
            receiver=receiver,
            nested=tuple(nested),
        )

    def _receiver_type(self, params: Node | None) -> str | None:
        if params is None:
            return None
        for param in params.named_children:
            if param.type == "parameter_declaration":
                type_node = param.child_by_field_name("type")
                if type_node is not None:
                    return _text(type_node)
        return None

    def _build_gen_decl(self, node: Node) -> GenDecl:
        spec_nodes: list[Node] = []
        parenthesized = False
        for child in node.children:
            if child.type == "(":
                parenthesized = True
            elif child.type in _SPEC_TYPES:
                spec_nodes.append(child)
            elif child.type.endswith("_spec_list"):
                parenthesized = True
                spec_nodes.extend(c for c in child.named_children if c.type in _SPEC_TYPES)

        specs = tuple(self._build_spec(spec, parenthesized) for spec in spec_nodes)
        return GenDecl(
            kind=_DECL_KINDS[node.type],
            position=self._position(node),
            specs=specs,
            doc=self._doc(node),
            parenthesized=parenthesized,
        )

    def _build_spec(self, node: Node, parenthesized: bool) -> ValueSpec | TypeSpec:
        # A standalone declaration's doc belongs to the declaration, not its spec
        doc = self._doc(node) if parenthesized else None

        if node.type in ("type_spec", "type_alias"):
            return TypeSpec(name=_text(node.child_by_field_name("name")), position=self._position(node), doc=doc)

        names = tuple(_text(n) for n in node.children_by_field_name("name") if n.type == "identifier")
        type_node = node.child_by_field_name("type")
        type_name = _text(type_node) if type_node is not None and type_node.type == "type_identifier" else None
        return ValueSpec(names=names, position=self._position(node), type_name=type_name, doc=doc)

    # ------------------------------------------------------------------
    # Imports and calls
    # ------------------------------------------------------------------

    def _extract_imports(self) -> list[ImportSpec]:
        imports = []
        for child in self.root.named_children:
            if child.type != "import_declaration":
                continue
            for spec in _iter_descendants(child):
                if spec.type != "import_spec":
                    continue
                path = spec.child_by_field_name("path")
                name = spec.child_by_field_name("name")
                imports.append(
                    ImportSpec(
                        path=unquote(_text(path)),
                        position=self._position(spec),
                        name=_text(name) if name is not None else None,
                    )
                )
        return imports

    def _extract_calls(self) -> list[CallSite]:
        calls = []
        for node in _iter_descendants(self.root):
            if node.type != "call_expression":
                continue
            call_name = self._get_call_name(node)
            if call_name is None:
                continue
            qualifier, function = call_name

            arguments: list[str | None] = []
            arg_list = node.child_by_field_name("arguments")
            if arg_list is not None:
                for arg in arg_list.named_children:
                    if arg.type == "comment":
                        continue
                    arguments.append(unquote(_text(arg)) if arg.type in _STRING_TYPES else None)

            calls.append(
                CallSite(
                    qualifier=qualifier,
                    function=function,
                    position=self._position(node),
                    arguments=tuple(arguments),
                )
            )
        return calls

    def _get_call_name(self, node: Node) -> tuple[str, str] | None:
        """Extract ``(qualifier, function)`` from an ``ident.Func(...)`` call."""
        func = node.child_by_field_name("function")
        if func is None or func.type != "selector_expression":
            return None
        operand = func.child_by_field_name("operand")
        field = func.child_by_field_name("field")
        if operand is None or field is None or operand.type != "identifier":
            return None
        return _text(operand), _text(field)


def _iter_leaves(root: Node):
    """Yield leaf tokens in source order. Comments are yielded whole."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "comment" or node.child_count == 0:
            yield node
            continue
        stack.extend(reversed(node.children))


def _iter_descendants(root: Node):
    """Yield every descendant of *root* in pre-order."""
    stack = list(reversed(root.children))
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
