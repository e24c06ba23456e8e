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
Doculint rule: godoc-style documentation on packages, functions and declarations.

Checks, per non-generated, non-test file:

* the package file (``<pkg>.go`` or ``doc.go``) carries a comment starting
  with ``Package <pkg>``, and the package name is lowercase without ``-``
  or ``_``; a package with no such file gets one package-level violation
* functions spanning at least ``min_fun_len`` lines have a comment that
  starts with ``<name> ``
* const, type and var blocks have a block comment, every spec declares a
  single name, and every name has a comment starting with that name

A parenthesized const block directly below a single type declaration whose
members are all explicitly typed with that type is treated as an
enumeration. The type's comment documents it, so the block and its members
need no comments of their own::

    // Color is a paint color.
    type Color int

    const (
        Red   Color = iota
        Green Color = 2
    )

Declarations nested inside function bodies are not checked.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from ..common import DOC_FILENAME, FUNC_INIT, FUNC_MAIN, is_main_package
from ..exceptions import AnalysisError
from ..models import (
    CommentGroup,
    DeclKind,
    FuncDecl,
    GenDecl,
    Package,
    PackageDecl,
    Position,
    SourceFile,
    TypeSpec,
    ValueSpec,
    Violation,
)
from ..suppression import Reporter
from .base import BaseAnalyzer

logger = logging.getLogger(__name__)

# Used when the configured minimum function length is zero
DEFAULT_MIN_FUN_LEN = 10

_KIND_NOUNS = {
    DeclKind.CONST: ("constant", "constants"),
    DeclKind.TYPE: ("type", "types"),
    DeclKind.VAR: ("variable", "variables"),
}


class TopLevelIndex:
    """The ordered top-level declarations of one file.

    Answers "is this declaration at file scope" and "what comes right before
    it" without tracking ancestors during the walk.
    """

    def __init__(self, decls: Iterable[FuncDecl | GenDecl]):
        self.decls = tuple(decls)
        self._positions = {id(decl): i for i, decl in enumerate(self.decls)}

    def is_top_level(self, decl: FuncDecl | GenDecl) -> bool:
        return id(decl) in self._positions

    def previous(self, decl: FuncDecl | GenDecl) -> FuncDecl | GenDecl | None:
        """Return the top-level declaration directly before *decl*, if any."""
        i = self._positions.get(id(decl))
        if not i:
            return None
        return self.decls[i - 1]


def iter_declarations(decls: Iterable[FuncDecl | GenDecl]) -> Iterator[FuncDecl | GenDecl]:
    """Depth-first walk: each function is followed by the blocks nested in its body."""
    for decl in decls:
        yield decl
        if isinstance(decl, FuncDecl):
            yield from decl.nested


def is_enum_block(decl: GenDecl, index: TopLevelIndex) -> bool:
    """Check whether a const block qualifies for the enumeration exemption."""
    if decl.kind is not DeclKind.CONST or not decl.parenthesized:
        return False
    if not index.is_top_level(decl):
        return False

    prev = index.previous(decl)
    if not isinstance(prev, GenDecl) or prev.kind is not DeclKind.TYPE:
        return False
    if prev.parenthesized or len(prev.specs) != 1 or not isinstance(prev.specs[0], TypeSpec):
        return False

    type_name = prev.specs[0].name
    return all(isinstance(spec, ValueSpec) and spec.type_name == type_name for spec in decl.specs)


def _doc_text(doc: CommentGroup) -> str:
    return doc.text().strip()


def validate_package_name(r: Reporter, package: PackageDecl) -> None:
    """Package names are lowercase and contain neither ``-`` nor ``_``."""
    if "-" in package.name or "_" in package.name:
        r.reportf(package.position, 'package "%s" should not contain - or _ in name', package.name)

    if package.name != package.name.lower():
        r.reportf(package.position, 'package "%s" should be all lowercase', package.name)


def validate_package_comment(r: Reporter, package: PackageDecl) -> None:
    if package.doc is None:
        r.reportf(
            package.position,
            'package "%s" has no comment associated with it in "%s.go"',
            package.name,
            package.name,
        )
        return

    expected = f"Package {package.name}"
    if not _doc_text(package.doc).startswith(expected):
        r.reportf(package.position, 'comment for package "%s" should begin with "%s"', package.name, expected)


def validate_func_decl(r: Reporter, decl: FuncDecl) -> None:
    """The comment must read as a sentence about the function."""
    if decl.name == FUNC_INIT:
        return

    if decl.doc is None:
        r.reportf(decl.position, 'function "%s" has no comment associated with it', decl.name)
        return

    if not _doc_text(decl.doc).startswith(decl.name + " "):
        r.reportf(
            decl.position,
            'comment for function "%s" should be a sentence that starts with "%s "',
            decl.name,
            decl.name,
        )


def validate_specs(r: Reporter, decl: GenDecl, docs_required: bool = True) -> None:
    """Check that every spec of *decl* names one identifier and documents it.

    With *docs_required* unset only the one-identifier rule is enforced.
    """
    singular, plural = _KIND_NOUNS[decl.kind]

    for spec in decl.specs:
        if isinstance(spec, TypeSpec):
            names: tuple[str, ...] = (spec.name,)
        elif isinstance(spec, ValueSpec):
            names = spec.names
        else:
            logger.debug("Skipping malformed spec at %s", decl.position)
            continue

        if not names:
            continue

        if len(names) > 1:
            quoted = ", ".join(f'"{name}"' for name in names)
            r.reportf(
                spec.position,
                "%s %s should be separated and each have a comment associated with them",
                plural,
                quoted,
            )
            continue

        if not docs_required:
            continue

        name = names[0]
        if decl.kind is DeclKind.VAR and name == "_":
            continue

        # A standalone declaration keeps its comment on the declaration
        doc = spec.doc if decl.parenthesized else decl.doc
        if doc is None:
            r.reportf(spec.position, '%s "%s" has no comment associated with it', singular, name)
            continue

        if not _doc_text(doc).startswith(name):
            r.reportf(spec.position, 'comment for %s "%s" should begin with "%s"', singular, name, name)


class DoculintAnalyzer(BaseAnalyzer):
    """Validates godoc documentation on packages, functions and declarations."""

    NAME = "doculint"
    HELP = (
        "Checks for proper function, type, package, constant, and string and numeric literal "
        "documentation in accordance with godoc standards."
    )

    def analyze(self, package: Package) -> list[Violation]:
        sink = self.new_pass(package)
        settings = self.settings

        check_package = settings.validate_packages and (settings.validate_main_package or not is_main_package(package))

        has_package_file = False
        seen_file = False

        for file in self.lintable_files(package):
            seen_file = True

            if not check_package:
                has_package_file = True
            elif file.base_name in (package.name, DOC_FILENAME):
                has_package_file = True
                validate_package_name(sink, file.package)
                validate_package_comment(sink, file.package)

            self._check_declarations(sink, package, file)

        if seen_file and not has_package_file:
            sink.reportf(
                Position(package.directory),
                'package "%s" has no file with the same name containing package comment',
                package.name,
            )

        return sink.violations

    def _check_declarations(self, r: Reporter, package: Package, file: SourceFile) -> None:
        settings = self.settings
        min_fun_len = settings.min_fun_len or DEFAULT_MIN_FUN_LEN
        index = TopLevelIndex(file.decls)

        func_start, func_end = 0, 0
        for decl in iter_declarations(file.decls):
            if isinstance(decl, FuncDecl):
                func_start, func_end = decl.position.line, decl.end_line

                if not settings.validate_functions:
                    continue
                if is_main_package(package) and decl.name == FUNC_MAIN:
                    continue
                if decl.span >= min_fun_len:
                    validate_func_decl(r, decl)

            elif isinstance(decl, GenDecl):
                if func_start <= decl.position.line <= func_end:
                    continue
                self._check_gen_decl(r, decl, index)

            else:
                raise AnalysisError(f"unexpected declaration type {type(decl).__name__}")

    def _check_gen_decl(self, r: Reporter, decl: GenDecl, index: TopLevelIndex) -> None:
        settings = self.settings
        enabled = {
            DeclKind.CONST: settings.validate_constants,
            DeclKind.TYPE: settings.validate_types,
            DeclKind.VAR: settings.validate_variables,
        }
        if not enabled[decl.kind]:
            return

        if decl.parenthesized and decl.doc is None:
            if is_enum_block(decl, index):
                logger.debug("Treating const block at %s as an enumeration", decl.position)
                validate_specs(r, decl, docs_required=False)
                return
            r.reportf(decl.position, "%s block has no comment associated with it", _KIND_NOUNS[decl.kind][0])

        validate_specs(r, decl)
