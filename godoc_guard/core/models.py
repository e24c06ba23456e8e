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
Data models for parsed Go source trees and lint violations.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Union

# Matches comment text (sans "//") that the Go toolchain treats as a directive
# and drops from doc comment text, e.g. "nolint:foo" or "go:generate".
_DIRECTIVE_RE = re.compile(r"^(?:line |extern |export |[a-z0-9]+:[a-z0-9])")


class Severity(str, Enum):
    """Severity levels for lint violations."""

    ERROR = "ERROR"
    WARNING = "WARNING"


class DeclKind(str, Enum):
    """Kinds of general (parenthesizable) declarations."""

    CONST = "const"
    TYPE = "type"
    VAR = "var"


@dataclass(frozen=True)
class Position:
    """A resolved source location. Line and column are 1-based; 0 means unknown."""

    filename: str
    line: int = 0
    column: int = 0

    def __str__(self) -> str:
        if self.line <= 0:
            return self.filename
        if self.column <= 0:
            return f"{self.filename}:{self.line}"
        return f"{self.filename}:{self.line}:{self.column}"


@dataclass(frozen=True)
class Comment:
    """A single comment, text includes its markers."""

    text: str
    position: Position

    @property
    def trimmed(self) -> str:
        """Comment text with a leading ``//`` removed and surrounding whitespace trimmed."""
        text = self.text
        if text.startswith("//"):
            text = text[2:]
        return text.strip()

    @property
    def is_line_comment(self) -> bool:
        return self.text.startswith("//")


@dataclass(frozen=True)
class CommentGroup:
    """A run of comments with no blank line between them."""

    comments: tuple[Comment, ...]

    @property
    def position(self) -> Position:
        return self.comments[0].position

    @property
    def end_line(self) -> int:
        last = self.comments[-1]
        return last.position.line + last.text.count("\n")

    def text(self) -> str:
        """Return the comment text without markers or tool directives.

        Leading and trailing blank lines are removed and runs of blank lines
        are collapsed into one.
        """
        lines: list[str] = []
        for comment in self.comments:
            raw = comment.text
            if raw.startswith("//"):
                body = raw[2:]
                if _DIRECTIVE_RE.match(body):
                    continue
                if body.startswith(" "):
                    body = body[1:]
            else:
                body = raw[2:-2] if raw.startswith("/*") and raw.endswith("*/") else raw
            lines.extend(line.rstrip() for line in body.split("\n"))

        out: list[str] = []
        for line in lines:
            if not line and (not out or not out[-1]):
                continue
            out.append(line)
        while out and not out[-1]:
            out.pop()
        return "\n".join(out)


@dataclass(frozen=True)
class ValueSpec:
    """A constant or variable specification such as ``A, B MyType = 1, 2``."""

    names: tuple[str, ...]
    position: Position
    type_name: str | None = None  # only set for a plain type identifier
    doc: CommentGroup | None = None


@dataclass(frozen=True)
class TypeSpec:
    """A single type specification such as ``Color int``."""

    name: str
    position: Position
    doc: CommentGroup | None = None


Spec = Union[ValueSpec, TypeSpec]


@dataclass(frozen=True)
class PackageDecl:
    """The package clause of a file."""

    name: str
    position: Position
    doc: CommentGroup | None = None


@dataclass(frozen=True)
class GenDecl:
    """A const, type, or var declaration, parenthesized or standalone."""

    kind: DeclKind
    position: Position
    specs: tuple[Any, ...] = ()
    doc: CommentGroup | None = None
    parenthesized: bool = False


@dataclass(frozen=True)
class FuncDecl:
    """A function or method declaration.

    ``nested`` carries the declaration blocks found inside the function body,
    in source order, so a single walk can see them.
    """

    name: str
    position: Position
    end_line: int
    doc: CommentGroup | None = None
    receiver: str | None = None
    nested: tuple[GenDecl, ...] = ()

    @property
    def span(self) -> int:
        """Number of source lines from ``func`` to the closing brace, inclusive."""
        return self.end_line - self.position.line + 1


Declaration = Union[PackageDecl, FuncDecl, GenDecl]


@dataclass(frozen=True)
class ImportSpec:
    """An import of a package path, optionally renamed."""

    path: str
    position: Position
    name: str | None = None

    @property
    def local_name(self) -> str:
        """Identifier the importing file uses to refer to the package."""
        if self.name and self.name not in (".", "_"):
            return self.name
        return self.path.rstrip("/").rsplit("/", 1)[-1]


@dataclass(frozen=True)
class CallSite:
    """A qualified call ``qualifier.function(args...)``.

    ``arguments`` holds the decoded value of each string literal argument and
    ``None`` for every other argument expression.
    """

    qualifier: str
    function: str
    position: Position
    arguments: tuple[str | None, ...] = ()


@dataclass(frozen=True)
class SourceFile:
    """One parsed Go file."""

    path: str
    package: PackageDecl
    decls: tuple[FuncDecl | GenDecl, ...] = ()
    comments: tuple[CommentGroup, ...] = ()
    imports: tuple[ImportSpec, ...] = ()
    calls: tuple[CallSite, ...] = ()
    generated: bool = False

    @property
    def base_name(self) -> str:
        """File name without directory or ``.go`` suffix."""
        name = Path(self.path).name
        return name[:-3] if name.endswith(".go") else name

    @property
    def is_test(self) -> bool:
        return Path(self.path).name.endswith("_test.go")

    @property
    def is_generated(self) -> bool:
        return self.generated


@dataclass(frozen=True)
class Package:
    """The files making up one Go package.

    ``ignored_files`` are excluded by build constraints. They are parsed so
    their positions stay resolvable, but no rule analyzes them.
    """

    name: str
    directory: str
    files: tuple[SourceFile, ...] = ()
    ignored_files: tuple[SourceFile, ...] = ()


@dataclass(frozen=True)
class Violation:
    """One reported instance of a rule failing at a source position."""

    position: Position
    message: str
    rule_name: str
    severity: Severity = Severity.ERROR

    def format(self) -> str:
        """Render as ``file:line:col: message (rule)``."""
        text = f"{self.position}: {self.message} ({self.rule_name})"
        if self.severity == Severity.WARNING:
            text += " [WARNING]"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Convert violation to dictionary."""
        return {
            "file_path": self.position.filename,
            "line_number": self.position.line or None,
            "column": self.position.column or None,
            "message": self.message,
            "rule_name": self.rule_name,
            "severity": self.severity.value,
        }


@dataclass
class LintResult:
    """Results from linting a single package."""

    package_name: str
    directory: str
    violations: list[Violation] = field(default_factory=list)
    analyzers_used: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def error_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for v in self.violations if v.severity == Severity.WARNING)

    @property
    def has_errors(self) -> bool:
        """Check if any error-severity violation remains after suppression."""
        return self.error_count > 0

    def get_violations_by_rule(self, rule_name: str) -> list[Violation]:
        return [v for v in self.violations if v.rule_name == rule_name]

    def to_dict(self) -> dict[str, Any]:
        """Convert lint result to dictionary."""
        return {
            "package": self.package_name,
            "directory": self.directory,
            "has_errors": self.has_errors,
            "error_count": self.error_count,
            "warning_count": self.warning_count,
            "violations": [v.to_dict() for v in self.violations],
            "duration_ms": int(self.duration_seconds * 1000),
            "analyzers_used": self.analyzers_used,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass
class Report:
    """Aggregated report from linting one or more packages."""

    results: list[LintResult] = field(default_factory=list)
    total_packages: int = 0
    total_violations: int = 0
    error_count: int = 0
    warning_count: int = 0
    load_errors: list[str] = field(default_factory=list)
    timestamp: datetime = field(default_factory=datetime.now)

    def add_result(self, result: LintResult):
        """Add a lint result and update counters."""
        self.results.append(result)
        self.total_packages += 1
        self.total_violations += len(result.violations)
        self.error_count += result.error_count
        self.warning_count += result.warning_count

    @property
    def has_errors(self) -> bool:
        return self.error_count > 0

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary."""
        return {
            "summary": {
                "total_packages": self.total_packages,
                "total_violations": self.total_violations,
                "errors": self.error_count,
                "warnings": self.warning_count,
                "load_errors": list(self.load_errors),
                "timestamp": self.timestamp.isoformat(),
            },
            "results": [result.to_dict() for result in self.results],
        }
