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
Suppression-aware violation reporting.

Consumers silence a rule on a specific line with an inline directive::

    func foo() { //nolint:doculint // Why: generated shim, documented upstream.

or on the line directly above the offending one::

    //nolint:doculint,todo // Why: vendored verbatim.
    func foo() {

A directive recorded at line ``L`` suppresses violations reported at line
``L`` or ``L + 1`` of the same file, for the named rules only. It never
reaches back to ``L - 1``. A directive that names no rules suppresses
nothing; the ``why`` rule reports it instead.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Protocol

from .models import Comment, Package, Position, Severity, SourceFile, Violation

logger = logging.getLogger(__name__)

# Token that starts every suppression directive.
NOLINT_DIRECTIVE = "nolint"

# Marker that introduces the justification trailing a directive.
JUSTIFICATION_MARKER = "//"

_JUSTIFICATION_RE = re.compile(r"^//\s?Why:\s?.+$")


@dataclass(frozen=True)
class SuppressionDirective:
    """A parsed ``nolint`` comment."""

    filename: str
    line: int
    rule_names: frozenset[str]
    has_justification: bool

    def matches(self, position: Position) -> bool:
        """Check if this directive covers *position*: same file, same or next line."""
        return self.filename == position.filename and position.line in (self.line, self.line + 1)


def parse_directive(comment: Comment) -> SuppressionDirective | None:
    """Parse *comment* as a suppression directive.

    Returns ``None`` when the comment is not a directive. The rule list is
    whatever follows ``nolint:`` up to the justification marker, split on
    commas; a bare ``nolint`` yields an empty rule set.
    """
    text = comment.trimmed
    has_justification = False

    marker_idx = text.find(JUSTIFICATION_MARKER)
    if marker_idx != -1:
        has_justification = bool(_JUSTIFICATION_RE.match(text[marker_idx:]))
        text = text[:marker_idx].strip()

    if text == NOLINT_DIRECTIVE:
        rule_names: frozenset[str] = frozenset()
    elif text.startswith(NOLINT_DIRECTIVE + ":"):
        raw = text[len(NOLINT_DIRECTIVE) + 1 :]
        rule_names = frozenset(name.strip() for name in raw.split(",") if name.strip())
    else:
        return None

    return SuppressionDirective(
        filename=comment.position.filename,
        line=comment.position.line,
        rule_names=rule_names,
        has_justification=has_justification,
    )


def iter_directives(files: Iterable[SourceFile]) -> Iterable[SuppressionDirective]:
    """Yield every directive found in the comments of *files*, in source order."""
    for file in files:
        for group in file.comments:
            for comment in group.comments:
                directive = parse_directive(comment)
                if directive is not None:
                    yield directive


class SuppressionTable:
    """Lines suppressed for one rule, keyed by filename.

    Built once per file set before any rule runs and read-only afterwards.
    """

    def __init__(self, rule_name: str, lines: Mapping[str, frozenset[int]] | None = None):
        self.rule_name = rule_name
        self._lines: dict[str, frozenset[int]] = dict(lines or {})

    @classmethod
    def build(cls, rule_name: str, files: Iterable[SourceFile]) -> SuppressionTable:
        collected: dict[str, set[int]] = {}
        for directive in iter_directives(files):
            if rule_name in directive.rule_names:
                collected.setdefault(directive.filename, set()).add(directive.line)
        return cls(rule_name, {name: frozenset(lines) for name, lines in collected.items()})

    def matches(self, position: Position) -> bool:
        lines = self._lines.get(position.filename)
        if not lines:
            return False
        return position.line in lines or (position.line - 1) in lines

    def suppressed_lines(self, filename: str) -> list[int]:
        return sorted(self._lines.get(filename, ()))

    def __len__(self) -> int:
        return sum(len(lines) for lines in self._lines.values())


class Reporter(Protocol):
    """Anything that accepts violation reports, so helpers need not depend on Pass."""

    def reportf(self, position: Position, fmt: str, *args: object) -> None: ...


class Pass:
    """Violation sink for one rule over one package.

    Drops reports covered by a ``nolint`` directive for the rule and records
    the rest, as warnings when ``warn`` is set and errors otherwise.
    """

    def __init__(self, rule_name: str, package: Package, *, warn: bool = False):
        self.rule_name = rule_name
        self.package = package
        self.warn = warn
        self.table = SuppressionTable.build(rule_name, package.files)
        self._violations: list[Violation] = []

    @property
    def files(self) -> tuple[SourceFile, ...]:
        return self.package.files

    @property
    def violations(self) -> list[Violation]:
        return list(self._violations)

    def reportf(self, position: Position, fmt: str, *args: object) -> None:
        """Report a violation at *position* unless a directive suppresses it."""
        if self.table.matches(position):
            logger.debug("Suppressed %s violation at %s", self.rule_name, position)
            return

        message = fmt % args if args else fmt
        self._violations.append(
            Violation(
                position=position,
                message=message,
                rule_name=self.rule_name,
                severity=Severity.WARNING if self.warn else Severity.ERROR,
            )
        )
