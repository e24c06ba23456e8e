# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Tests for nolint directive parsing and suppression-aware reporting.
"""

from __future__ import annotations

import pytest

from godoc_guard.core.models import Comment, Package, Position, Severity
from godoc_guard.core.suppression import Pass, SuppressionTable, parse_directive

SOURCE = """
    package foo

    //nolint:doculint // Why: shim documented upstream.
    func A() {}

    func B() {} //nolint:doculint,todo // Why: generated.

    func C() {}
    //nolint:doculint // Why: placed after the code.

    //nolint // Why: names no rule.
    func D() {}
    """


@pytest.fixture
def package(parse) -> Package:
    return Package(name="foo", directory="/src/foo", files=(parse(SOURCE, "foo.go"),))


def _comment(text: str, line: int = 1) -> Comment:
    return Comment(text, Position("foo.go", line, 1))


class TestParseDirective:
    def test_rules_and_justification(self):
        directive = parse_directive(_comment("//nolint:doculint, todo // Why: shim"))
        assert directive is not None
        assert directive.rule_names == frozenset({"doculint", "todo"})
        assert directive.has_justification

    def test_leading_space_allowed(self):
        directive = parse_directive(_comment("// nolint:todo"))
        assert directive is not None
        assert directive.rule_names == frozenset({"todo"})
        assert not directive.has_justification

    def test_bare_directive_names_nothing(self):
        directive = parse_directive(_comment("//nolint"))
        assert directive is not None
        assert directive.rule_names == frozenset()

    def test_reason_without_why_marker(self):
        directive = parse_directive(_comment("//nolint:todo // legacy"))
        assert directive is not None
        assert not directive.has_justification

    @pytest.mark.parametrize("text", ["// plain comment", "// nolintish words", "/* block */"])
    def test_not_a_directive(self, text):
        assert parse_directive(_comment(text)) is None

    def test_directive_covers_same_and_next_line(self):
        directive = parse_directive(_comment("//nolint:todo", line=5))
        assert directive.matches(Position("foo.go", 5, 1))
        assert directive.matches(Position("foo.go", 6, 1))
        assert not directive.matches(Position("foo.go", 4, 1))
        assert not directive.matches(Position("bar.go", 5, 1))


class TestSuppressionTable:
    def test_lines_per_rule(self, package):
        assert SuppressionTable.build("doculint", package.files).suppressed_lines("foo.go") == [3, 6, 9]
        assert SuppressionTable.build("todo", package.files).suppressed_lines("foo.go") == [6]

    def test_bare_directive_suppresses_nothing(self, package):
        table = SuppressionTable.build("why", package.files)
        assert len(table) == 0
        assert not table.matches(Position("foo.go", 12, 1))

    @pytest.mark.parametrize(
        "line, suppressed",
        [
            (3, True),  # directive line itself
            (4, True),  # line below the directive
            (6, True),  # inline directive
            (7, True),
            (8, False),  # directive comes after the code
            (10, True),
            (11, False),
        ],
    )
    def test_window(self, package, line, suppressed):
        table = SuppressionTable.build("doculint", package.files)
        assert table.matches(Position("foo.go", line, 1)) is suppressed

    def test_other_file_is_not_suppressed(self, package):
        table = SuppressionTable.build("doculint", package.files)
        assert not table.matches(Position("other.go", 4, 1))


class TestPass:
    def test_reportf_drops_suppressed(self, package):
        sink = Pass("doculint", package)
        sink.reportf(Position("foo.go", 4, 1), 'function "%s" has no comment', "A")
        sink.reportf(Position("foo.go", 8, 1), 'function "%s" has no comment', "C")

        (violation,) = sink.violations
        assert violation.position.line == 8
        assert violation.message == 'function "C" has no comment'
        assert violation.rule_name == "doculint"
        assert violation.severity is Severity.ERROR

    def test_other_rules_are_not_suppressed(self, package):
        sink = Pass("header", package)
        sink.reportf(Position("foo.go", 4, 1), "missing header")
        assert len(sink.violations) == 1

    def test_warn_downgrades_severity(self, package):
        sink = Pass("errorlint", package, warn=True)
        sink.reportf(Position("foo.go", 8, 1), "message should not be empty")
        assert sink.violations[0].severity is Severity.WARNING

    def test_message_without_args_is_verbatim(self, package):
        sink = Pass("todo", package)
        sink.reportf(Position("foo.go", 1, 1), "100% wrong")
        assert sink.violations[0].message == "100% wrong"
