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
Tests for the why analyzer (nolint directive hygiene).
"""

from __future__ import annotations

import pytest

from godoc_guard.core.analyzers.why import NAKED_MESSAGE, UNJUSTIFIED_MESSAGE, WhyAnalyzer, check_directive
from godoc_guard.core.models import Comment, Position

SOURCE = """
    // Package widget builds widgets.
    package widget

    //nolint:doculint // Why: mirrors an upstream name.
    var A = 1

    //nolint:doculint
    var B = 1

    //nolint // Why: everything.
    var C = 1

    //nolint
    var D = 1

    var E = 1 //nolint:todo,errorlint // Why: copied verbatim.

    var F = 1 //nolint:why
    """


class TestWhyAnalyzer:
    def test_reports_naked_and_unjustified_directives(self, make_package):
        package = make_package({"widget.go": SOURCE}, name="widget")
        violations = WhyAnalyzer().analyze(package)

        assert [(v.position.line, v.message) for v in violations] == [
            (7, UNJUSTIFIED_MESSAGE),
            (10, NAKED_MESSAGE),
            (13, NAKED_MESSAGE),
        ]
        assert all(v.rule_name == "why" for v in violations)

    def test_ignores_test_files(self, make_package):
        package = make_package(
            {
                "widget.go": "// Package widget builds widgets.\npackage widget\n",
                "widget_test.go": "package widget\n\n//nolint\nvar X = 1\n",
            },
            name="widget",
        )
        assert WhyAnalyzer().analyze(package) == []

    def test_plain_comments_are_ignored(self, make_package):
        package = make_package(
            {"widget.go": "// Package widget builds widgets.\npackage widget\n\n// no lint here\nvar X = 1\n"},
            name="widget",
        )
        assert WhyAnalyzer().analyze(package) == []


def _comment(text: str) -> Comment:
    return Comment(text, Position("widget.go", 1, 1))


class TestCheckDirective:
    @pytest.mark.parametrize(
        "text",
        [
            "//nolint:doculint // Why: mirrors an upstream name.",
            "// nolint:todo,errorlint // Why: copied verbatim.",
            "// plain comment",
            "// no lint here",
        ],
    )
    def test_accepted(self, text):
        assert check_directive(_comment(text)) is None

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("//nolint", NAKED_MESSAGE),
            ("//nolint // Why: everything.", NAKED_MESSAGE),
            ("//nolint:", NAKED_MESSAGE),
            ("//nolint:doculint", UNJUSTIFIED_MESSAGE),
            ("//nolint:doculint // legacy", UNJUSTIFIED_MESSAGE),
            ("//nolint:doc lint // Why: spaced rule name.", UNJUSTIFIED_MESSAGE),
            ("//nolintish words", UNJUSTIFIED_MESSAGE),
        ],
    )
    def test_rejected(self, text, expected):
        assert check_directive(_comment(text)) == expected
