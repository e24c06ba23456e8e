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
Tests for the copyright analyzer.
"""

from __future__ import annotations

import pytest

from godoc_guard.core.analyzers.copyright import CopyrightAnalyzer
from godoc_guard.core.exceptions import PolicyError
from godoc_guard.core.lint_policy import LintPolicy

GOOD = """
    // Copyright 2026 Acme Corp. All rights reserved.

    // Package widget builds widgets.
    package widget
    """

MISSING = """
    // Package widget builds widgets.
    package widget
    """

LATE_COPYRIGHT = """
    // Package widget builds widgets.
    package widget

    // Copyright 2026 Acme Corp. All rights reserved.
    """


def _analyzer(**copyright) -> CopyrightAnalyzer:
    return CopyrightAnalyzer(policy=LintPolicy.from_dict({"copyright": copyright}))


class TestCopyrightPattern:
    def test_matching_file_passes(self, make_package):
        package = make_package({"widget.go": GOOD}, name="widget")
        assert _analyzer(pattern="^Copyright 20.*$").analyze(package) == []

    def test_missing_copyright(self, make_package):
        package = make_package({"widget.go": GOOD, "build.go": MISSING}, name="widget")
        (violation,) = _analyzer(pattern="^Copyright 20.*$").analyze(package)

        assert violation.position.filename.endswith("build.go")
        assert violation.position.line == 0
        assert violation.message == (
            f'file "{violation.position.filename}" does not contain the required copyright '
            "regular expression [^Copyright 20.*$] (sans-brackets) as a comment on line 1"
        )

    def test_only_line_one_counts(self, make_package):
        package = make_package({"widget.go": LATE_COPYRIGHT}, name="widget")
        assert len(_analyzer(pattern="Copyright").analyze(package)) == 1

    def test_pattern_is_searched_not_anchored(self, make_package):
        package = make_package({"widget.go": GOOD}, name="widget")
        assert _analyzer(pattern="Acme Corp").analyze(package) == []

    def test_pattern_wins_over_text(self, make_package):
        package = make_package({"widget.go": GOOD}, name="widget")
        analyzer = _analyzer(pattern="^Copyright", text="something else")
        assert analyzer.match_type == "regular expression"
        assert analyzer.analyze(package) == []

    def test_invalid_pattern(self):
        with pytest.raises(PolicyError, match="copyright.pattern"):
            _analyzer(pattern="Copyright (")


class TestCopyrightText:
    def test_exact_text(self, make_package):
        package = make_package({"widget.go": GOOD}, name="widget")
        assert _analyzer(text="Copyright 2026 Acme Corp. All rights reserved.").analyze(package) == []

    def test_text_must_match_exactly(self, make_package):
        package = make_package({"widget.go": GOOD}, name="widget")
        (violation,) = _analyzer(text="Copyright 2026 Acme Corp.").analyze(package)
        assert "required copyright string [Copyright 2026 Acme Corp.]" in violation.message

    def test_no_op_without_text_or_pattern(self, make_package):
        package = make_package({"widget.go": MISSING}, name="widget")
        assert _analyzer().analyze(package) == []


class TestCopyrightSkips:
    def test_test_and_generated_files(self, make_package):
        files = {
            "widget.go": GOOD,
            "widget_test.go": MISSING,
            "shape_string.go": "// Code generated by stringer. DO NOT EDIT.\n\npackage widget\n",
        }
        package = make_package(files, name="widget")
        assert _analyzer(pattern="^Copyright").analyze(package) == []

    def test_suppression_does_not_reach_line_zero(self, make_package):
        source = "//nolint:copyright // Why: third-party file.\npackage widget\n"
        package = make_package({"widget.go": source}, name="widget")
        assert len(_analyzer(pattern="^Copyright").analyze(package)) == 1
