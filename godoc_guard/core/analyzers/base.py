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
Base analyzer interface for Go documentation and style rules.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

from ..common import is_test_package, should_skip_file
from ..lint_policy import LintPolicy
from ..models import Package, SourceFile, Violation
from ..suppression import Pass


class BaseAnalyzer(ABC):
    """Abstract base class for all rule analyzers.

    Subclasses set ``NAME`` (the rule name used by ``nolint`` directives and
    the policy section) and ``HELP`` (one-paragraph description).
    """

    NAME = ""
    HELP = ""

    def __init__(self, name: str | None = None, policy: LintPolicy | None = None):
        """
        Initialize analyzer.

        Args:
            name: Name of the analyzer. Defaults to the class ``NAME``.
            policy: Lint policy holding this rule's settings.
                If None, loads built-in defaults.
        """
        self.name = name or self.NAME
        self.policy = policy or LintPolicy.default()

    @abstractmethod
    def analyze(self, package: Package) -> list[Violation]:
        """
        Analyze a package for rule violations.

        Args:
            package: The package to analyze

        Returns:
            List of violations that survived suppression
        """
        pass

    def get_name(self) -> str:
        """Get the analyzer name."""
        return self.name

    def get_help(self) -> str:
        """Get the analyzer help text."""
        return self.HELP

    @property
    def settings(self):
        """This rule's section of the policy."""
        return self.policy.section(self.NAME)

    def new_pass(self, package: Package) -> Pass:
        """Create a fresh suppression-aware sink for one package."""
        return Pass(self.name, package, warn=self.settings.warn)

    def lintable_files(self, package: Package) -> Iterator[SourceFile]:
        """Yield the files of *package* that rules apply to.

        External test packages yield nothing; generated and test files are
        skipped.
        """
        if is_test_package(package):
            return
        for file in package.files:
            if not should_skip_file(file):
                yield file
