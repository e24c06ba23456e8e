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
Core lint engine for orchestrating package analysis.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from .analyzer_factory import build_analyzers
from .analyzers.base import BaseAnalyzer
from .common import is_test_package
from .exceptions import PackageLoadError
from .lint_policy import LintPolicy
from .loader import PackageLoader
from .models import LintResult, Package, Report, Violation

logger = logging.getLogger(__name__)


class Linter:
    """Main linter that runs every analyzer over Go packages."""

    def __init__(
        self,
        analyzers: list[BaseAnalyzer] | None = None,
        policy: LintPolicy | None = None,
        loader: PackageLoader | None = None,
    ):
        """
        Initialize linter with analyzers.

        Args:
            analyzers: List of analyzers to use. If None, builds the
                analyzers enabled by *policy*.
            policy: Lint policy. If None, loads built-in defaults.
            loader: Package loader. If None, uses a default PackageLoader.
        """
        self.policy = policy or LintPolicy.default()

        if analyzers is None:
            self.analyzers: list[BaseAnalyzer] = build_analyzers(self.policy)
        else:
            self.analyzers = analyzers

        self.loader = loader or PackageLoader()

    def lint_package(self, package: Package) -> LintResult:
        """
        Run every analyzer over one loaded package.

        Violations are ordered by analyzer, then by the order each analyzer
        reported them.

        Args:
            package: Package to lint

        Returns:
            LintResult with the violations that survived suppression
        """
        start_time = time.time()
        violations: list[Violation] = []
        analyzer_names: list[str] = []

        for analyzer in self.analyzers:
            found = analyzer.analyze(package)
            logger.debug("%s reported %d violation(s) in %s", analyzer.get_name(), len(found), package.name)
            violations.extend(found)
            analyzer_names.append(analyzer.get_name())

        return LintResult(
            package_name=package.name,
            directory=package.directory,
            violations=violations,
            analyzers_used=analyzer_names,
            duration_seconds=time.time() - start_time,
        )

    def lint_directory(self, directory: str | Path) -> list[LintResult]:
        """
        Lint the packages declared in one directory.

        External test packages are skipped.

        Args:
            directory: Package directory

        Returns:
            One LintResult per package

        Raises:
            PackageLoadError: If the directory cannot be loaded
        """
        results = []
        for package in self.loader.load_packages(directory):
            if is_test_package(package):
                logger.debug("Skipping test package %s", package.name)
                continue
            results.append(self.lint_package(package))
        return results

    def lint_tree(self, root: str | Path, recursive: bool = True) -> Report:
        """
        Lint every package under *root*.

        A directory that fails to load is recorded in ``Report.load_errors``
        and the remaining directories are still linted.

        Args:
            root: Directory to start from
            recursive: Descend into subdirectories

        Returns:
            Report with results from all packages
        """
        if not isinstance(root, Path):
            root = Path(root)

        if not root.exists():
            raise PackageLoadError(f"Directory does not exist: {root}")

        report = Report()
        for directory in self.loader.discover(root, recursive=recursive):
            try:
                for result in self.lint_directory(directory):
                    report.add_result(result)
            except PackageLoadError as e:
                logger.warning("Failed to load %s: %s", directory, e)
                report.load_errors.append(str(e))

        logger.info(
            "Linted %d package(s): %d error(s), %d warning(s)",
            report.total_packages,
            report.error_count,
            report.warning_count,
        )
        return report

    def add_analyzer(self, analyzer: BaseAnalyzer):
        """Add an analyzer to the linter."""
        self.analyzers.append(analyzer)

    def list_analyzers(self) -> list[str]:
        """Get names of all configured analyzers."""
        return [analyzer.get_name() for analyzer in self.analyzers]


def lint_tree(
    root: str | Path,
    recursive: bool = True,
    analyzers: list[BaseAnalyzer] | None = None,
    policy: LintPolicy | None = None,
) -> Report:
    """
    Convenience function to lint a directory tree.

    Args:
        root: Directory to start from
        recursive: Descend into subdirectories
        analyzers: Optional list of analyzers
        policy: Optional lint policy. If omitted and analyzers are provided,
            the policy from the first analyzer is used.

    Returns:
        Report with all results
    """
    linter_policy = policy
    if linter_policy is None and analyzers:
        linter_policy = getattr(analyzers[0], "policy", None)
    linter = Linter(analyzers=analyzers, policy=linter_policy)
    return linter.lint_tree(root, recursive=recursive)
