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
Plain text reporter in the style of ``go vet`` output.
"""

from ..models import LintResult, Report


class TextReporter:
    """Generates ``file:line:col: message (rule)`` lines plus a summary."""

    def __init__(self, show_summary: bool = True):
        """
        Initialize text reporter.

        Args:
            show_summary: If True, end the report with a count line
        """
        self.show_summary = show_summary

    def generate_report(self, data: LintResult | Report) -> str:
        """
        Generate text report.

        Args:
            data: LintResult or Report object

        Returns:
            Report text, one violation per line
        """
        results = [data] if isinstance(data, LintResult) else data.results

        lines = []
        errors = warnings = 0
        for result in results:
            for violation in result.violations:
                lines.append(violation.format())
            errors += result.error_count
            warnings += result.warning_count

        if isinstance(data, Report):
            for error in data.load_errors:
                lines.append(f"error: {error}")

        if self.show_summary:
            packages = len(results)
            lines.append(
                f"{packages} package{'s' if packages != 1 else ''} checked: "
                f"{errors} error{'s' if errors != 1 else ''}, {warnings} warning{'s' if warnings != 1 else ''}"
            )

        return "\n".join(lines)

    def save_report(self, data: LintResult | Report, output_path: str):
        """
        Save text report to file.

        Args:
            data: LintResult or Report object
            output_path: Path to save file
        """
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(self.generate_report(data) + "\n")
