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
SARIF format reporter for GitHub Code Scanning integration.

Implements SARIF 2.1.0 specification for lint results.
https://docs.oasis-open.org/sarif/sarif/v2.1.0/sarif-v2.1.0.html
"""

import hashlib
import json
from typing import Any

from ..analyzer_factory import ANALYZER_CLASSES
from ..models import LintResult, Report, Severity, Violation


class SARIFReporter:
    """Generates SARIF 2.1.0 format reports for GitHub Code Scanning."""

    SARIF_VERSION = "2.1.0"
    SARIF_SCHEMA = "https://raw.githubusercontent.com/oasis-tcs/sarif-spec/master/Schemata/sarif-schema-2.1.0.json"

    # Map severity to SARIF levels
    SEVERITY_TO_LEVEL = {
        Severity.ERROR: "error",
        Severity.WARNING: "warning",
    }

    def __init__(self, tool_name: str = "godoc-guard", tool_version: str = "0.1.0"):
        """
        Initialize SARIF reporter.

        Args:
            tool_name: Name of the linting tool
            tool_version: Version of the linting tool
        """
        self.tool_name = tool_name
        self.tool_version = tool_version

    def generate_report(self, data: LintResult | Report) -> str:
        """
        Generate SARIF report.

        Args:
            data: LintResult or Report object

        Returns:
            SARIF JSON string
        """
        results = [data] if isinstance(data, LintResult) else data.results

        violations: list[Violation] = []
        for result in results:
            violations.extend(result.violations)

        sarif = {
            "$schema": self.SARIF_SCHEMA,
            "version": self.SARIF_VERSION,
            "runs": [
                {
                    "tool": self._create_tool_component(self._extract_rules(violations)),
                    "results": self._convert_violations(violations),
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "endTimeUtc": data.timestamp.isoformat() + "Z",
                        }
                    ],
                }
            ],
        }
        return json.dumps(sarif, indent=2, default=str)

    def _create_tool_component(self, rules: list[dict[str, Any]]) -> dict[str, Any]:
        """Create the tool component with rules."""
        return {
            "driver": {
                "name": self.tool_name,
                "version": self.tool_version,
                "rules": rules,
            }
        }

    def _extract_rules(self, violations: list[Violation]) -> list[dict[str, Any]]:
        """Extract unique rules from violations."""
        seen_rules: set[str] = set()
        rules = []

        for violation in violations:
            if violation.rule_name in seen_rules:
                continue
            seen_rules.add(violation.rule_name)

            analyzer_cls = ANALYZER_CLASSES.get(violation.rule_name)
            rule: dict[str, Any] = {
                "id": violation.rule_name,
                "name": violation.rule_name.title(),
                "defaultConfiguration": {
                    "level": self.SEVERITY_TO_LEVEL.get(violation.severity, "warning"),
                },
            }
            if analyzer_cls is not None:
                rule["shortDescription"] = {"text": analyzer_cls.HELP}

            rules.append(rule)

        return rules

    def _convert_violations(self, violations: list[Violation]) -> list[dict[str, Any]]:
        """Convert violations to SARIF results."""
        results = []

        for violation in violations:
            position = violation.position
            location: dict[str, Any] = {
                "physicalLocation": {
                    "artifactLocation": {
                        "uri": position.filename,
                        "uriBaseId": "%SRCROOT%",
                    },
                }
            }

            if position.line > 0:
                region: dict[str, Any] = {"startLine": position.line}
                if position.column > 0:
                    region["startColumn"] = position.column
                location["physicalLocation"]["region"] = region

            results.append(
                {
                    "ruleId": violation.rule_name,
                    "level": self.SEVERITY_TO_LEVEL.get(violation.severity, "warning"),
                    "message": {"text": violation.message},
                    "locations": [location],
                    # Add fingerprint for deduplication
                    "fingerprints": {"primaryLocationLineHash": self._fingerprint(violation)},
                }
            )

        return results

    @staticmethod
    def _fingerprint(violation: Violation) -> str:
        key = f"{violation.rule_name}:{violation.position.filename}:{violation.position.line}:{violation.message}"
        return hashlib.sha256(key.encode("utf-8")).hexdigest()[:32]

    def save_report(self, data: LintResult | Report, output_path: str):
        """
        Save SARIF report to file.

        Args:
            data: LintResult or Report object
            output_path: Path to save file
        """
        report_json = self.generate_report(data)
        with open(output_path, "w", encoding="utf-8") as f:
            f.write(report_json)
