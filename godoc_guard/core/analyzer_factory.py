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
Centralized analyzer construction.

Every entry point (CLI, pre-commit hook, ``Linter`` fallback) **must** build
analyzers through the helpers in this module so that:

* All analyzers receive the active ``LintPolicy``.
* The per-rule ``enabled`` toggles are respected everywhere.
* Adding or removing a rule only requires a change here.
"""

from __future__ import annotations

import logging

from .analyzers.base import BaseAnalyzer
from .analyzers.copyright import CopyrightAnalyzer
from .analyzers.doculint import DoculintAnalyzer
from .analyzers.errorlint import ErrorlintAnalyzer
from .analyzers.header import HeaderAnalyzer
from .analyzers.todo import TodoAnalyzer
from .analyzers.why import WhyAnalyzer
from .lint_policy import LintPolicy

logger = logging.getLogger(__name__)

# Rule name -> analyzer class, in the order analyzers run
ANALYZER_CLASSES: dict[str, type[BaseAnalyzer]] = {
    cls.NAME: cls
    for cls in (
        HeaderAnalyzer,
        CopyrightAnalyzer,
        DoculintAnalyzer,
        TodoAnalyzer,
        WhyAnalyzer,
        ErrorlintAnalyzer,
    )
}


def build_analyzers(policy: LintPolicy, *, only: list[str] | None = None) -> list[BaseAnalyzer]:
    """Build the enabled analyzers, respecting each rule's ``enabled`` toggle.

    Args:
        policy: The active lint policy.
        only: Optional rule names to restrict the run to. Disabled rules
            stay disabled.

    Returns:
        Analyzer instances with *policy* attached, in a fixed order.

    Raises:
        KeyError: If *only* names an unknown rule.
    """
    if only:
        unknown = [name for name in only if name not in ANALYZER_CLASSES]
        if unknown:
            raise KeyError(f"Unknown rule(s): {', '.join(unknown)}")

    analyzers: list[BaseAnalyzer] = []
    for name, cls in ANALYZER_CLASSES.items():
        if only and name not in only:
            continue
        if not policy.is_enabled(name):
            logger.debug("Rule %s disabled by policy", name)
            continue
        analyzers.append(cls(policy=policy))

    return analyzers
