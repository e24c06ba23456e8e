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
Why rule: every ``nolint`` directive names its rules and says why.
"""

from __future__ import annotations

import re

from ..models import Comment, Package, Violation
from ..suppression import NOLINT_DIRECTIVE, parse_directive
from .base import BaseAnalyzer

_RULE_NAME_RE = re.compile(r"^[\w\-]+$")

NAKED_MESSAGE = "nolint directive must contain the specific linters it is nolinting against"

UNJUSTIFIED_MESSAGE = "nolint comment must immediately be followed by // Why: <reason> on the same line."


def check_directive(comment: Comment) -> str | None:
    """Return the message for a malformed directive in *comment*, or ``None``.

    Comments that do not start with the directive token are never flagged.
    Text that starts with it without parsing as a directive counts as unjustified.
    """
    if not comment.trimmed.startswith(NOLINT_DIRECTIVE):
        return None

    directive = parse_directive(comment)
    if directive is not None and not directive.rule_names:
        return NAKED_MESSAGE

    if directive is None or not directive.has_justification:
        return UNJUSTIFIED_MESSAGE
    if not all(_RULE_NAME_RE.match(name) for name in directive.rule_names):
        return UNJUSTIFIED_MESSAGE
    return None


class WhyAnalyzer(BaseAnalyzer):
    """Flags ``nolint`` directives without rule names or a justification."""

    NAME = "why"
    HELP = (
        "Ensures that each nolint directive names the specific rules it silences and carries a "
        "justification, in the form `//nolint:<rule>[,<rule>...] // Why: <reason>`."
    )

    def analyze(self, package: Package) -> list[Violation]:
        sink = self.new_pass(package)

        for file in self.lintable_files(package):
            for group in file.comments:
                for comment in group.comments:
                    message = check_directive(comment)
                    if message:
                        sink.reportf(comment.position, message)

        return sink.violations
