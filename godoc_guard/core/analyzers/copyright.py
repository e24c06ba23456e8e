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
Copyright rule: line one of every file carries the required notice.
"""

from __future__ import annotations

import logging
import re

from ..exceptions import PolicyError
from ..lint_policy import LintPolicy
from ..models import Package, Position, Violation
from .base import BaseAnalyzer

logger = logging.getLogger(__name__)

COPYRIGHT_MESSAGE = 'file "%s" does not contain the required copyright %s [%s] (sans-brackets) as a comment on line 1'


class CopyrightAnalyzer(BaseAnalyzer):
    """Compares the first comment on line one against a literal or a pattern.

    A configured pattern takes precedence over the literal text. With neither
    configured the rule does nothing.
    """

    NAME = "copyright"
    HELP = "Ensures each .go file has a comment at the top of the file containing the copyright string requested via config."

    def __init__(self, name: str | None = None, policy: LintPolicy | None = None):
        super().__init__(name, policy)
        self.text = self.settings.text.strip()
        self.pattern: re.Pattern | None = None

        pattern = self.settings.pattern.strip()
        if pattern:
            try:
                self.pattern = re.compile(pattern)
            except re.error as e:
                raise PolicyError(f"Invalid copyright.pattern {pattern!r}: {e}") from e

    @property
    def match_type(self) -> str:
        return "regular expression" if self.pattern is not None else "string"

    @property
    def match_literal(self) -> str:
        return self.pattern.pattern if self.pattern is not None else self.text

    def compare(self, value: str) -> bool:
        if self.pattern is not None:
            return self.pattern.search(value) is not None
        return value == self.text

    def analyze(self, package: Package) -> list[Violation]:
        if not self.text and self.pattern is None:
            return []

        sink = self.new_pass(package)
        seen: set[str] = set()

        for file in self.lintable_files(package):
            found = False
            for group in file.comments:
                if group.position.line != 1:
                    continue

                line_one = group.comments[0].trimmed
                found = self.compare(line_one)
                if found:
                    seen.add(line_one)
                # Only the group on line one matters
                break

            if not found:
                sink.reportf(Position(file.path), COPYRIGHT_MESSAGE, file.path, self.match_type, self.match_literal)

        for copyright_string in sorted(seen):
            logger.debug("Found copyright in package %s: %s", package.name, copyright_string)

        return sink.violations
