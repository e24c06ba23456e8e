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
TODO rule: every TODO comment is attributed and tracked.
"""

from __future__ import annotations

import re

from ..models import Comment, Package, Violation
from .base import BaseAnalyzer

# TODO, an optional (user) and an optional [ticket], then ": <summary>"
TODO_RE = re.compile(r"^TODO(\([\w-]+\))?(\[[a-zA-Z\d-]+\])?: .+$")

TODO_MESSAGE = (
    "TODO comment must start the line, have a github username and / or a Jira ticket, "
    "and be followed by a colon and space: `TODO(<gh-user>)[<jira-ticket>]: `"
)


def match_todo(comment: Comment, require_ticket: bool = False) -> bool:
    """Return True when *comment* has no TODO or has a well-formed one."""
    text = comment.trimmed
    if not text.startswith("TODO"):
        return True

    match = TODO_RE.match(text)
    if match is None:
        return False

    user, ticket = match.group(1), match.group(2)
    if require_ticket:
        return ticket is not None
    return user is not None or ticket is not None


class TodoAnalyzer(BaseAnalyzer):
    """Flags TODO comments that are not in ``TODO(user)[ticket]: summary`` form."""

    NAME = "todo"
    HELP = (
        "Ensures that each TODO comment defined in the codebase conforms to the format "
        "`TODO(<gh-user>)[<jira-ticket>]: <summary>`, with one of `(gh-user)` or `[jira-ticket]` "
        "being required."
    )

    def analyze(self, package: Package) -> list[Violation]:
        sink = self.new_pass(package)
        require_ticket = self.settings.require_ticket

        for file in self.lintable_files(package):
            for group in file.comments:
                for comment in group.comments:
                    if not match_todo(comment, require_ticket):
                        sink.reportf(comment.position, TODO_MESSAGE)

        return sink.violations
