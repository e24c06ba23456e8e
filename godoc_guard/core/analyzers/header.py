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
Header rule: required ``Field: value`` lines before the package keyword.
"""

from __future__ import annotations

from ..common import is_main_package
from ..models import CommentGroup, Package, Position, Violation
from .base import BaseAnalyzer

HEADER_MESSAGE = (
    'file "%s" does not contain the required header key "%s" and corresponding value existing before the package keyword'
)


def find_header_fields(groups: list[CommentGroup], fields: tuple[str, ...], package_line: int) -> dict[str, bool]:
    """Map each required field to whether it has a value in the file header.

    The header is the first comment group before *package_line* whose text
    mentions every ``<field>: ``. Within it a field is valid when some
    comment line starts with ``<field>: `` followed by a value.
    """
    valid = dict.fromkeys(fields, False)

    for group in groups:
        if group.position.line >= package_line:
            continue

        text = group.text()
        if not all(f"{field}: " in text for field in fields):
            continue

        for comment in group.comments:
            clean = comment.trimmed
            for field in fields:
                prefix = f"{field}: "
                if clean.startswith(prefix) and clean[len(prefix) :]:
                    valid[field] = True
        break

    return valid


class HeaderAnalyzer(BaseAnalyzer):
    """Requires a header comment with the configured fields filled in."""

    NAME = "header"
    HELP = "Ensures each .go file has a header comment section defined before the package keyword to define the file."

    def analyze(self, package: Package) -> list[Violation]:
        # Package main holds a single entry file that needs no header
        if is_main_package(package):
            return []

        sink = self.new_pass(package)
        fields = self.settings.fields
        if not fields:
            return []

        for file in self.lintable_files(package):
            valid = find_header_fields(list(file.comments), fields, file.package.position.line)
            for field in fields:
                if not valid[field]:
                    sink.reportf(Position(file.path), HEADER_MESSAGE, file.path, field)

        return sink.violations
