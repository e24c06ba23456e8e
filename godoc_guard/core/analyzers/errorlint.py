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
Errorlint rule: static error, log and trace messages follow Go style.

Messages are lowercase, non-empty and unpunctuated at the end so they
compose cleanly when wrapped: ``failed to load config: file not found``.
"""

from __future__ import annotations

from ..models import CallSite, Package, SourceFile, Violation
from .base import BaseAnalyzer

# (package, function) -> index of the message argument
MESSAGE_FUNCTIONS: dict[tuple[str, str], int] = {
    ("errors", "New"): 0,
    ("fmt", "Errorf"): 0,
    ("errors", "Wrap"): 1,
    ("errors", "Wrapf"): 1,
    ("log", "Info"): 1,
    ("log", "Error"): 1,
    ("log", "Warn"): 1,
    ("trace", "StartCall"): 1,
    ("trace", "StartSpan"): 1,
}

EMPTY_PROBLEM = "message should not be empty"
CAPITALIZED_PROBLEM = "message should not be capitalized"
PUNCTUATION_PROBLEM = "message should not end with punctuation"

_TRAILING_PUNCTUATION = (".", ":", "!", "\n")


def message_problems(message: str) -> list[str]:
    """Return the style problems of *message*, in a fixed order."""
    if not message:
        return [EMPTY_PROBLEM]

    problems = []
    # Acronyms such as "HTTP" are allowed to lead
    if message[0].isupper() and not (len(message) > 1 and message[1].isupper()):
        problems.append(CAPITALIZED_PROBLEM)
    if message.endswith(_TRAILING_PUNCTUATION):
        problems.append(PUNCTUATION_PROBLEM)
    return problems


def resolve_packages(file: SourceFile) -> dict[str, str]:
    """Map each local import name of *file* to the imported package's name."""
    packages = {}
    for spec in file.imports:
        packages[spec.local_name] = spec.path.rstrip("/").rsplit("/", 1)[-1]
    return packages


def message_argument(call: CallSite, packages: dict[str, str]) -> tuple[str, str] | None:
    """Return ``(package, message)`` for a checked call with a literal message."""
    package = packages.get(call.qualifier, call.qualifier)
    index = MESSAGE_FUNCTIONS.get((package, call.function))
    if index is None or index >= len(call.arguments):
        return None

    message = call.arguments[index]
    if message is None:
        return None
    return package, message


class ErrorlintAnalyzer(BaseAnalyzer):
    """Checks literal messages passed to error constructors, loggers and tracers."""

    NAME = "errorlint"
    HELP = "Ensures that error, log and trace messages are lowercase and do not end with punctuation."

    def analyze(self, package: Package) -> list[Violation]:
        sink = self.new_pass(package)

        for file in self.lintable_files(package):
            packages = resolve_packages(file)
            for call in file.calls:
                found = message_argument(call, packages)
                if found is None:
                    continue
                pkg, message = found
                for problem in message_problems(message):
                    sink.reportf(call.position, "%s %s", pkg, problem)

        return sink.violations
