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
Helpers shared by more than one analyzer.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .models import CommentGroup, Package, SourceFile

# Name of the package that holds a program's entry point.
PACKAGE_MAIN = "main"

# Name of the program entry function inside PACKAGE_MAIN.
FUNC_MAIN = "main"

# Name of the package initializer function, allowed in any package.
FUNC_INIT = "init"

# Conventional file name (sans ".go") that may carry the package comment.
DOC_FILENAME = "doc"

# Marker line the Go toolchain recognizes for generated files.
GENERATED_RE = re.compile(r"^// Code generated .* DO NOT EDIT\.$")


def is_generated(comments: Iterable[CommentGroup], package_line: int) -> bool:
    """Check for a generated-code marker comment before the package clause."""
    for group in comments:
        if group.position.line >= package_line:
            break
        for comment in group.comments:
            if GENERATED_RE.match(comment.text):
                return True
    return False


def is_test_file(file: SourceFile) -> bool:
    return file.is_test


def is_test_package(package: Package) -> bool:
    """Check if the package is an external test package (``foo_test``)."""
    return package.name.endswith("_test")


def is_main_package(package: Package) -> bool:
    return package.name == PACKAGE_MAIN


def should_skip_file(file: SourceFile) -> bool:
    """Generated files and test files are never linted."""
    return file.is_generated or is_test_file(file)
