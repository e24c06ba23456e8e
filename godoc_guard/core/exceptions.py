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


"""godoc-guard exceptions.

This module defines custom exceptions for godoc-guard operations.
All exceptions inherit from GodocGuardError for easy catching.

Rule violations are never raised; they are reported as ``Violation``
records. Exceptions are reserved for conditions that stop a run or a
package load.

Example:
    >>> from godoc_guard.core.linter import Linter
    >>> from godoc_guard.core.exceptions import PackageLoadError
    >>>
    >>> linter = Linter()
    >>>
    >>> try:
    ...     results = linter.lint_directory("path/to/pkg")
    ... except PackageLoadError as e:
    ...     print(f"Failed to load package: {e}")
"""


class GodocGuardError(Exception):
    """Base exception for all godoc-guard errors."""

    pass


class PackageLoadError(GodocGuardError):
    """Raised when unable to load a Go package.

    This can indicate:
    - Missing or unreadable directory
    - Unreadable or undecodable source file
    """

    pass


class GoParseError(PackageLoadError):
    """Raised when a Go source file does not parse into a valid tree."""

    pass


class PolicyError(GodocGuardError):
    """Raised when the lint configuration is malformed or violates its tier.

    Configuration errors are fatal to the whole run.
    """

    pass


class AnalysisError(GodocGuardError):
    """Raised on internal analyzer errors, never for rule violations."""

    pass
