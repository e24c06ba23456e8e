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
godoc-guard - Documentation and comment style linter for Go packages.
"""

try:
    from ._version import __version__
except ImportError:
    __version__ = "0.0.0+unknown"


def __getattr__(name: str):
    """Lazy-load public API symbols on first access.

    This keeps ``python -m godoc_guard.cli.cli`` from loading the tree-sitter
    grammar before argument parsing.
    """
    _lazy_map = {
        "Config": (".config.config", "Config"),
        "GodocGuardConstants": (".config.constants", "GodocGuardConstants"),
        "LintPolicy": (".core.lint_policy", "LintPolicy"),
        "PackageLoader": (".core.loader", "PackageLoader"),
        "load_packages": (".core.loader", "load_packages"),
        "GoParser": (".core.parser.go_parser", "GoParser"),
        "LintResult": (".core.models", "LintResult"),
        "Package": (".core.models", "Package"),
        "Report": (".core.models", "Report"),
        "Severity": (".core.models", "Severity"),
        "SourceFile": (".core.models", "SourceFile"),
        "Violation": (".core.models", "Violation"),
        "Linter": (".core.linter", "Linter"),
        "lint_tree": (".core.linter", "lint_tree"),
        "build_analyzers": (".core.analyzer_factory", "build_analyzers"),
    }
    if name in _lazy_map:
        module_path, attr = _lazy_map[name]
        import importlib

        mod = importlib.import_module(module_path, __package__)
        val = getattr(mod, attr)
        # Cache on the module so __getattr__ is only called once per symbol
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "Linter",
    "lint_tree",
    "LintPolicy",
    "LintResult",
    "Report",
    "Severity",
    "Violation",
    "Package",
    "SourceFile",
    "PackageLoader",
    "load_packages",
    "GoParser",
    "build_analyzers",
    "Config",
    "GodocGuardConstants",
]
