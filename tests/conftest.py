# Copyright 2026 Cisco Systems, Inc. and its affiliates
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
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest before running tests.
All fixtures defined here are available to every test module without
explicit imports.
"""

from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
from dotenv import load_dotenv

from godoc_guard.core.lint_policy import LintPolicy
from godoc_guard.core.loader import PackageLoader
from godoc_guard.core.models import Package, SourceFile
from godoc_guard.core.parser.go_parser import GoParser

# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------

project_root = Path(__file__).parent.parent
env_file = project_root / ".env"

if env_file.exists():
    load_dotenv(env_file)


@pytest.fixture(autouse=True)
def _clean_godoc_guard_env(monkeypatch):
    """Keep GODOC_GUARD_* settings from the developer's shell out of tests."""
    for name in ("GODOC_GUARD_CONFIG", "GODOC_GUARD_TIER", "GODOC_GUARD_FORMAT", "GODOC_GUARD_RECURSIVE"):
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


def dedent(source: str) -> str:
    """Strip the common indentation and the leading newline of a Go snippet."""
    return textwrap.dedent(source).lstrip("\n")


@pytest.fixture
def parse():
    """Parse an in-memory Go snippet into a :class:`SourceFile`.

    Usage::

        file = parse('''
            package foo
        ''')
    """
    parser = GoParser()

    def _parse(source: str, filename: str = "foo.go") -> SourceFile:
        return parser.parse_source(dedent(source), filename)

    return _parse


@pytest.fixture
def write_package(tmp_path: Path):
    """Write Go files into a fresh directory and return the directory.

    Usage::

        directory = write_package({"foo.go": "package foo\\n"}, name="foo")
    """

    def _write(files: dict[str, str], name: str = "pkg") -> Path:
        directory = tmp_path / name
        directory.mkdir(parents=True, exist_ok=True)
        for rel_path, content in files.items():
            path = directory / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(dedent(content), encoding="utf-8")
        return directory

    return _write


@pytest.fixture
def make_package(write_package):
    """Write Go files and load the primary package declared by them.

    Usage::

        package = make_package({"foo.go": '''
            package foo
        '''})
    """

    def _make(files: dict[str, str], name: str = "pkg") -> Package:
        directory = write_package(files, name=name)
        return PackageLoader().load_packages(directory)[0]

    return _make


@pytest.fixture
def make_policy():
    """Build a :class:`LintPolicy` from section overrides merged over the defaults.

    Usage::

        policy = make_policy(doculint={"min_fun_len": 3})
    """

    def _make(**sections) -> LintPolicy:
        return LintPolicy.from_dict(sections)

    return _make
