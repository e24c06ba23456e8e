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
Tests for Go package loading and package directory discovery.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from godoc_guard.core.exceptions import GoParseError, PackageLoadError
from godoc_guard.core.loader import PackageLoader, load_packages


class TestLoadPackages:
    def test_groups_files_by_package_clause(self, write_package):
        directory = write_package(
            {
                "widget.go": "package widget\n",
                "build.go": "package widget\n",
                "widget_ext_test.go": "package widget_test\n",
                "notes.txt": "not go",
            },
            name="widget",
        )
        widget, external = PackageLoader().load_packages(directory)

        assert widget.name == "widget"
        assert [Path(f.path).name for f in widget.files] == ["build.go", "widget.go"]
        assert widget.directory == str(directory)
        assert external.name == "widget_test"
        assert [Path(f.path).name for f in external.files] == ["widget_ext_test.go"]

    @pytest.mark.parametrize("constraint", ["//go:build ignore", "// +build ignore"])
    def test_ignored_files(self, write_package, constraint):
        directory = write_package(
            {
                "widget.go": "package widget\n",
                "gen.go": f"{constraint}\n\npackage widget\n",
            },
            name="widget",
        )
        (widget,) = load_packages(directory)

        assert [Path(f.path).name for f in widget.files] == ["widget.go"]
        assert [Path(f.path).name for f in widget.ignored_files] == ["gen.go"]

    def test_orphaned_ignored_file_stays_with_primary_package(self, write_package):
        directory = write_package(
            {
                "widget.go": "package widget\n",
                "tools.go": "//go:build ignore\n\npackage main\n",
            },
            name="widget",
        )
        (widget,) = load_packages(directory)
        assert [f.package.name for f in widget.ignored_files] == ["main"]

    def test_other_constraints_are_kept(self, write_package):
        directory = write_package(
            {"linux.go": "//go:build linux\n\npackage widget\n"},
            name="widget",
        )
        (widget,) = load_packages(directory)
        assert len(widget.files) == 1
        assert widget.ignored_files == ()

    def test_empty_directory(self, tmp_path):
        assert load_packages(tmp_path) == []

    def test_missing_directory(self, tmp_path):
        with pytest.raises(PackageLoadError, match="does not exist"):
            load_packages(tmp_path / "missing")

    def test_file_instead_of_directory(self, write_package):
        directory = write_package({"widget.go": "package widget\n"}, name="widget")
        with pytest.raises(PackageLoadError, match="not a directory"):
            load_packages(directory / "widget.go")

    def test_syntax_error(self, write_package):
        directory = write_package({"widget.go": "package widget\n\nfunc {\n"}, name="widget")
        with pytest.raises(GoParseError):
            load_packages(directory)


class TestDiscover:
    @pytest.fixture
    def tree(self, tmp_path) -> Path:
        files = {
            "a/a.go": "package a\n",
            "a/b/b.go": "package b\n",
            "a/docs/readme.md": "# docs\n",
            "vendor/v/v.go": "package v\n",
            "a/testdata/t.go": "package t\n",
            ".hidden/h.go": "package h\n",
            "_tools/t.go": "package t\n",
        }
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return tmp_path

    def test_recursive(self, tree):
        found = list(PackageLoader().discover(tree))
        assert found == [tree / "a", tree / "a" / "b"]

    def test_non_recursive(self, tree):
        assert list(PackageLoader().discover(tree / "a", recursive=False)) == [tree / "a"]
        assert list(PackageLoader().discover(tree, recursive=False)) == []

    def test_root_must_be_a_directory(self, tree):
        with pytest.raises(PackageLoadError):
            list(PackageLoader().discover(tree / "a" / "a.go"))
