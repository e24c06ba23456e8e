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
Tests for the pre-commit hook.
"""

from __future__ import annotations

import os

import pytest

from godoc_guard.hooks import pre_commit

CLEAN = """
    // Description: Widget helpers.

    // Package widget builds widgets.
    package widget
    """

DIRTY = """
    // Description: Gadget helpers.

    // Package gadget builds gadgets.
    package gadget

    // TODO: tidy up
    """


@pytest.fixture
def repo(write_package, monkeypatch):
    root = write_package({"widget/widget.go": CLEAN, "gadget/gadget.go": DIRTY}, name="repo")
    (root / ".git" / "hooks").mkdir(parents=True)
    monkeypatch.setattr(pre_commit, "get_repo_root", lambda: root)
    return root


def _stage(monkeypatch, *paths: str) -> None:
    monkeypatch.setattr(pre_commit, "get_staged_files", lambda: list(paths))


class TestAffectedPackages:
    def test_only_existing_go_package_directories(self, repo):
        affected = pre_commit.get_affected_packages(
            ["widget/widget.go", "README.md", "deleted/old.go", "widget/doc.go"], repo
        )
        assert affected == {repo / "widget"}


class TestHook:
    def test_clean_commit_passes(self, repo, monkeypatch, capsys):
        _stage(monkeypatch, "widget/widget.go")
        assert pre_commit.main([]) == 0
        assert "1 package checked: 0 errors" in capsys.readouterr().out

    def test_violations_block_the_commit(self, repo, monkeypatch, capsys):
        _stage(monkeypatch, "widget/widget.go", "gadget/gadget.go")
        assert pre_commit.main([]) == 1
        out = capsys.readouterr().out
        assert "(todo)" in out
        assert "Commit BLOCKED" in out

    def test_no_go_files_staged(self, repo, monkeypatch):
        _stage(monkeypatch, "README.md")
        assert pre_commit.main([]) == 0

    def test_all_packages(self, repo, monkeypatch):
        _stage(monkeypatch)
        assert pre_commit.main(["--all"]) == 1

    def test_repo_config_is_used(self, repo, monkeypatch):
        (repo / ".godoc-guard.yaml").write_text("todo:\n  enabled: false\n")
        _stage(monkeypatch, "gadget/gadget.go")
        assert pre_commit.main([]) == 0

    def test_tier(self, repo, monkeypatch):
        (repo / ".godoc-guard.yaml").write_text("todo:\n  enabled: false\n")
        _stage(monkeypatch, "gadget/gadget.go")
        assert pre_commit.main(["--tier", "silver"]) == 1

    def test_malformed_config(self, repo, monkeypatch, capsys):
        (repo / ".godoc-guard.yaml").write_text("todo: [\n")
        _stage(monkeypatch, "widget/widget.go")
        assert pre_commit.main([]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_not_a_repository(self, monkeypatch, capsys):
        monkeypatch.setattr(pre_commit, "get_repo_root", lambda: None)
        assert pre_commit.main([]) == 1
        assert "Not a git repository" in capsys.readouterr().err


class TestInstall:
    def test_install(self, repo):
        assert pre_commit.main(["install"]) == 0
        hook = repo / ".git" / "hooks" / "pre-commit"
        assert "godoc-guard-pre-commit" in hook.read_text()
        assert os.access(hook, os.X_OK)

    def test_existing_hook_is_kept_unless_confirmed(self, repo, monkeypatch):
        hook = repo / ".git" / "hooks" / "pre-commit"
        hook.write_text("#!/bin/sh\nexit 0\n")
        monkeypatch.setattr("builtins.input", lambda _prompt: "n")

        assert pre_commit.install_hook() == 1
        assert hook.read_text() == "#!/bin/sh\nexit 0\n"
