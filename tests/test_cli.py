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
Tests for the godoc-guard command line.
"""

from __future__ import annotations

import json

import pytest

from godoc_guard.cli.cli import main
from godoc_guard.config.constants import GodocGuardConstants
from godoc_guard.core.lint_policy import LintPolicy

CLEAN = """
    // Description: Widget helpers.

    // Package widget builds widgets.
    package widget
    """

DIRTY = """
    // Package widget builds widgets.
    package widget

    // TODO: tidy up
    """


@pytest.fixture
def clean_dir(write_package):
    return write_package({"widget.go": CLEAN}, name="clean")


@pytest.fixture
def dirty_dir(write_package):
    return write_package({"widget.go": DIRTY}, name="dirty")


class TestLintCommand:
    def test_clean_package(self, clean_dir, capsys):
        assert main(["lint", str(clean_dir)]) == 0
        assert "1 package checked: 0 errors, 0 warnings" in capsys.readouterr().out

    def test_violations_exit_one(self, dirty_dir, capsys):
        assert main(["lint", str(dirty_dir)]) == 1
        out = capsys.readouterr().out
        assert "(header)" in out
        assert "(todo)" in out

    def test_file_argument_lints_its_directory(self, clean_dir):
        assert main(["lint", str(clean_dir / "widget.go")]) == 0

    def test_recursive(self, write_package, capsys):
        root = write_package({"a/widget.go": CLEAN, "b/widget.go": CLEAN}, name="repo")
        assert main(["lint", str(root), "-r"]) == 0
        assert "2 packages checked" in capsys.readouterr().out

    def test_json_format(self, dirty_dir, capsys):
        assert main(["lint", str(dirty_dir), "--format", "json"]) == 1
        data = json.loads(capsys.readouterr().out)
        assert data["summary"]["errors"] == 2

    def test_format_from_environment(self, dirty_dir, capsys, monkeypatch):
        monkeypatch.setenv("GODOC_GUARD_FORMAT", "sarif")
        main(["lint", str(dirty_dir)])
        assert json.loads(capsys.readouterr().out)["version"] == "2.1.0"

    def test_output_file(self, dirty_dir, tmp_path, capsys):
        output = tmp_path / "report.sarif"
        assert main(["lint", str(dirty_dir), "--format", "sarif", "-o", str(output)]) == 1
        assert json.loads(output.read_text(encoding="utf-8"))["runs"][0]["results"]
        assert "Report saved to" in capsys.readouterr().err

    def test_project_config_is_discovered(self, dirty_dir):
        (dirty_dir / ".godoc-guard.yaml").write_text("header:\n  enabled: false\ntodo:\n  enabled: false\n")
        assert main(["lint", str(dirty_dir)]) == 0

    def test_explicit_config(self, dirty_dir, tmp_path):
        config = tmp_path / "lenient.yaml"
        config.write_text("header:\n  warn: true\ntodo:\n  warn: true\n")
        assert main(["lint", str(dirty_dir), "--config", str(config)]) == 0

    def test_tier_flag_overrides_config(self, dirty_dir, tmp_path):
        config = tmp_path / "lenient.yaml"
        config.write_text("header:\n  enabled: false\ntodo:\n  enabled: false\n")
        assert main(["lint", str(dirty_dir), "--config", str(config), "--tier", "silver"]) == 1

    def test_malformed_config_exits_two(self, clean_dir, tmp_path, capsys):
        config = tmp_path / "bad.yaml"
        config.write_text("spelling: {}\n")
        assert main(["lint", str(clean_dir), "--config", str(config)]) == 2
        assert "Error:" in capsys.readouterr().err

    def test_load_error_exits_two(self, write_package, capsys):
        root = write_package({"widget.go": "package widget\n\nfunc {\n"}, name="broken")
        assert main(["lint", str(root)]) == 2
        assert "syntax error" in capsys.readouterr().out

    def test_missing_path_exits_two(self, tmp_path):
        assert main(["lint", str(tmp_path / "missing")]) == 2

    def test_unknown_tier_is_rejected(self, clean_dir):
        with pytest.raises(SystemExit) as exc:
            main(["lint", str(clean_dir), "--tier", "tin"])
        assert exc.value.code == 2


class TestOtherCommands:
    def test_list_analyzers(self, capsys):
        assert main(["list-analyzers"]) == 0
        out = capsys.readouterr().out
        for name in ("header", "copyright", "doculint", "todo", "why", "errorlint"):
            assert name in out

    def test_generate_config(self, tmp_path, capsys):
        output = tmp_path / ".godoc-guard.yaml"
        assert main(["generate-config", "--tier", "gold", "-o", str(output)]) == 0
        assert LintPolicy.from_yaml(output) == LintPolicy.from_tier("gold")
        assert "Generated gold tier config" in capsys.readouterr().out

    def test_generate_default_config(self, tmp_path):
        output = tmp_path / "defaults.yaml"
        assert main(["generate-config", "-o", str(output)]) == 0
        assert LintPolicy.from_yaml(output) == LintPolicy.default()

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert GodocGuardConstants.VERSION in capsys.readouterr().out
