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
Pre-commit hook for linting the Go packages touched by a commit.

The hook lints every package that contains a staged ``.go`` file and
blocks the commit when an error-severity violation remains.

Usage:
    1. Install as a pre-commit hook:
       godoc-guard-pre-commit install

    2. Or add to .pre-commit-config.yaml:
       - repo: local
         hooks:
           - id: godoc-guard
             name: godoc-guard
             entry: godoc-guard-pre-commit
             language: python
             types: [go]
             pass_filenames: false

Configuration:
    The hook reads the same ``.godoc-guard.yaml`` the CLI uses, from the
    repository root. ``--tier`` raises it to a tier's minimums.
"""

import argparse
import subprocess
import sys
from dataclasses import replace
from pathlib import Path

from ..config.constants import GodocGuardConstants


def get_repo_root() -> Path | None:
    """Return the repository root, or None outside a git repository."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--show-toplevel"],
            capture_output=True,
            text=True,
            check=True,
        )
    except (subprocess.CalledProcessError, OSError):
        return None
    return Path(result.stdout.strip())


def get_staged_files() -> list[str]:
    """
    Get list of staged files from git.

    Returns:
        List of staged file paths relative to repo root
    """
    try:
        result = subprocess.run(
            ["git", "diff", "--cached", "--name-only", "--diff-filter=ACMR"],
            capture_output=True,
            text=True,
            check=True,
        )
        return [f.strip() for f in result.stdout.split("\n") if f.strip()]
    except subprocess.CalledProcessError:
        return []


def get_affected_packages(staged_files: list[str], repo_root: Path) -> set[Path]:
    """
    Identify package directories affected by staged changes.

    Args:
        staged_files: List of staged file paths
        repo_root: Repository root the paths are relative to

    Returns:
        Set of package directories that still exist
    """
    affected = set()
    for file_path in staged_files:
        if not file_path.endswith(".go"):
            continue
        directory = (repo_root / file_path).parent
        if directory.is_dir():
            affected.add(directory)
    return affected


def lint_packages(directories: set[Path], repo_root: Path, tier: str | None = None):
    """
    Lint the given package directories.

    Args:
        directories: Package directories to lint
        repo_root: Repository root holding the project config
        tier: Optional tier to enforce

    Returns:
        Report covering every directory
    """
    from ..core.lint_policy import LintPolicy
    from ..core.linter import Linter
    from ..core.models import Report

    config_path = GodocGuardConstants.find_config(repo_root)
    policy = LintPolicy.from_yaml(config_path) if config_path else LintPolicy.default()
    if tier:
        policy = replace(policy, tier=tier).enforce_tier()

    linter = Linter(policy=policy)
    report = Report()
    for directory in sorted(directories):
        for result in linter.lint_directory(directory):
            report.add_result(result)
    return report


def main(args: list[str] | None = None) -> int:
    """
    Main entry point for pre-commit hook.

    Args:
        args: Command line arguments (for testing)

    Returns:
        Exit code (0 = success, 1 = blocked, 2 = configuration error)
    """
    parser = argparse.ArgumentParser(description="Pre-commit hook for linting Go packages")
    parser.add_argument("--tier", help="Enforce a tier's minimum configuration")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Lint every package in the repository, not just staged ones",
    )
    parser.add_argument(
        "install",
        nargs="?",
        help="Install pre-commit hook",
    )

    parsed_args = parser.parse_args(args)

    if parsed_args.install == "install":
        return install_hook()

    repo_root = get_repo_root()
    if repo_root is None:
        print("Error: Not a git repository", file=sys.stderr)
        return 1

    from ..core.exceptions import GodocGuardError
    from ..core.loader import PackageLoader
    from ..core.reporters.text_reporter import TextReporter

    try:
        if parsed_args.all:
            affected = set(PackageLoader().discover(repo_root))
        else:
            affected = get_affected_packages(get_staged_files(), repo_root)

        if not affected:
            # No Go packages affected, allow commit
            return 0

        print(f"Linting {len(affected)} package(s)...")
        report = lint_packages(affected, repo_root, tier=parsed_args.tier)
    except GodocGuardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(TextReporter().generate_report(report))

    if report.has_errors:
        print("Commit BLOCKED - fix documentation issues before committing")
        return 1
    return 0


def install_hook() -> int:
    """
    Install the pre-commit hook in the current repository.

    Returns:
        Exit code
    """
    repo_root = get_repo_root()
    if repo_root is None:
        print("Error: Not a git repository", file=sys.stderr)
        return 1

    hooks_dir = repo_root / ".git" / "hooks"
    hooks_dir.mkdir(exist_ok=True)

    hook_path = hooks_dir / "pre-commit"

    hook_script = """#!/bin/sh
# godoc-guard pre-commit hook
# Lints the Go packages touched by the commit

godoc-guard-pre-commit "$@"
exit_code=$?

if [ $exit_code -ne 0 ]; then
    echo ""
    echo "To bypass this check (not recommended), use: git commit --no-verify"
fi

exit $exit_code
"""

    # Check if hook already exists
    if hook_path.exists():
        print(f"Warning: Pre-commit hook already exists at {hook_path}")
        response = input("Overwrite? [y/N] ").strip().lower()
        if response != "y":
            print("Aborted")
            return 1

    hook_path.write_text(hook_script)
    hook_path.chmod(0o755)

    print(f"Pre-commit hook installed at {hook_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
