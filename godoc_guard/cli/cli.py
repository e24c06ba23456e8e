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
Command-line interface for godoc-guard.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from ..config.config import Config
from ..config.constants import GodocGuardConstants
from ..core.analyzer_factory import ANALYZER_CLASSES, build_analyzers
from ..core.exceptions import GodocGuardError
from ..core.lint_policy import LintPolicy
from ..core.linter import Linter
from ..core.reporters.json_reporter import JSONReporter
from ..core.reporters.sarif_reporter import SARIFReporter
from ..core.reporters.text_reporter import TextReporter

logger = logging.getLogger("godoc_guard.cli")


# ---------------------------------------------------------------------------
# Shared helpers
# ---------------------------------------------------------------------------


def _configure_logging(args: argparse.Namespace) -> None:
    level = logging.WARNING
    if getattr(args, "verbose", False):
        level = logging.INFO
    elif getattr(args, "quiet", False):
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", stream=sys.stderr)


def _load_policy(args: argparse.Namespace, config: Config, root: Path) -> LintPolicy:
    """Resolve the lint policy from flags, environment, project file or defaults.

    Raises:
        PolicyError: If the chosen config is malformed or violates its tier.
    """
    config_path = getattr(args, "config", None) or config.config_path
    if config_path is None:
        found = GodocGuardConstants.find_config(root if root.is_dir() else root.parent)
        config_path = str(found) if found else None

    if config_path:
        policy = LintPolicy.from_yaml(config_path)
        logger.info("Using lint config: %s", config_path)
    else:
        policy = LintPolicy.default()

    tier = getattr(args, "tier", None) or config.tier
    if tier:
        policy = replace(policy, tier=tier).enforce_tier()
        logger.info("Enforcing %s tier minimums", tier)

    return policy


def _format_output(fmt: str, report) -> str:
    """Generate the formatted output string for a report."""
    if fmt == "json":
        return JSONReporter().generate_report(report)
    if fmt == "sarif":
        return SARIFReporter(tool_version=GodocGuardConstants.VERSION).generate_report(report)
    return TextReporter().generate_report(report)


def _write_output(output_path: str | None, output: str) -> None:
    """Write *output* to a file or stdout."""
    if output_path:
        with open(output_path, "w", encoding="utf-8") as fh:
            fh.write(output + "\n")
        print(f"Report saved to: {output_path}", file=sys.stderr)
    else:
        print(output)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def lint_command(args: argparse.Namespace) -> int:
    """Handle the ``lint`` command."""
    config = Config(
        config_path=args.config,
        tier=args.tier,
        recursive=args.recursive,
        output_format=args.format,
        output_path=args.output,
    )
    root = Path(args.path)
    if root.is_file():
        root = root.parent

    try:
        policy = _load_policy(args, config, root)
        linter = Linter(analyzers=build_analyzers(policy), policy=policy)
        report = linter.lint_tree(root, recursive=config.recursive)
    except GodocGuardError as e:
        print(f"Error: {e}", file=sys.stderr)
        return GodocGuardConstants.EXIT_CONFIG_ERROR

    _write_output(config.output_path, _format_output(config.output_format, report))

    if report.load_errors:
        return GodocGuardConstants.EXIT_CONFIG_ERROR
    if report.has_errors:
        return GodocGuardConstants.EXIT_VIOLATIONS
    return GodocGuardConstants.EXIT_OK


def list_analyzers_command(_args: argparse.Namespace) -> int:
    """Handle the ``list-analyzers`` command."""
    print("Available Analyzers:\n")
    for i, (name, cls) in enumerate(ANALYZER_CLASSES.items(), 1):
        print(f"  {i}. {name}")
        print(f"     {cls.HELP}")
        print()
    return GodocGuardConstants.EXIT_OK


def generate_config_command(args: argparse.Namespace) -> int:
    """Handle the ``generate-config`` command."""
    output_path = Path(args.output)
    try:
        policy = LintPolicy.from_tier(args.tier) if args.tier else LintPolicy.default()
        policy.to_yaml(output_path)
    except (GodocGuardError, OSError) as e:
        print(f"Error generating config: {e}", file=sys.stderr)
        return GodocGuardConstants.EXIT_CONFIG_ERROR

    label = f"{args.tier} tier" if args.tier else "default"
    print(f"Generated {label} config: {output_path}\n")
    print("Edit the file to customise, then use:")
    print(f"  godoc-guard lint --config {output_path} ./...\n")
    print(f"Available tiers: {' | '.join(LintPolicy.tier_names())}")
    return GodocGuardConstants.EXIT_OK


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="godoc-guard - Documentation and comment style linter for Go packages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  godoc-guard lint ./pkg/server
  godoc-guard lint . --recursive --tier gold
  godoc-guard lint . -r --format sarif --output godoc-guard.sarif
  godoc-guard generate-config --tier silver -o .godoc-guard.yaml
  godoc-guard list-analyzers
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {GodocGuardConstants.VERSION}")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    # -- lint --------------------------------------------------------------
    lint_p = subparsers.add_parser("lint", help="Lint Go packages")
    lint_p.add_argument("path", help="Package directory (or a .go file in it)")
    lint_p.add_argument("--recursive", "-r", action="store_true", help="Lint every package below the path")
    lint_p.add_argument("--config", "-c", metavar="FILE", help="Path to a godoc-guard YAML config")
    lint_p.add_argument("--tier", choices=LintPolicy.tier_names(), help="Enforce a tier's minimum configuration")
    lint_p.add_argument(
        "--format",
        choices=list(GodocGuardConstants.OUTPUT_FORMATS),
        default=GodocGuardConstants.DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: text). Use 'sarif' for GitHub Code Scanning.",
    )
    lint_p.add_argument("--output", "-o", help="Output file path")
    verbosity = lint_p.add_mutually_exclusive_group()
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Log progress")

    # -- list-analyzers ----------------------------------------------------
    subparsers.add_parser("list-analyzers", help="List available analyzers")

    # -- generate-config ---------------------------------------------------
    gc_p = subparsers.add_parser("generate-config", help="Generate a config YAML")
    gc_p.add_argument("--output", "-o", default=".godoc-guard.yaml", help="Output file path")
    gc_p.add_argument("--tier", choices=LintPolicy.tier_names(), help="Start from a tier's minimums")

    # -- dispatch ----------------------------------------------------------
    args = parser.parse_args(argv)
    _configure_logging(args)

    if not args.command:
        parser.print_help()
        return 1

    dispatch = {
        "lint": lint_command,
        "list-analyzers": list_analyzers_command,
        "generate-config": generate_config_command,
    }
    handler = dispatch.get(args.command)
    if handler:
        return handler(args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
