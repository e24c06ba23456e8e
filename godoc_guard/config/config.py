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
Runtime configuration for godoc-guard.

Rule settings live in the YAML lint policy (see ``core.lint_policy``);
this class holds how a run is invoked, with environment overrides.
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .constants import GodocGuardConstants


@dataclass
class Config:
    """
    Configuration for a godoc-guard run.

    Explicit values win over the ``GODOC_GUARD_*`` environment variables.
    """

    # Policy file and tier
    config_path: str | None = None
    tier: str | None = None

    # Discovery
    recursive: bool = True

    # Output Options
    output_format: str = GodocGuardConstants.DEFAULT_OUTPUT_FORMAT
    output_path: str | None = None

    def __post_init__(self):
        """Load configuration from environment variables if not provided."""

        if self.config_path is None:
            self.config_path = os.getenv("GODOC_GUARD_CONFIG") or None

        if self.tier is None:
            self.tier = os.getenv("GODOC_GUARD_TIER") or None

        # Output format from environment (only if still at default)
        if self.output_format == GodocGuardConstants.DEFAULT_OUTPUT_FORMAT:
            if env_format := os.getenv("GODOC_GUARD_FORMAT"):
                self.output_format = env_format.lower()

        if os.getenv("GODOC_GUARD_RECURSIVE", "").lower() in ("false", "0"):
            self.recursive = False

    @classmethod
    def from_env(cls) -> "Config":
        """
        Create configuration from environment variables.

        Returns:
            Config instance with values from environment
        """
        return cls()

    @classmethod
    def from_file(cls, config_file: Path) -> "Config":
        """
        Load configuration from a .env file.

        Variables already set in the environment are not overridden.

        Args:
            config_file: Path to .env file

        Returns:
            Config instance
        """
        if config_file.exists():
            load_dotenv(config_file, override=False)

        return cls.from_env()
