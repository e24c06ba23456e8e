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
Constants for godoc-guard.
"""

from pathlib import Path

try:
    from .._version import __version__ as PACKAGE_VERSION
except ImportError:  # pragma: no cover
    PACKAGE_VERSION = "0.0.0-dev"


class GodocGuardConstants:
    """Constants used throughout the linter."""

    VERSION = PACKAGE_VERSION

    # Project paths
    PACKAGE_ROOT = Path(__file__).parent.parent

    # Resource paths
    DATA_DIR = PACKAGE_ROOT / "data"
    DEFAULT_CONFIG_PATH = DATA_DIR / "default_config.yaml"
    TIERS_DIR = DATA_DIR / "tiers"

    # Project config files looked up in the linted root, in order
    CONFIG_FILENAMES = (".godoc-guard.yaml", ".godoc-guard.yml", "godoc-guard.yaml")

    # Default values
    DEFAULT_OUTPUT_FORMAT = "text"
    OUTPUT_FORMATS = ("text", "json", "sarif")

    # Process exit codes
    EXIT_OK = 0
    EXIT_VIOLATIONS = 1
    EXIT_CONFIG_ERROR = 2

    @classmethod
    def get_data_path(cls) -> Path:
        """Get path to data directory."""
        return cls.DATA_DIR

    @classmethod
    def get_tiers_path(cls) -> Path:
        """Get path to the tier minimum configurations."""
        return cls.TIERS_DIR

    @classmethod
    def find_config(cls, root: Path) -> Path | None:
        """Return the first project config file found in *root*, if any."""
        for name in cls.CONFIG_FILENAMES:
            candidate = root / name
            if candidate.is_file():
                return candidate
        return None
