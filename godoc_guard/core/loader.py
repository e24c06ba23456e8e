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
Go package loader.

A Go package is every ``.go`` file in one directory sharing a package
clause. External test packages (``package foo_test``) living next to
``foo`` are loaded as packages of their own.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

from .exceptions import PackageLoadError
from .models import Package, SourceFile
from .parser.go_parser import GoParser

logger = logging.getLogger(__name__)

# Build constraint lines that exclude a file from every build
_IGNORE_CONSTRAINTS = {"//go:build ignore", "// +build ignore"}


class PackageLoader:
    """Loads and parses Go packages from directories."""

    GO_EXTENSION = ".go"

    # Directories the go tool never treats as part of the module's packages
    SKIP_DIRECTORIES = {"vendor", "testdata"}

    def __init__(self, parser: GoParser | None = None):
        """
        Initialize package loader.

        Args:
            parser: Parser to use (a new GoParser by default)
        """
        self.parser = parser or GoParser()

    def load_packages(self, directory: str | Path) -> list[Package]:
        """
        Load every package declared in one directory.

        Args:
            directory: Path to the package directory

        Returns:
            One Package per package clause, the non-test package first

        Raises:
            PackageLoadError: If the directory or one of its files cannot be loaded
        """
        if not isinstance(directory, Path):
            directory = Path(directory)

        if not directory.exists():
            raise PackageLoadError(f"Package directory does not exist: {directory}")

        if not directory.is_dir():
            raise PackageLoadError(f"Path is not a directory: {directory}")

        files: dict[str, list[SourceFile]] = {}
        ignored: list[SourceFile] = []
        for path in self._discover_files(directory):
            source_file = self.parser.parse_file(path)
            if self._is_ignored(source_file):
                logger.debug("Skipping %s: excluded by build constraint", path)
                ignored.append(source_file)
                continue
            files.setdefault(source_file.package.name, []).append(source_file)

        names = sorted(files, key=lambda name: (name.endswith("_test"), name))
        packages = []
        for name in names:
            packages.append(
                Package(
                    name=name,
                    directory=str(directory),
                    files=tuple(files[name]),
                    ignored_files=tuple(f for f in ignored if f.package.name == name),
                )
            )

        # Ignored files naming a package that is not otherwise present stay with the primary package
        if packages:
            orphaned = tuple(f for f in ignored if f.package.name not in files)
            if orphaned:
                first = packages[0]
                packages[0] = Package(
                    name=first.name,
                    directory=first.directory,
                    files=first.files,
                    ignored_files=first.ignored_files + orphaned,
                )

        logger.debug("Loaded %d package(s) from %s", len(packages), directory)
        return packages

    def discover(self, root: str | Path, recursive: bool = True) -> Iterator[Path]:
        """
        Find directories that contain Go source files.

        Args:
            root: Directory to start from
            recursive: Descend into subdirectories

        Yields:
            Package directories in sorted order
        """
        root = Path(root)
        if not root.is_dir():
            raise PackageLoadError(f"Path is not a directory: {root}")

        if not recursive:
            if any(self._discover_files(root)):
                yield root
            return

        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = sorted(d for d in dirnames if not self._should_skip_directory(d))
            if any(name.endswith(self.GO_EXTENSION) for name in filenames):
                yield Path(dirpath)

    def _should_skip_directory(self, name: str) -> bool:
        return name in self.SKIP_DIRECTORIES or name.startswith((".", "_"))

    def _discover_files(self, directory: Path) -> list[Path]:
        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise PackageLoadError(f"Failed to list {directory}: {e}") from e
        return [p for p in entries if p.is_file() and p.suffix == self.GO_EXTENSION]

    def _is_ignored(self, source_file: SourceFile) -> bool:
        """Check for an ``ignore`` build constraint before the package clause."""
        package_line = source_file.package.position.line
        for group in source_file.comments:
            if group.position.line >= package_line:
                break
            if any(comment.text.strip() in _IGNORE_CONSTRAINTS for comment in group.comments):
                return True
        return False


def load_packages(directory: str | Path) -> list[Package]:
    """
    Convenience function to load the packages in a directory.

    Args:
        directory: Path to the package directory

    Returns:
        Parsed packages
    """
    loader = PackageLoader()
    return loader.load_packages(directory)
