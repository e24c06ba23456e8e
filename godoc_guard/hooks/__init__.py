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


"""Git hooks for godoc-guard."""


def __getattr__(name: str):
    """Lazy-load pre_commit_hook to avoid heavy imports on module entry."""
    if name == "pre_commit_hook":
        from .pre_commit import main as pre_commit_hook

        globals()["pre_commit_hook"] = pre_commit_hook
        return pre_commit_hook
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = ["pre_commit_hook"]
