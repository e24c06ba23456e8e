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
Rule analyzers for Go documentation and comment style.

Each analyzer owns one rule name, which is also the name ``nolint``
directives refer to and the policy section that configures it.
"""

from .base import BaseAnalyzer
from .copyright import CopyrightAnalyzer
from .doculint import DoculintAnalyzer
from .errorlint import ErrorlintAnalyzer
from .header import HeaderAnalyzer
from .todo import TodoAnalyzer
from .why import WhyAnalyzer

__all__ = [
    "BaseAnalyzer",
    "CopyrightAnalyzer",
    "DoculintAnalyzer",
    "ErrorlintAnalyzer",
    "HeaderAnalyzer",
    "TodoAnalyzer",
    "WhyAnalyzer",
]
