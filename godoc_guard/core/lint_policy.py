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
Lint policy: per-rule toggles, severities, and tiered minimums.

A ``LintPolicy`` is an immutable value built once per run and handed to
every analyzer, so an analyzer is a pure function of (package, policy).

Usage
-----
    from godoc_guard.core.lint_policy import LintPolicy

    # Load built-in defaults
    policy = LintPolicy.default()

    # Load a project config (merges on top of defaults, enforces its tier)
    policy = LintPolicy.from_yaml(".godoc-guard.yaml")

    # Start from a tier's minimums
    policy = LintPolicy.from_tier("gold")

    # Dump the current policy for editing
    policy.to_yaml("godoc-guard.yaml")

Tiers (``bronze``, ``silver``, ``gold``, ``platinum``) are named minimum
configurations used to gate rollout. Enforcing a tier may make a config
stricter, never looser.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from ..config.constants import GodocGuardConstants
from .exceptions import PolicyError

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Where the built-in defaults and tier minimums live (ship with the package)
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH = GodocGuardConstants.DEFAULT_CONFIG_PATH
_TIERS_DIR = GodocGuardConstants.TIERS_DIR

_TIER_NAMES = ("bronze", "silver", "gold", "platinum")

# Optional top-level key so the config can live inside a larger YAML file.
NAMESPACE_KEY = "godoc_guard"


# ---------------------------------------------------------------------------
# Data classes for each rule section
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HeaderPolicy:
    """Required ``Field: value`` pairs before the package keyword."""

    enabled: bool = True
    warn: bool = False
    fields: tuple[str, ...] = ("Description",)


@dataclass(frozen=True)
class CopyrightPolicy:
    """Copyright comment required on line one.

    ``pattern`` (a regular expression) takes precedence over ``text``. The
    rule is a no-op when both are empty.
    """

    enabled: bool = True
    warn: bool = False
    text: str = ""
    pattern: str = ""


@dataclass(frozen=True)
class DoculintPolicy:
    """Documentation compliance toggles."""

    enabled: bool = True
    warn: bool = False
    # Functions shorter than this many lines need no doc comment
    min_fun_len: int = 10
    validate_packages: bool = True
    validate_functions: bool = True
    validate_variables: bool = True
    validate_constants: bool = True
    validate_types: bool = True
    # Run package comment checks on package main too
    validate_main_package: bool = False


@dataclass(frozen=True)
class TodoPolicy:
    """TODO comment format."""

    enabled: bool = True
    warn: bool = False
    # Require the bracketed ticket id, a username alone is not enough
    require_ticket: bool = False


@dataclass(frozen=True)
class WhyPolicy:
    """Justification required on every nolint directive."""

    enabled: bool = True
    warn: bool = False


@dataclass(frozen=True)
class ErrorlintPolicy:
    """Static error/log/trace message style."""

    enabled: bool = True
    warn: bool = False


_SECTION_TYPES: dict[str, type] = {
    "header": HeaderPolicy,
    "copyright": CopyrightPolicy,
    "doculint": DoculintPolicy,
    "todo": TodoPolicy,
    "why": WhyPolicy,
    "errorlint": ErrorlintPolicy,
}


# ---------------------------------------------------------------------------
# The top-level policy object
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LintPolicy:
    """Everything a lint run can be configured with."""

    tier: str | None = None
    header: HeaderPolicy = field(default_factory=HeaderPolicy)
    copyright: CopyrightPolicy = field(default_factory=CopyrightPolicy)
    doculint: DoculintPolicy = field(default_factory=DoculintPolicy)
    todo: TodoPolicy = field(default_factory=TodoPolicy)
    why: WhyPolicy = field(default_factory=WhyPolicy)
    errorlint: ErrorlintPolicy = field(default_factory=ErrorlintPolicy)

    def section(self, rule_name: str) -> Any:
        """Return the policy section for *rule_name*."""
        if rule_name not in _SECTION_TYPES:
            raise KeyError(f"Unknown rule '{rule_name}'")
        return getattr(self, rule_name)

    def is_enabled(self, rule_name: str) -> bool:
        return bool(self.section(rule_name).enabled)

    # -----------------------------------------------------------------------
    # Construction helpers
    # -----------------------------------------------------------------------

    @classmethod
    def default(cls) -> LintPolicy:
        """Load the built-in defaults that ship with the package."""
        return cls._from_dict(cls._load_default_raw())

    @classmethod
    def tier_names(cls) -> list[str]:
        """Return available tier names."""
        return list(_TIER_NAMES)

    @classmethod
    def from_tier(cls, name: str) -> LintPolicy:
        """Return the tier's minimum configuration merged over the defaults."""
        name = name.lower()
        if name not in _TIER_NAMES:
            raise PolicyError(f"Unknown tier '{name}'. Available: {', '.join(_TIER_NAMES)}")
        merged = cls._deep_merge(cls._load_default_raw(), _read_yaml(_TIERS_DIR / f"{name}.yaml"))
        merged["tier"] = name
        return cls._from_dict(merged)

    @classmethod
    def from_yaml(cls, path: str | Path) -> LintPolicy:
        """
        Load a policy from a YAML file.

        The YAML is merged on top of the built-in defaults so that users only
        need to specify the sections they want to override. A ``tier`` key is
        enforced after loading.

        Raises:
            PolicyError: If the file is missing, malformed, or deviates from
                its tier's minimums.
        """
        path = Path(path)
        raw = _read_yaml(path)
        if isinstance(raw.get(NAMESPACE_KEY), dict):
            raw = raw[NAMESPACE_KEY]

        merged = cls._deep_merge(cls._load_default_raw(), raw)
        policy = cls._from_dict(merged)
        logger.debug("Loaded lint policy from %s", path)
        return policy.enforce_tier()

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> LintPolicy:
        """Build a policy from a plain mapping merged over the defaults."""
        return cls._from_dict(cls._deep_merge(cls._load_default_raw(), raw))

    def to_yaml(self, path: str | Path) -> None:
        """Dump the full policy to a YAML file for editing."""
        with open(path, "w", encoding="utf-8") as fh:
            fh.write("# godoc-guard configuration\n")
            fh.write("# Only include sections you want to override; omitted sections\n")
            fh.write("# will use the built-in defaults.\n\n")
            yaml.safe_dump(self.to_dict(), fh, default_flow_style=False, sort_keys=False, width=120)

    # -----------------------------------------------------------------------
    # Tier enforcement
    # -----------------------------------------------------------------------

    def enforce_tier(self) -> LintPolicy:
        """Return this policy raised to the minimums of its tier.

        A policy without a tier is returned unchanged. An unrecognized tier
        name is logged and otherwise ignored.
        """
        if self.tier is None:
            return self

        name = self.tier.lower()
        if name not in _TIER_NAMES:
            logger.warning(
                "Tier %r does not match any of: %s; no minimums applied",
                self.tier,
                ", ".join(_TIER_NAMES),
            )
            return self

        desired = LintPolicy._from_dict(_read_yaml(_TIERS_DIR / f"{name}.yaml"))
        return self.ensure_minimums(desired)

    def ensure_minimums(self, desired: LintPolicy) -> LintPolicy:
        """Diff this policy against *desired* and return the stricter result.

        Booleans that *desired* requires are forced on. The policy may be more
        restrictive than *desired* (more header fields, a lower
        ``min_fun_len``) but never less.

        Raises:
            PolicyError: On a deviation that cannot be overridden safely.
        """
        header = self.header
        header = replace(header, enabled=_override_bool(desired.header.enabled, header.enabled, "header.enabled"))
        if header.enabled:
            if not header.fields:
                header = replace(header, fields=desired.header.fields)
            else:
                for required in desired.header.fields:
                    if required not in header.fields:
                        raise PolicyError(
                            f'deviation detected from tier minimum defaults in header.fields, fields must contain "{required}"'
                        )

        copyright_ = self.copyright
        copyright_ = replace(
            copyright_,
            enabled=_override_bool(desired.copyright.enabled, copyright_.enabled, "copyright.enabled"),
        )
        if desired.copyright.pattern and copyright_.pattern != desired.copyright.pattern:
            logger.warning(
                "%s value detected for copyright.pattern, overriding to tier minimum %r",
                "zero" if not copyright_.pattern else "deviating",
                desired.copyright.pattern,
            )
            copyright_ = replace(copyright_, pattern=desired.copyright.pattern)

        doculint = self.doculint
        doculint = replace(doculint, enabled=_override_bool(desired.doculint.enabled, doculint.enabled, "doculint.enabled"))
        if doculint.enabled:
            toggles = {
                name: _override_bool(getattr(desired.doculint, name), getattr(doculint, name), f"doculint.{name}")
                for name in (
                    "validate_packages",
                    "validate_functions",
                    "validate_variables",
                    "validate_constants",
                    "validate_types",
                )
            }
            doculint = replace(doculint, **toggles)

            minimum = desired.doculint.min_fun_len
            if doculint.validate_functions and minimum > 0:
                if doculint.min_fun_len == 0:
                    logger.warning("zero value detected for doculint.min_fun_len, overriding to tier minimum %d", minimum)
                    doculint = replace(doculint, min_fun_len=minimum)
                elif doculint.min_fun_len < 0 or doculint.min_fun_len > minimum:
                    raise PolicyError(
                        "deviation detected from tier minimum defaults in doculint.min_fun_len, "
                        f"min_fun_len must be set within (0, {minimum}]"
                    )

        todo = replace(self.todo, enabled=_override_bool(desired.todo.enabled, self.todo.enabled, "todo.enabled"))
        why = replace(self.why, enabled=_override_bool(desired.why.enabled, self.why.enabled, "why.enabled"))
        errorlint = replace(
            self.errorlint,
            enabled=_override_bool(desired.errorlint.enabled, self.errorlint.enabled, "errorlint.enabled"),
        )

        return replace(
            self,
            header=header,
            copyright=copyright_,
            doculint=doculint,
            todo=todo,
            why=why,
            errorlint=errorlint,
        )

    # -----------------------------------------------------------------------
    # Internal parsing
    # -----------------------------------------------------------------------

    @classmethod
    def _load_default_raw(cls) -> dict[str, Any]:
        if _DEFAULT_CONFIG_PATH.exists():
            return _read_yaml(_DEFAULT_CONFIG_PATH)
        return {}

    @staticmethod
    def _deep_merge(base: dict, override: dict) -> dict:
        """Recursively merge *override* into *base*.

        Lists in the override replace the base list rather than extending it.
        """
        result = dict(base)
        for key, val in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(val, dict):
                result[key] = LintPolicy._deep_merge(result[key], val)
            else:
                result[key] = val
        return result

    @classmethod
    def _from_dict(cls, d: dict[str, Any]) -> LintPolicy:
        unknown = set(d) - set(_SECTION_TYPES) - {"tier"}
        if unknown:
            raise PolicyError(f"Unknown configuration section(s): {', '.join(sorted(unknown))}")

        tier = d.get("tier")
        if tier is not None and not isinstance(tier, str):
            raise PolicyError(f"tier must be a string, got {type(tier).__name__}")

        sections = {name: _build_section(name, section_type, d.get(name)) for name, section_type in _SECTION_TYPES.items()}
        return cls(tier=tier, **sections)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"tier": self.tier}
        for name in _SECTION_TYPES:
            section = getattr(self, name)
            out[name] = {
                f.name: list(getattr(section, f.name)) if isinstance(getattr(section, f.name), tuple) else getattr(section, f.name)
                for f in fields(section)
            }
        return out


def _override_bool(necessary: bool, current: bool, field_path: str) -> bool:
    if necessary and not current:
        logger.warning("%s is required to be true to meet tier minimum standards - overriding to true", field_path)
        return True
    return current


def _read_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise PolicyError(f"Config file not found: {path}")
    try:
        with open(path, encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except yaml.YAMLError as e:
        raise PolicyError(f"Failed to parse config file {path}: {e}") from e
    except OSError as e:
        raise PolicyError(f"Failed to read config file {path}: {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise PolicyError(f"Config file {path} must contain a mapping at the top level")
    return raw


def _build_section(name: str, section_type: type, raw: Any) -> Any:
    if raw is None:
        return section_type()
    if not isinstance(raw, dict):
        raise PolicyError(f"Section '{name}' must be a mapping")

    defaults = section_type()
    known = {f.name for f in fields(section_type)}
    unknown = set(raw) - known
    if unknown:
        raise PolicyError(f"Unknown key(s) in section '{name}': {', '.join(sorted(unknown))}")

    values: dict[str, Any] = {}
    for key, value in raw.items():
        default = getattr(defaults, key)
        path = f"{name}.{key}"
        if isinstance(default, bool):
            if not isinstance(value, bool):
                raise PolicyError(f"{path} must be a boolean")
        elif isinstance(default, int):
            if isinstance(value, bool) or not isinstance(value, int):
                raise PolicyError(f"{path} must be an integer")
        elif isinstance(default, str):
            if value is None:
                value = ""
            elif not isinstance(value, str):
                raise PolicyError(f"{path} must be a string")
        elif isinstance(default, tuple):
            if value is None:
                value = ()
            elif not isinstance(value, list) or not all(isinstance(item, str) for item in value):
                raise PolicyError(f"{path} must be a list of strings")
            value = tuple(value)
        values[key] = value

    return section_type(**values)
