"""
Policy configuration for the enum namespace.

Policy flags are fixed when a registry is constructed. They can be given
directly, read from the ``[policy]`` table of ``enumspace.toml``, or overridden
through ``ENUMSPACE_<OPTION>`` environment variables.

Example enumspace.toml:

    [policy]
    ENUM_OVERWRITE_ENABLED = true
    EMPTY_ENUM_ENABLED = false
    warnings_enabled = true

Option names are accepted verbatim (any case) or as the dataclass field names.
"""

from __future__ import annotations

import dataclasses
import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_POLICY_FILE = "enumspace.toml"

# Environment variable prefix (ENUMSPACE_WARNINGS_ENABLED=0, ...)
ENV_PREFIX = "ENUMSPACE_"

_OPTION_FIELDS: dict[str, str] = {
    "ENUM_OVERWRITE_ENABLED": "enum_overwrite_enabled",
    "RBX_ENUM_OVERWRITE_ENABLED": "standard_overwrite_enabled",
    "STANDARD_ENUM_OVERWRITE_ENABLED": "standard_overwrite_enabled",
    "EMPTY_ENUM_ENABLED": "empty_enum_enabled",
    "VARIABLE_STYLE_NAMING": "variable_style_naming",
    "WARNINGS_ENABLED": "warnings_enabled",
}

_TRUE_STRINGS = frozenset({"1", "true", "yes", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class EnumPolicy:
    """Policy flags applied to every registration and warning."""

    enum_overwrite_enabled: bool = False  # re-register an existing user enum
    standard_overwrite_enabled: bool = False  # register over a standard enum
    empty_enum_enabled: bool = False  # allow enums with zero items
    variable_style_naming: bool = True  # identifier-style type and item names
    warnings_enabled: bool = True  # log warnings for risky but permitted operations

    @classmethod
    def from_options(cls, options: Mapping[str, object]) -> EnumPolicy:
        """
        Build a policy from option names and flag values.

        Args:
            options: Mapping of option name (e.g. ``"ENUM_OVERWRITE_ENABLED"``)
                or field name to a bool or boolean-like string

        Returns:
            EnumPolicy with unspecified flags at their defaults

        Raises:
            ValueError: If an option name is unknown, a value is not boolean-like,
                or two names for the same flag disagree
        """
        return cls(**_collect_options(options))

    def with_options(self, **options: object) -> EnumPolicy:
        """Return a copy with the given options replaced."""
        return dataclasses.replace(self, **_collect_options(options))

    def as_options(self) -> dict[str, bool]:
        """Return the flags keyed by their canonical option names."""
        return {
            option: getattr(self, field_name)
            for option, field_name in _OPTION_FIELDS.items()
            if option != "STANDARD_ENUM_OVERWRITE_ENABLED"
        }


def _resolve_option(key: str) -> str:
    upper = key.upper()
    if upper in _OPTION_FIELDS:
        return _OPTION_FIELDS[upper]
    lower = key.lower()
    if lower in {f.name for f in dataclasses.fields(EnumPolicy)}:
        return lower
    raise ValueError(
        f"Unknown enum policy option {key!r}. Known options: {', '.join(sorted(_OPTION_FIELDS))}"
    )


def _collect_options(options: Mapping[str, object]) -> dict[str, bool]:
    values: dict[str, bool] = {}
    sources: dict[str, str] = {}
    for key, raw in options.items():
        field_name = _resolve_option(key)
        flag = _coerce_flag(key, raw)
        if field_name in values and values[field_name] != flag:
            raise ValueError(
                f"Enum policy options {sources[field_name]!r} and {key!r} conflict: "
                f"both set {field_name} but to different values"
            )
        values[field_name] = flag
        sources[field_name] = key
    return values


def _coerce_flag(key: str, raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
    raise ValueError(f"Enum policy option {key!r} must be a boolean, got {raw!r}")


def load_policy(path: Path) -> EnumPolicy:
    """
    Load policy flags from the ``[policy]`` table of a TOML file.

    A file without a ``[policy]`` table yields the default policy.
    """
    data = tomllib.loads(path.read_text(encoding="utf-8"))
    policy_data = data.get("policy", {})
    if not isinstance(policy_data, dict):
        raise ValueError(f"{path}: [policy] must be a table")
    return EnumPolicy.from_options(policy_data)


def policy_from_env(
    base: EnumPolicy | None = None,
    environ: Mapping[str, str] | None = None,
) -> EnumPolicy:
    """
    Apply ``ENUMSPACE_<OPTION>`` environment overrides on top of ``base``.

    Args:
        base: Policy to start from (defaults to ``EnumPolicy()``)
        environ: Environment mapping (defaults to ``os.environ``)

    Returns:
        EnumPolicy with every set environment variable applied
    """
    policy = base or EnumPolicy()
    env = os.environ if environ is None else environ
    overrides = {
        option: env[ENV_PREFIX + option] for option in _OPTION_FIELDS if ENV_PREFIX + option in env
    }
    if not overrides:
        return policy
    return policy.with_options(**overrides)


def resolve_policy(project_root: Path | None = None) -> EnumPolicy:
    """
    Resolve the effective policy for a project directory.

    Reads ``enumspace.toml`` from ``project_root`` (default: current directory)
    if present, then applies environment overrides.
    """
    root = project_root or Path.cwd()
    policy_file = root / DEFAULT_POLICY_FILE
    base = load_policy(policy_file) if policy_file.exists() else EnumPolicy()
    return policy_from_env(base)
