# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model and loader for runtime resolution."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError
from .toolchain.service import default_toolchain_search_paths
from .toolchain.spec import ToolchainSpec

CONFIG_FILENAME: Final[str] = "jbr-resolver.toml"
PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "jbr-resolver"

ENV_RUNTIME_DIR: Final[str] = "JBR_RESOLVER_RUNTIME_DIR"
ENV_PLATFORM_DIR: Final[str] = "JBR_RESOLVER_PLATFORM_DIR"
ENV_VENDOR: Final[str] = "JBR_RESOLVER_VENDOR"
ENV_LANGUAGE_VERSION: Final[str] = "JBR_RESOLVER_LANGUAGE_VERSION"

_ENV_VAR_PATTERN = re.compile(r"\$(\w+)|\$\{([^}]+)\}")


class ResolverConfig(BaseModel):
    """Inputs of the runtime resolution chain.

    Attributes:
        runtime_dirs: Explicit runtime distribution roots; only a single entry is used.
        platform_dirs: Platform distribution roots; only a single entry is used.
        toolchain: Requested toolchain constraints.
        toolchain_search_paths: Directories scanned for installed JDKs.
        context: Label prefixed to trace messages.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    runtime_dirs: tuple[Path, ...] = ()
    platform_dirs: tuple[Path, ...] = ()
    toolchain: ToolchainSpec = Field(default_factory=ToolchainSpec)
    toolchain_search_paths: tuple[Path, ...] = Field(default_factory=default_toolchain_search_paths)
    context: str | None = None

    @field_validator("runtime_dirs", "platform_dirs", "toolchain_search_paths", mode="before")
    @classmethod
    def _coerce_single_path(cls, value: Any) -> Any:
        if isinstance(value, (str, Path)):
            return (value,)
        return value

    def resolve_paths(self, root: Path) -> ResolverConfig:
        """Return a copy whose relative paths are anchored at ``root``."""

        def _anchor(paths: tuple[Path, ...]) -> tuple[Path, ...]:
            anchored = []
            for path in paths:
                expanded = path.expanduser()
                anchored.append(expanded if expanded.is_absolute() else root / expanded)
            return tuple(anchored)

        return self.model_copy(
            update={
                "runtime_dirs": _anchor(self.runtime_dirs),
                "platform_dirs": _anchor(self.platform_dirs),
                "toolchain_search_paths": _anchor(self.toolchain_search_paths),
            }
        )


def load_config(root: Path, *, env: Mapping[str, str] | None = None) -> ResolverConfig:
    """Load configuration for ``root`` from files and the environment.

    Sources are merged in order: defaults, ``[tool.jbr-resolver]`` in
    ``pyproject.toml``, ``jbr-resolver.toml``, then ``JBR_RESOLVER_*``
    environment variables.

    Args:
        root: Project directory holding the configuration files.
        env: Environment mapping, defaults to :data:`os.environ`.

    Returns:
        ResolverConfig: Validated configuration with paths anchored at ``root``.

    Raises:
        ConfigError: If a file cannot be parsed or a value is invalid.
    """

    environment = os.environ if env is None else env
    data: dict[str, Any] = {}

    pyproject = _load_toml(root / PYPROJECT_FILENAME)
    section = pyproject.get(PYPROJECT_TOOL_KEY, {}).get(PYPROJECT_SECTION_KEY, {})
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {root / PYPROJECT_FILENAME} must be a table")
    data = _deep_merge(data, section)
    data = _deep_merge(data, _load_toml(root / CONFIG_FILENAME))
    data = _deep_merge(data, _environment_overrides(environment))
    data = _expand_variables(data, environment)

    try:
        config = ResolverConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid jbr-resolver configuration: {exc}") from exc
    return config.resolve_paths(root)


def _load_toml(path: Path) -> dict[str, Any]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read configuration at {path}: {exc}") from exc


def _environment_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if runtime := env.get(ENV_RUNTIME_DIR):
        overrides["runtime_dirs"] = [entry for entry in runtime.split(os.pathsep) if entry]
    if platform_dir := env.get(ENV_PLATFORM_DIR):
        overrides["platform_dirs"] = [entry for entry in platform_dir.split(os.pathsep) if entry]
    toolchain: dict[str, Any] = {}
    if vendor := env.get(ENV_VENDOR):
        toolchain["vendor"] = vendor
    if language_version := env.get(ENV_LANGUAGE_VERSION):
        toolchain["language_version"] = language_version
    if toolchain:
        overrides["toolchain"] = toolchain
    return overrides


def _deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        nested = isinstance(current, Mapping) and isinstance(value, Mapping)
        merged[key] = _deep_merge(current, value) if nested else value
    return merged


def _expand_variables(value: Any, env: Mapping[str, str]) -> Any:
    """Substitute ``$NAME`` and ``${NAME}`` references; unknown names are kept verbatim."""

    if isinstance(value, Mapping):
        return {key: _expand_variables(item, env) for key, item in value.items()}
    if isinstance(value, list):
        return [_expand_variables(item, env) for item in value]
    if not isinstance(value, str):
        return value
    return _ENV_VAR_PATTERN.sub(lambda match: env.get(match.group(1) or match.group(2), match.group(0)), value)


__all__ = [
    "CONFIG_FILENAME",
    "ENV_LANGUAGE_VERSION",
    "ENV_PLATFORM_DIR",
    "ENV_RUNTIME_DIR",
    "ENV_VENDOR",
    "ResolverConfig",
    "load_config",
]
