# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI option handling for resolver commands."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..config import ResolverConfig, load_config
from ..executable.runtime import RuntimeResolver
from ..platform import OSFamily
from ..toolchain.spec import ToolchainSpec


@dataclass(slots=True)
class ResolveCLIOptions:
    """Structured options accepted by the ``resolve`` and ``explain`` commands."""

    root: Path
    runtime_dirs: tuple[Path, ...] = ()
    platform_dirs: tuple[Path, ...] = ()
    vendor: str | None = None
    language_version: int | None = None
    os_family: OSFamily | None = None
    context: str | None = None

    def load(self) -> ResolverConfig:
        """Return the project configuration with command-line overrides applied.

        Raises:
            ConfigError: If the project configuration is invalid.
        """

        config = load_config(self.root)
        updates: dict[str, object] = {}
        if self.runtime_dirs:
            updates["runtime_dirs"] = tuple(path.expanduser().resolve() for path in self.runtime_dirs)
        if self.platform_dirs:
            updates["platform_dirs"] = tuple(path.expanduser().resolve() for path in self.platform_dirs)
        if self.vendor is not None or self.language_version is not None:
            updates["toolchain"] = ToolchainSpec(
                vendor=self.vendor if self.vendor is not None else config.toolchain.vendor,
                language_version=(
                    self.language_version if self.language_version is not None else config.toolchain.language_version
                ),
            )
        if self.context is not None:
            updates["context"] = self.context
        return config.model_copy(update=updates) if updates else config

    def build_resolver(self) -> RuntimeResolver:
        return RuntimeResolver.from_config(self.load(), family=self.os_family)


__all__ = ["ResolveCLIOptions"]
