# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from os import PathLike
from pathlib import Path

import pytest

from jbr_resolver.filesystem import PathProbe
from jbr_resolver.platform import OSFamily
from jbr_resolver.toolchain import ToolchainSpec

RuntimeFactory = Callable[..., Path]


def _make_runtime(home: Path, *, family: OSFamily = OSFamily.OTHER_UNIX, jre: bool = False) -> Path:
    """Create a fake runtime home with a ``java`` binary and return the binary."""

    base = home / "jre" if jre else home
    name = "java.exe" if family is OSFamily.WINDOWS else "java"
    binary = base / "bin" / name
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    binary.chmod(0o755)
    return binary


@pytest.fixture
def make_runtime() -> RuntimeFactory:
    """Return a factory creating fake runtime homes on disk."""

    return _make_runtime


class CountingProbe(PathProbe):
    """Probe recording every filesystem access."""

    def __init__(self) -> None:
        self.calls = 0

    def exists(self, path: str | PathLike[str] | Path) -> bool:
        self.calls += 1
        return super().exists(path)

    def find_child_with_prefix(self, directory: str | PathLike[str] | Path, prefix: str) -> Path | None:
        self.calls += 1
        return super().find_child_with_prefix(directory, prefix)


@pytest.fixture
def counting_probe() -> CountingProbe:
    return CountingProbe()


class FakeToolchainService:
    """Toolchain service returning a fixed installation or raising."""

    def __init__(self, path: Path | None = None, *, error: Exception | None = None) -> None:
        self.path = path
        self.error = error
        self.calls: list[ToolchainSpec] = []

    def installation_path(self, spec: ToolchainSpec) -> Path:
        self.calls.append(spec)
        if self.error is not None:
            raise self.error
        return self.path  # type: ignore[return-value]


@pytest.fixture
def fake_service_factory() -> Callable[..., FakeToolchainService]:
    return FakeToolchainService
