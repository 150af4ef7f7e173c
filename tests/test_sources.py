# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

from pathlib import Path

import pytest

from jbr_resolver.errors import ToolchainNotFoundError
from jbr_resolver.executable.sources import (
    BundledRuntimeSource,
    CurrentRuntimeSource,
    ExplicitRuntimeSource,
    ToolchainLanguageSource,
    ToolchainVendorSource,
    current_java_home,
    default_sources,
    single_or_none,
)
from jbr_resolver.toolchain import ToolchainSpec


@pytest.mark.parametrize(
    ("paths", "expected"),
    [
        ((), None),
        (("",), None),
        (("/opt/jbr17",), Path("/opt/jbr17")),
        (("", "/opt/jbr17"), Path("/opt/jbr17")),
        (("/opt/a", "/opt/b"), None),
    ],
)
def test_single_or_none(paths: tuple[str, ...], expected: Path | None) -> None:
    assert single_or_none(paths) == expected


def test_default_sources_follow_priority_order() -> None:
    labels = [source.label for source in default_sources()]

    assert labels == [
        "JetBrains Runtime specified with dependencies",
        "JetBrains Runtime specified with Java Toolchain",
        "JetBrains Runtime bundled within IntelliJ Platform",
        "Java Runtime specified with Java Toolchain",
        "current Java runtime",
    ]


def test_explicit_source_reports_cardinality() -> None:
    assert ExplicitRuntimeSource().skip_reason() == "no runtime distribution configured"
    source = ExplicitRuntimeSource(paths=("/a", "/b"))
    assert source.root() is None
    assert source.skip_reason() == "2 runtime distributions configured, expected at most one"


def test_bundled_source_returns_single_root(tmp_path: Path) -> None:
    assert BundledRuntimeSource(paths=(tmp_path,)).root() == tmp_path


def test_vendor_source_requires_jetbrains_vendor(fake_service_factory, tmp_path: Path) -> None:
    service = fake_service_factory(tmp_path)

    assert ToolchainVendorSource(spec=ToolchainSpec(vendor="any"), service=service).root() is None
    assert ToolchainVendorSource(spec=ToolchainSpec(language_version=17), service=service).root() is None
    assert service.calls == []

    spec = ToolchainSpec(vendor="jetbrains", language_version=17)
    assert ToolchainVendorSource(spec=spec, service=service).root() == tmp_path
    assert service.calls == [spec]


def test_vendor_source_without_service_is_skipped() -> None:
    source = ToolchainVendorSource(spec=ToolchainSpec(vendor="JetBrains"))

    assert source.root() is None
    assert source.skip_reason() == "no toolchain service available"


def test_language_source_requires_language_version(fake_service_factory, tmp_path: Path) -> None:
    service = fake_service_factory(tmp_path)

    assert ToolchainLanguageSource(spec=ToolchainSpec(vendor="Azul"), service=service).root() is None
    assert ToolchainLanguageSource(spec=ToolchainSpec(language_version=11), service=service).root() == tmp_path


def test_toolchain_source_propagates_service_errors(fake_service_factory) -> None:
    service = fake_service_factory(error=ToolchainNotFoundError("nothing installed"))
    source = ToolchainLanguageSource(spec=ToolchainSpec(language_version=11), service=service)

    with pytest.raises(ToolchainNotFoundError):
        source.root()


def test_toolchain_source_rejects_empty_answer(fake_service_factory) -> None:
    source = ToolchainLanguageSource(spec=ToolchainSpec(language_version=11), service=fake_service_factory(None))

    with pytest.raises(ToolchainNotFoundError, match="languageVersion=11"):
        source.root()


def test_current_runtime_source_uses_provider(tmp_path: Path) -> None:
    assert CurrentRuntimeSource(provider=lambda: tmp_path).root() == tmp_path
    assert CurrentRuntimeSource(provider=lambda: None).root() is None


def test_current_java_home_prefers_java_home(tmp_path: Path) -> None:
    def _which(name: str) -> str | None:
        raise AssertionError("PATH must not be consulted when JAVA_HOME is set")

    assert current_java_home({"JAVA_HOME": str(tmp_path)}, _which) == tmp_path


def test_current_java_home_follows_java_on_path(tmp_path: Path, make_runtime) -> None:
    binary = make_runtime(tmp_path / "jdk")
    link_dir = tmp_path / "usr" / "bin"
    link_dir.mkdir(parents=True)
    link = link_dir / "java"
    link.symlink_to(binary)

    home = current_java_home({}, lambda name: str(link))

    assert home == (tmp_path / "jdk").resolve()


def test_current_java_home_strips_jre_directory(tmp_path: Path, make_runtime) -> None:
    binary = make_runtime(tmp_path / "jdk8", jre=True)

    assert current_java_home({}, lambda name: str(binary)) == (tmp_path / "jdk8").resolve()


def test_current_java_home_without_runtime() -> None:
    assert current_java_home({"JAVA_HOME": "  "}, lambda name: None) is None


def test_cardinality_violation_marks_source_misconfigured() -> None:
    assert ExplicitRuntimeSource(paths=("/a", "/b")).misconfigured
    assert BundledRuntimeSource(paths=("/a", "/b")).misconfigured
    assert not ExplicitRuntimeSource(paths=("/a", " ")).misconfigured
    assert not BundledRuntimeSource().misconfigured
    assert not CurrentRuntimeSource(provider=lambda: None).misconfigured


def test_current_java_home_falls_back_when_java_home_is_missing(tmp_path: Path, make_runtime) -> None:
    binary = make_runtime(tmp_path / "jdk")

    home = current_java_home({"JAVA_HOME": str(tmp_path / "gone")}, lambda name: str(binary))

    assert home == (tmp_path / "jdk").resolve()


def test_current_java_home_ignores_missing_java_home_without_path(tmp_path: Path) -> None:
    assert current_java_home({"JAVA_HOME": str(tmp_path / "gone")}, lambda name: None) is None
