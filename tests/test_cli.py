# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from jbr_resolver.bundled import DEPENDENCIES_FILE
from jbr_resolver.cli.app import app
from jbr_resolver.console import reset_consoles
from jbr_resolver.platform import OSFamily

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "JAVA_HOME",
        "JBR_RESOLVER_RUNTIME_DIR",
        "JBR_RESOLVER_PLATFORM_DIR",
        "JBR_RESOLVER_VENDOR",
        "JBR_RESOLVER_LANGUAGE_VERSION",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("jbr_resolver.executable.sources.shutil.which", lambda name: None)
    monkeypatch.setenv("COLUMNS", "300")
    reset_consoles()


def test_resolve_prints_runtime_home(tmp_path: Path, make_runtime) -> None:
    runtime = tmp_path / "jbr17"
    make_runtime(runtime)

    result = runner.invoke(
        app,
        ["resolve", "--root", str(tmp_path), "--runtime-dir", str(runtime), "--os-family", "other_unix"],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == str(runtime.resolve())


def test_resolve_prints_executable(tmp_path: Path, make_runtime) -> None:
    platform_root = tmp_path / "idea"
    binary = make_runtime(platform_root / "jbr", family=OSFamily.WINDOWS)

    result = runner.invoke(
        app,
        [
            "resolve",
            "--root",
            str(tmp_path),
            "--platform-dir",
            str(platform_root),
            "--os-family",
            "windows",
            "--executable",
        ],
    )

    assert result.exit_code == 0
    assert result.stdout.strip() == str(binary.resolve())


def test_resolve_reads_project_configuration(tmp_path: Path, make_runtime) -> None:
    make_runtime(tmp_path / "runtimes" / "jbr")
    (tmp_path / "jbr-resolver.toml").write_text('runtime_dirs = ["runtimes/jbr"]\n', encoding="utf-8")

    result = runner.invoke(app, ["resolve", "--root", str(tmp_path), "--os-family", "other_unix"])

    assert result.exit_code == 0
    assert result.stdout.strip() == str((tmp_path / "runtimes" / "jbr").resolve())


def test_resolve_json_output(tmp_path: Path, make_runtime) -> None:
    runtime = tmp_path / "jbr17"
    make_runtime(runtime)

    result = runner.invoke(
        app,
        ["resolve", "--root", str(tmp_path), "--runtime-dir", str(runtime), "--os-family", "other_unix", "--json"],
    )

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert payload["state"] == "resolved"
    assert payload["attempts"][0]["outcome"] == "resolved"


def test_resolve_unresolved_exits_with_one(tmp_path: Path) -> None:
    result = runner.invoke(app, ["resolve", "--root", str(tmp_path), "--os-family", "other_unix"])

    assert result.exit_code == 1
    assert "Unable to resolve a Java runtime." in result.output


def test_resolve_invalid_configuration_exits_with_two(tmp_path: Path) -> None:
    (tmp_path / "jbr-resolver.toml").write_text("unknown_key = 1\n", encoding="utf-8")

    result = runner.invoke(app, ["resolve", "--root", str(tmp_path), "--os-family", "other_unix"])

    assert result.exit_code == 2
    assert "Invalid jbr-resolver configuration" in result.stdout


def test_explain_renders_attempt_table(tmp_path: Path, make_runtime) -> None:
    platform_root = tmp_path / "idea"
    make_runtime(platform_root / "jbr")

    result = runner.invoke(
        app,
        [
            "explain",
            "--root",
            str(tmp_path),
            "--platform-dir",
            str(platform_root),
            "--os-family",
            "other_unix",
            "--no-emoji",
        ],
    )

    assert result.exit_code == 0
    assert "Runtime Resolution" in result.stdout
    assert "skipped" in result.stdout
    assert "resolved" in result.stdout
    assert "Resolved" in result.stdout


def test_explain_unresolved_warns(tmp_path: Path) -> None:
    result = runner.invoke(app, ["explain", "--root", str(tmp_path), "--os-family", "other_unix", "--no-emoji"])

    assert result.exit_code == 1
    assert "No candidate source produced a Java runtime." in result.stdout


def test_bundled_build_command(tmp_path: Path) -> None:
    (tmp_path / DEPENDENCIES_FILE).write_text("runtimeBuild=17.0.9b1087.7\n", encoding="utf-8")

    result = runner.invoke(app, ["bundled-build", str(tmp_path)])

    assert result.exit_code == 0
    assert result.stdout.strip() == "17.0.9b1087.7"


def test_bundled_build_command_missing(tmp_path: Path) -> None:
    result = runner.invoke(app, ["bundled-build", str(tmp_path)])

    assert result.exit_code == 1


def test_explain_reports_winning_source(tmp_path: Path, make_runtime) -> None:
    runtime = tmp_path / "jbr17"
    make_runtime(runtime)

    result = runner.invoke(
        app,
        ["explain", "--root", str(tmp_path), "--runtime-dir", str(runtime), "--os-family", "other_unix", "--no-emoji"],
    )

    assert result.exit_code == 0
    assert "--- Runtime Resolution ---" in result.stdout
    assert "Selected by: JetBrains Runtime specified with dependencies" in result.stdout


def test_explain_renders_paths_that_look_like_markup(tmp_path: Path) -> None:
    odd = tmp_path / "odd[" / "bold]"
    odd.mkdir(parents=True)

    result = runner.invoke(
        app,
        ["explain", "--root", str(tmp_path), "--runtime-dir", str(odd), "--os-family", "other_unix", "--no-emoji"],
    )

    assert result.exit_code == 1
    assert "odd[/bold]" in result.stdout
    assert "not_found" in result.stdout
