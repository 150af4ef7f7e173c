# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer
from rich import box
from rich.table import Table
from rich.text import Text

from ..bundled import bundled_runtime_build
from ..console import detect_tty, get_console
from ..errors import ConfigError
from ..logging import configure_logging, fail, info, ok, section, warn
from ..models import AttemptOutcome, ResolutionResult
from ..platform import OSFamily
from .options import ResolveCLIOptions

app = typer.Typer(
    help="Resolve the Java runtime used to run IntelliJ Platform tooling.",
    add_completion=False,
    no_args_is_help=True,
)

RootOption = Annotated[
    Path,
    typer.Option("--root", help="Project directory holding jbr-resolver configuration.", file_okay=False),
]
RuntimeDirOption = Annotated[
    list[Path] | None,
    typer.Option("--runtime-dir", help="Explicit runtime distribution root (only one is honoured)."),
]
PlatformDirOption = Annotated[
    list[Path] | None,
    typer.Option("--platform-dir", help="Platform distribution root that may bundle a runtime."),
]
VendorOption = Annotated[str | None, typer.Option("--vendor", help="Toolchain vendor pattern, e.g. JetBrains.")]
LanguageVersionOption = Annotated[
    int | None,
    typer.Option("--language-version", min=1, help="Toolchain Java language version."),
]
OSFamilyOption = Annotated[
    OSFamily | None,
    typer.Option("--os-family", case_sensitive=False, help="Override the detected operating-system family."),
]
ContextOption = Annotated[str | None, typer.Option("--context", help="Label prefixed to trace messages.")]
VerboseOption = Annotated[bool, typer.Option("--verbose", "-v", help="Emit the resolution trace on stderr.")]
EmojiOption = Annotated[bool, typer.Option("--emoji/--no-emoji", help="Toggle emoji in console output.")]

_OUTCOME_STYLES = {
    AttemptOutcome.RESOLVED: "green",
    AttemptOutcome.NOT_FOUND: "yellow",
    AttemptOutcome.SKIPPED: "dim",
    AttemptOutcome.FAILED: "red",
}


def _build_options(
    root: Path,
    runtime_dir: list[Path] | None,
    platform_dir: list[Path] | None,
    vendor: str | None,
    language_version: int | None,
    os_family: OSFamily | None,
    context: str | None,
) -> ResolveCLIOptions:
    return ResolveCLIOptions(
        root=root.expanduser().resolve(),
        runtime_dirs=tuple(runtime_dir or ()),
        platform_dirs=tuple(platform_dir or ()),
        vendor=vendor,
        language_version=language_version,
        os_family=os_family,
        context=context,
    )


def _resolve(options: ResolveCLIOptions, *, use_emoji: bool) -> ResolutionResult:
    try:
        resolver = options.build_resolver()
    except ConfigError as exc:
        fail(str(exc), use_emoji=use_emoji)
        raise typer.Exit(code=2) from exc
    return resolver.result()


@app.command("resolve")
def resolve_command(
    root: RootOption = Path("."),
    runtime_dir: RuntimeDirOption = None,
    platform_dir: PlatformDirOption = None,
    vendor: VendorOption = None,
    language_version: LanguageVersionOption = None,
    os_family: OSFamilyOption = None,
    context: ContextOption = None,
    executable: Annotated[bool, typer.Option("--executable", help="Print the java executable instead of the home.")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the full resolution result as JSON.")] = False,
    verbose: VerboseOption = False,
) -> None:
    """Print the resolved runtime home (or executable); exit 1 when unresolved."""

    configure_logging(verbose=verbose)
    options = _build_options(root, runtime_dir, platform_dir, vendor, language_version, os_family, context)
    result = _resolve(options, use_emoji=False)

    if as_json:
        typer.echo(json.dumps(result.model_dump(mode="json"), indent=2))
    elif result.resolved:
        assert result.executable is not None
        typer.echo(str(result.executable.path if executable else result.executable.home.path))
    else:
        typer.echo("Unable to resolve a Java runtime.", err=True)
    raise typer.Exit(code=0 if result.resolved else 1)


@app.command("explain")
def explain_command(
    root: RootOption = Path("."),
    runtime_dir: RuntimeDirOption = None,
    platform_dir: PlatformDirOption = None,
    vendor: VendorOption = None,
    language_version: LanguageVersionOption = None,
    os_family: OSFamilyOption = None,
    context: ContextOption = None,
    use_emoji: EmojiOption = True,
    verbose: VerboseOption = False,
) -> None:
    """Show every candidate source that was tried and why it won or lost."""

    configure_logging(verbose=verbose)
    options = _build_options(root, runtime_dir, platform_dir, vendor, language_version, os_family, context)
    result = _resolve(options, use_emoji=use_emoji)

    color = detect_tty()
    section("Runtime Resolution", use_color=color)
    table = Table(box=box.SIMPLE, expand=True)
    table.add_column("#", justify="right")
    table.add_column("Source", style="bold")
    table.add_column("Outcome")
    table.add_column("Root", overflow="fold")
    table.add_column("Details", overflow="fold")
    for attempt in result.attempts:
        style = _OUTCOME_STYLES[attempt.outcome]
        table.add_row(
            str(attempt.rank),
            Text(attempt.label),
            Text(attempt.outcome.value, style=style),
            Text(str(attempt.root) if attempt.root is not None else "-"),
            Text(attempt.detail or "-"),
        )
    get_console(color=color, emoji=use_emoji).print(table)

    if result.resolved:
        assert result.executable is not None
        if result.winner is not None:
            info(f"Selected by: {result.winner.label}", use_emoji=use_emoji)
        ok(f"Resolved {result.executable.path}", use_emoji=use_emoji)
    else:
        warn("No candidate source produced a Java runtime.", use_emoji=use_emoji)
    if result.has_failures:
        warn("Some candidate sources failed; check the configuration.", use_emoji=use_emoji)
    raise typer.Exit(code=0 if result.resolved else 1)


@app.command("bundled-build")
def bundled_build_command(
    platform_dir: Annotated[Path, typer.Argument(help="Platform distribution root.", file_okay=False)],
) -> None:
    """Print the runtime build bundled with a platform distribution."""

    build = bundled_runtime_build(platform_dir)
    if build is None:
        typer.echo(f"No bundled runtime build recorded in {platform_dir}", err=True)
        raise typer.Exit(code=1)
    typer.echo(build)


def main() -> None:
    app()


__all__ = ["app", "main"]
