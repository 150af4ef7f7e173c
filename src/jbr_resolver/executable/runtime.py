# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime resolution by an ordered fallback chain of candidate sources."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING

from ..filesystem.probe import PathProbe
from ..layout import LayoutResolver
from ..logging import TraceLogger
from ..models import (
    AttemptOutcome,
    ResolutionAttempt,
    ResolutionResult,
    ResolutionState,
    RuntimeExecutable,
)
from ..platform import OSFamily, detect_os_family
from ..toolchain.service import InstalledToolchains, ToolchainService
from ..toolchain.spec import ToolchainSpec
from .base import ExecutableResolver
from .sources import CandidateSource, RuntimeProvider, current_java_home, default_sources

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from ..config import ResolverConfig

LOGGER = logging.getLogger(__name__)


class RuntimeResolver(ExecutableResolver):
    """Select a Java runtime by trying candidate sources in priority order.

    The first source whose root yields a verified runtime home containing a
    ``java`` executable wins. The outcome is computed on first access and
    memoized; later calls never touch the filesystem again. Concurrent first
    callers are serialised so the chain runs at most once.
    """

    def __init__(
        self,
        sources: Sequence[CandidateSource],
        *,
        family: OSFamily | None = None,
        layout: LayoutResolver | None = None,
        context: str | None = None,
    ) -> None:
        self._sources = tuple(sources)
        self._family = family or detect_os_family()
        self._layout = layout or LayoutResolver()
        self._trace = TraceLogger(LOGGER, context)
        self._lock = threading.RLock()
        self._state = ResolutionState.UNEVALUATED
        self._result: ResolutionResult | None = None

    @classmethod
    def create(
        cls,
        *,
        runtime_dirs: Sequence[str | PathLike[str]] = (),
        platform_dirs: Sequence[str | PathLike[str]] = (),
        toolchain_spec: ToolchainSpec | None = None,
        toolchain_service: ToolchainService | None = None,
        current_runtime: RuntimeProvider = current_java_home,
        family: OSFamily | None = None,
        probe: PathProbe | None = None,
        context: str | None = None,
    ) -> RuntimeResolver:
        """Build a resolver wired with the standard candidate sources.

        Args:
            runtime_dirs: Explicit runtime distribution roots (zero or one).
            platform_dirs: Platform distribution roots (zero or one).
            toolchain_spec: Requested toolchain constraints.
            toolchain_service: Service turning the spec into an installation.
            current_runtime: Provider of the current process's runtime home.
            family: Operating-system family; detected when omitted.
            probe: Filesystem probe used for verification.
            context: Label prefixed to trace messages.

        Returns:
            RuntimeResolver: Resolver that has not evaluated anything yet.
        """

        sources = default_sources(
            runtime_dirs=runtime_dirs,
            platform_dirs=platform_dirs,
            toolchain_spec=toolchain_spec,
            toolchain_service=toolchain_service,
            current_runtime=current_runtime,
        )
        return cls(sources, family=family, layout=LayoutResolver(probe), context=context)

    @classmethod
    def from_config(
        cls,
        config: ResolverConfig,
        *,
        toolchain_service: ToolchainService | None = None,
        current_runtime: RuntimeProvider = current_java_home,
        family: OSFamily | None = None,
        probe: PathProbe | None = None,
    ) -> RuntimeResolver:
        """Build a resolver from a loaded :class:`ResolverConfig`.

        An :class:`InstalledToolchains` service over the configured search
        paths is used unless ``toolchain_service`` is supplied.
        """

        service = toolchain_service or InstalledToolchains(config.toolchain_search_paths)
        return cls.create(
            runtime_dirs=config.runtime_dirs,
            platform_dirs=config.platform_dirs,
            toolchain_spec=config.toolchain,
            toolchain_service=service,
            current_runtime=current_runtime,
            family=family,
            probe=probe,
            context=config.context,
        )

    @property
    def family(self) -> OSFamily:
        return self._family

    @property
    def sources(self) -> tuple[CandidateSource, ...]:
        return self._sources

    @property
    def state(self) -> ResolutionState:
        """Return the lifecycle state of the memoized outcome."""

        with self._lock:
            return self._state

    def resolve_directory(self) -> Path | None:
        home = self.result().home
        return home.path if home is not None else None

    def resolve_executable(self) -> Path | None:
        executable = self.result().executable
        return executable.path if executable is not None else None

    def result(self) -> ResolutionResult:
        """Return the memoized resolution outcome, evaluating it on first use.

        Returns:
            ResolutionResult: Resolved home and executable with the attempt
            trace. A re-entrant call made while the chain is being evaluated
            receives a non-memoized result in the ``evaluating`` state.
        """

        result = self._result
        if result is not None:
            return result
        with self._lock:
            if self._result is not None:
                return self._result
            if self._state is ResolutionState.EVALUATING:
                self._trace.debug("Runtime resolution requested while already evaluating.")
                return ResolutionResult(state=ResolutionState.EVALUATING)
            self._state = ResolutionState.EVALUATING
            try:
                result = self._evaluate()
            except BaseException:
                self._state = ResolutionState.UNEVALUATED
                raise
            self._result = result
            self._state = result.state
            return result

    def _evaluate(self) -> ResolutionResult:
        self._trace.debug("Resolving runtime directory.")
        attempts: list[ResolutionAttempt] = []
        for rank, source in enumerate(self._sources, start=1):
            attempt, executable = self._attempt(rank, source)
            attempts.append(attempt)
            if executable is not None:
                self._trace.info(f"Resolved Runtime directory: {executable.home.path}")
                return ResolutionResult(
                    state=ResolutionState.RESOLVED,
                    home=executable.home,
                    executable=executable,
                    attempts=tuple(attempts),
                )
        self._trace.info("Unable to resolve Runtime directory.")
        return ResolutionResult.unresolved(tuple(attempts))

    def _attempt(self, rank: int, source: CandidateSource) -> tuple[ResolutionAttempt, RuntimeExecutable | None]:
        label = source.label
        try:
            root = source.root()
        except Exception as exc:  # step failures become "no candidate"
            detail = f"{type(exc).__name__}: {exc}"
            self._trace.debug(f"Cannot resolve {label}: {detail}")
            return ResolutionAttempt(rank=rank, label=label, outcome=AttemptOutcome.FAILED, detail=detail), None

        if root is None:
            reason = source.skip_reason()
            if source.misconfigured:
                self._trace.warning(f"Skipping {label}: {reason}")
            else:
                self._trace.debug(f"Skipping {label}: {reason}")
            return ResolutionAttempt(rank=rank, label=label, outcome=AttemptOutcome.SKIPPED, detail=reason), None

        root = Path(root)
        try:
            home = self._layout.resolve_home(root, self._family)
            executable = self._layout.resolve_executable(home, self._family) if home is not None else None
        except Exception as exc:
            detail = f"{type(exc).__name__}: {exc}"
            self._trace.debug(f"Cannot resolve {label}: {root}: {detail}")
            return (
                ResolutionAttempt(rank=rank, label=label, outcome=AttemptOutcome.FAILED, root=root, detail=detail),
                None,
            )

        if home is None:
            detail = f"no runtime home found below {root}"
            self._trace.debug(f"Cannot resolve {label}: {root}")
            return (
                ResolutionAttempt(rank=rank, label=label, outcome=AttemptOutcome.NOT_FOUND, root=root, detail=detail),
                None,
            )

        self._trace.debug(f"{label} resolved as: {home.path}")
        if executable is None:
            detail = f"Java Runtime Executable not found in: {home.path}"
            self._trace.debug(detail)
            attempt = ResolutionAttempt(
                rank=rank,
                label=label,
                outcome=AttemptOutcome.NOT_FOUND,
                root=root,
                home=home.path,
                detail=detail,
            )
            return attempt, None

        attempt = ResolutionAttempt(
            rank=rank,
            label=label,
            outcome=AttemptOutcome.RESOLVED,
            root=root,
            home=home.path,
            detail=str(executable.path),
        )
        return attempt, executable


__all__ = ["RuntimeResolver"]
