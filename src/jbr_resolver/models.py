# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Value objects produced by runtime resolution."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .errors import RuntimeNotResolvedError


class ResolutionState(str, Enum):
    """Lifecycle of a resolver's memoized outcome."""

    UNEVALUATED = "unevaluated"
    EVALUATING = "evaluating"
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"


class AttemptOutcome(str, Enum):
    """Outcome recorded for a single candidate source."""

    SKIPPED = "skipped"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    RESOLVED = "resolved"


class RuntimeHome(BaseModel):
    """Verified runtime home directory."""

    model_config = ConfigDict(frozen=True)

    path: Path

    def __str__(self) -> str:
        return str(self.path)


class RuntimeExecutable(BaseModel):
    """Verified ``java`` binary located inside a :class:`RuntimeHome`."""

    model_config = ConfigDict(frozen=True)

    path: Path
    home: RuntimeHome

    def __str__(self) -> str:
        return str(self.path)


class ResolutionAttempt(BaseModel):
    """Diagnostic record describing how one candidate source fared."""

    model_config = ConfigDict(frozen=True)

    rank: int
    label: str
    outcome: AttemptOutcome
    root: Path | None = None
    home: Path | None = None
    detail: str = ""


class ResolutionResult(BaseModel):
    """Memoized outcome of running the resolution chain."""

    model_config = ConfigDict(frozen=True)

    state: ResolutionState
    home: RuntimeHome | None = None
    executable: RuntimeExecutable | None = None
    attempts: tuple[ResolutionAttempt, ...] = Field(default_factory=tuple)

    @property
    def resolved(self) -> bool:
        """Return ``True`` when both the home and the executable were verified."""

        return self.state is ResolutionState.RESOLVED

    @property
    def winner(self) -> ResolutionAttempt | None:
        """Return the attempt that produced the memoized runtime, if any."""

        for attempt in self.attempts:
            if attempt.outcome is AttemptOutcome.RESOLVED:
                return attempt
        return None

    @property
    def has_failures(self) -> bool:
        """Return ``True`` when a collaborator or step failed unexpectedly.

        Distinguishes misconfiguration (a step raised) from plain absence.
        """

        return any(attempt.outcome is AttemptOutcome.FAILED for attempt in self.attempts)

    def require(self) -> RuntimeExecutable:
        """Return the verified executable or raise when resolution failed.

        Returns:
            RuntimeExecutable: Executable of the resolved runtime.

        Raises:
            RuntimeNotResolvedError: If no candidate source could be verified.
        """

        if self.executable is None:
            tried = ", ".join(f"{attempt.label} ({attempt.outcome.value})" for attempt in self.attempts)
            raise RuntimeNotResolvedError(
                f"Unable to resolve a Java runtime; tried: {tried or 'nothing'}",
                attempts=self.attempts,
            )
        return self.executable

    @classmethod
    def unresolved(cls, attempts: tuple[ResolutionAttempt, ...] = ()) -> ResolutionResult:
        return cls(state=ResolutionState.UNRESOLVED, attempts=attempts)


__all__ = [
    "AttemptOutcome",
    "ResolutionAttempt",
    "ResolutionResult",
    "ResolutionState",
    "RuntimeExecutable",
    "RuntimeHome",
]
