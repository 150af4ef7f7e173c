# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Executable resolver abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class ExecutableResolver(ABC):
    """Strategy object locating a runtime directory and the executable inside it.

    Implementations must only return executables verified to exist when the
    resolution was evaluated.
    """

    @abstractmethod
    def resolve_directory(self) -> Path | None:
        """Return the verified runtime home, or ``None`` when unresolved."""

        raise NotImplementedError

    @abstractmethod
    def resolve_executable(self) -> Path | None:
        """Return the verified executable, or ``None`` when unresolved."""

        raise NotImplementedError


__all__ = ["ExecutableResolver"]
