# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Side-effect free filesystem predicates used during runtime resolution."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

_Pathish = str | PathLike[str] | Path


class PathProbe:
    """Answer existence and directory-listing questions without raising.

    Probes only stat and list directories; nothing is created or modified.
    Subclasses may override the primitives to count or fake filesystem access.
    """

    def exists(self, path: _Pathish) -> bool:
        """Return ``True`` when ``path`` names an existing file or directory.

        Args:
            path: Filesystem entry to check.

        Returns:
            bool: ``True`` if the entry is present; I/O errors count as absent.
        """

        try:
            return Path(path).exists()
        except (OSError, ValueError):
            return False

    def find_child_with_prefix(self, directory: _Pathish, prefix: str) -> Path | None:
        """Return the first immediate child of ``directory`` named ``prefix*``.

        Args:
            directory: Directory whose direct children are inspected.
            prefix: Name prefix the child must start with.

        Returns:
            Path | None: Lexicographically first matching child, or ``None``
            when the directory is unreadable or nothing matches.
        """

        try:
            names = sorted(entry.name for entry in Path(directory).iterdir())
        except (OSError, ValueError):
            return None
        for name in names:
            if name.startswith(prefix):
                return Path(directory) / name
        return None


DEFAULT_PROBE = PathProbe()


__all__ = ["DEFAULT_PROBE", "PathProbe"]
