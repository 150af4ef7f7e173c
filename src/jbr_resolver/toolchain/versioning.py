# SPDX-License-Identifier: MIT
"""Helpers for normalising and comparing Java runtime versions."""

from __future__ import annotations

import re

from packaging.version import InvalidVersion, Version


class JavaVersionParser:
    """Parse ``JAVA_VERSION`` strings using standardized semantics."""

    VERSION_PATTERN = re.compile(r"(\d+(?:\.\d+)*)")

    def normalize(self, raw: str | None) -> str | None:
        if not raw:
            return None
        match = self.VERSION_PATTERN.search(raw)
        if match is None:
            return None
        candidate = match.group(1)
        try:
            Version(candidate)
        except InvalidVersion:
            return None
        return candidate

    def parse(self, raw: str | None) -> Version | None:
        """Return a comparable :class:`Version` for ``raw`` when possible."""

        normalized = self.normalize(raw)
        return Version(normalized) if normalized else None

    def language_version(self, raw: str | None) -> int | None:
        """Return the feature release number, mapping ``1.8.0_292`` to ``8``."""

        version = self.parse(raw)
        if version is None:
            return None
        release = version.release
        if release[0] == 1 and len(release) > 1:
            return release[1]
        return release[0]


__all__ = ["JavaVersionParser"]
