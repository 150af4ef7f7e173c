# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Toolchain specifications describing a requested Java runtime."""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, ConfigDict, Field, field_validator

JETBRAINS_RUNTIME_VENDOR: Final[str] = "JetBrains"
ANY_VENDOR: Final[str] = "any"


class ToolchainSpec(BaseModel):
    """Abstract request for a runtime matching vendor and language constraints.

    Attributes:
        vendor: Case-insensitive vendor pattern; ``None`` or ``"any"`` means
            no vendor constraint.
        language_version: Requested Java feature release, e.g. ``17``.
    """

    model_config = ConfigDict(frozen=True)

    vendor: str | None = None
    language_version: int | None = Field(default=None, ge=1)

    @field_validator("vendor")
    @classmethod
    def _blank_vendor_is_unset(cls, value: str | None) -> str | None:
        if value is None:
            return None
        stripped = value.strip()
        return stripped or None

    @property
    def has_vendor_constraint(self) -> bool:
        """Return ``True`` when the spec restricts the vendor."""

        return self.vendor is not None and self.vendor.casefold() != ANY_VENDOR

    def matches_vendor(self, vendor: str | None) -> bool:
        """Return ``True`` when ``vendor`` satisfies the vendor pattern.

        Matching follows Gradle's ``JvmVendorSpec.matching``: the pattern must
        occur in the vendor name, ignoring case.

        Args:
            vendor: Vendor reported by an installation, e.g. ``"JetBrains s.r.o."``.

        Returns:
            bool: ``True`` if unconstrained or the pattern occurs in ``vendor``.
        """

        if not self.has_vendor_constraint:
            return True
        if not vendor:
            return False
        assert self.vendor is not None
        return self.vendor.casefold() in vendor.casefold()

    def requests_jetbrains_runtime(self) -> bool:
        """Return ``True`` when a vendor constraint selects the JetBrains Runtime."""

        return self.has_vendor_constraint and self.matches_vendor(JETBRAINS_RUNTIME_VENDOR)

    def describe(self) -> str:
        parts = []
        if self.has_vendor_constraint:
            parts.append(f"vendor={self.vendor}")
        if self.language_version is not None:
            parts.append(f"languageVersion={self.language_version}")
        return ", ".join(parts) or "unconstrained"


__all__ = ["ANY_VENDOR", "JETBRAINS_RUNTIME_VENDOR", "ToolchainSpec"]
