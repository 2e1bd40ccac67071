"""
Profile — frozen constants stamped into every generated scheme.

None of these vary at runtime; they are grouped here so that every core
function receives them explicitly and output is reproducible given the
same profile + inputs.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SchemeProfile:
    """Immutable scheme constants (v1)."""

    # ── Scheme format ─────────────────────────────────────────────────────
    # TODO: derive last_upgrade_version from the Xcode version that opens
    # the project instead of pinning it.
    last_upgrade_version: str = "1320"
    version: str = "1.7"

    # ── Debugger ──────────────────────────────────────────────────────────
    custom_lldb_init_file: str = "$(BAZEL_LLDB_INIT)"

    # ── Pre-actions ───────────────────────────────────────────────────────
    output_groups_title: str = "Set Bazel Build Output Groups"

    # ── Archive ───────────────────────────────────────────────────────────
    reveal_archive_in_organizer: bool = True

    # ── Identity ──────────────────────────────────────────────────────────
    profile_id: str = "scheme-autogen-v1"

    @classmethod
    def v1(cls) -> SchemeProfile:
        """Return the canonical v1 profile with all defaults."""
        return cls()
