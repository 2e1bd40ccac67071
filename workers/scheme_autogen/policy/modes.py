"""
Frozen vocabulary for the process-wide generation switches.

``BuildMode`` selects which external build orchestrator integration is
active; the core only reads its two derived booleans.
``SchemeAutogenerationMode`` gates the whole generation step.
"""
from __future__ import annotations

from enum import Enum


class BuildMode(str, Enum):
    """Which build system drives builds started from the IDE."""

    XCODE = "xcode"
    BAZEL = "bazel"

    @property
    def uses_bazel_environment_variables(self) -> bool:
        """Launch actions carry the product-type environment mapping."""
        return self is BuildMode.BAZEL

    @property
    def uses_bazel_mode_build_scripts(self) -> bool:
        """Build actions carry the output-groups pre-action script."""
        return self is BuildMode.BAZEL


class SchemeAutogenerationMode(str, Enum):
    """Tri-state switch for scheme autogeneration.

    ``AUTO`` and ``ALL`` produce the same result here; the distinction
    only matters to callers that also merge in custom schemes.
    """

    NONE = "none"
    AUTO = "auto"
    ALL  = "all"
