"""
Schema — Pydantic models for scheme_autogen inputs and outputs.

Input:
  TargetDescriptor    — one build target as handed over by the target
                        provider (read-only to the core).

Outputs:
  XCScheme            — one scheme descriptor per eligible target, with
                        six sub-actions.
  SchemeReport        — scheme_report.json, run-level summary.

Runtime contract fields (report only):
  package_name, generator_version, schema_version, profile_id.
"""
from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from scheme_autogen import GENERATOR_VERSION, PACKAGE_NAME, SCHEMA_VERSION
from scheme_autogen.policy.product_type import ProductType


# ═══════════════════════════════════════════════════════════════════════════════
# Target descriptor (input)
# ═══════════════════════════════════════════════════════════════════════════════

class TargetKind(str, Enum):
    """Closed set of target kinds.  Only NATIVE builds a product itself."""

    NATIVE    = "native"
    AGGREGATE = "aggregate"
    OTHER     = "other"


class TargetCapabilities(BaseModel):
    """Capability flags that drive which actions a scheme gets."""

    model_config = ConfigDict(frozen=True)

    is_testable: bool = False
    is_launchable: bool = False


class TargetDescriptor(BaseModel):
    """One build target."""

    model_config = ConfigDict(frozen=True)

    # ── Identity ──────────────────────────────────────────────────────────
    target_id: str                              # written to the output-groups file
    name: str                                   # display + blueprint name
    blueprint_identifier: Optional[str] = None  # object id inside the container
    product_name: Optional[str] = None          # buildable name, e.g. "App.app"

    # ── Capabilities ──────────────────────────────────────────────────────
    kind: TargetKind = TargetKind.NATIVE
    capabilities: TargetCapabilities = Field(default_factory=TargetCapabilities)
    product_type: Optional[ProductType] = None

    # ── Scheme inputs ─────────────────────────────────────────────────────
    default_build_configuration_name: str = "Debug"
    should_create_scheme: bool = True
    launch_environment_variables: Optional[Dict[str, str]] = None

    @property
    def is_testable(self) -> bool:
        return self.capabilities.is_testable

    @property
    def is_launchable(self) -> bool:
        return self.capabilities.is_launchable

    @property
    def is_native_kind(self) -> bool:
        return self.kind is TargetKind.NATIVE

    @property
    def scheme_name(self) -> str:
        """Scheme names become file names, so path separators are replaced."""
        return self.name.replace("/", "_")

    @property
    def buildable_name(self) -> str:
        return self.product_name or self.name


# ═══════════════════════════════════════════════════════════════════════════════
# Scheme building blocks
# ═══════════════════════════════════════════════════════════════════════════════

class BuildableReference(BaseModel):
    """Ties a target's product to the container it lives in."""

    model_config = ConfigDict(frozen=True)

    referenced_container: str
    blueprint_identifier: str
    buildable_name: str
    blueprint_name: str


class BuildFor(str, Enum):
    RUNNING   = "running"
    TESTING   = "testing"
    PROFILING = "profiling"
    ARCHIVING = "archiving"
    ANALYZING = "analyzing"


ALL_BUILD_FOR: List[BuildFor] = [
    BuildFor.RUNNING,
    BuildFor.TESTING,
    BuildFor.PROFILING,
    BuildFor.ARCHIVING,
    BuildFor.ANALYZING,
]


class BuildActionEntry(BaseModel):
    buildable_reference: BuildableReference
    build_for: List[BuildFor] = Field(default_factory=list)


class ExecutionAction(BaseModel):
    """A shell script run before (or after) an action."""

    script_text: str
    title: str
    environment_buildable: Optional[BuildableReference] = None


class BuildableProductRunnable(BaseModel):
    buildable_reference: BuildableReference
    runnable_debugging_mode: str = "0"


class TestableReference(BaseModel):
    skipped: bool
    buildable_reference: BuildableReference


# ═══════════════════════════════════════════════════════════════════════════════
# Actions
# ═══════════════════════════════════════════════════════════════════════════════

class BuildAction(BaseModel):
    build_action_entries: List[BuildActionEntry] = Field(default_factory=list)
    pre_actions: List[ExecutionAction] = Field(default_factory=list)
    parallelize_build: bool = True
    build_implicit_dependencies: bool = True


class TestAction(BaseModel):
    build_configuration: str
    macro_expansion: Optional[BuildableReference] = None
    testables: List[TestableReference] = Field(default_factory=list)
    custom_lldb_init_file: Optional[str] = None


class LaunchAction(BaseModel):
    runnable: Optional[BuildableProductRunnable] = None
    build_configuration: str
    macro_expansion: Optional[BuildableReference] = None
    environment_variables: Optional[Dict[str, str]] = None
    custom_lldb_init_file: Optional[str] = None


class ProfileAction(BaseModel):
    buildable_product_runnable: Optional[BuildableProductRunnable] = None
    build_configuration: str


class AnalyzeAction(BaseModel):
    build_configuration: str


class ArchiveAction(BaseModel):
    build_configuration: str
    reveal_archive_in_organizer: bool = False


# ═══════════════════════════════════════════════════════════════════════════════
# Scheme descriptor
# ═══════════════════════════════════════════════════════════════════════════════

class XCScheme(BaseModel):
    """One generated scheme."""

    name: str
    last_upgrade_version: str
    version: str

    build_action: BuildAction
    test_action: TestAction
    launch_action: LaunchAction
    profile_action: ProfileAction
    analyze_action: AnalyzeAction
    archive_action: ArchiveAction

    was_created_for_app_extension: Optional[bool] = None


# ═══════════════════════════════════════════════════════════════════════════════
# Run report (scheme_report.json)
# ═══════════════════════════════════════════════════════════════════════════════

class SchemeCounts(BaseModel):
    n_targets: int = 0
    n_skipped: int = 0
    n_schemes: int = 0
    n_testable: int = 0
    n_launchable: int = 0
    n_with_pre_actions: int = 0


class SchemeReport(BaseModel):
    """Run-level summary — scheme_report.json."""

    # ── Contract fields ───────────────────────────────────────────────────
    package_name: str = PACKAGE_NAME
    generator_version: str = GENERATOR_VERSION
    schema_version: str = SCHEMA_VERSION
    profile_id: str = ""

    # ── Inputs ────────────────────────────────────────────────────────────
    build_mode: str = ""
    scheme_autogeneration_mode: str = ""
    referenced_container: str = ""

    # ── Results ───────────────────────────────────────────────────────────
    counts: SchemeCounts = Field(default_factory=SchemeCounts)
    scheme_names: List[str] = Field(default_factory=list)

    timestamp: str = Field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )
