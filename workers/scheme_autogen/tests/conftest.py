"""
Test fixtures for scheme_autogen.

All fixtures are pure-Python: no real project files, no IDE.  They
provide minimal target descriptors covering each capability branch.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import pytest

from scheme_autogen.io.schema import (
    TargetCapabilities,
    TargetDescriptor,
    TargetKind,
)

CONTAINER = "container:App.xcodeproj"


# ═══════════════════════════════════════════════════════════════════════════════
# Target descriptors
# ═══════════════════════════════════════════════════════════════════════════════

@pytest.fixture
def container() -> str:
    return CONTAINER


@pytest.fixture
def app_target() -> TargetDescriptor:
    """Launchable, non-testable native target."""
    return TargetDescriptor(
        target_id="//app:App ios-arm64-min15.0",
        name="App",
        blueprint_identifier="AA0000000000000000000001",
        product_name="App.app",
        kind=TargetKind.NATIVE,
        capabilities=TargetCapabilities(is_testable=False, is_launchable=True),
        default_build_configuration_name="Debug",
        launch_environment_variables={"KEY": "VALUE"},
    )


@pytest.fixture
def test_target() -> TargetDescriptor:
    """Testable native target (unit-test bundle)."""
    return TargetDescriptor(
        target_id="//app:AppTests ios-arm64-min15.0",
        name="AppTests",
        blueprint_identifier="AA0000000000000000000002",
        product_name="AppTests.xctest",
        capabilities=TargetCapabilities(is_testable=True, is_launchable=False),
        default_build_configuration_name="Test",
    )


@pytest.fixture
def library_target() -> TargetDescriptor:
    """Neither testable nor launchable."""
    return TargetDescriptor(
        target_id="//lib:Lib ios-arm64-min15.0",
        name="Lib",
        blueprint_identifier="AA0000000000000000000003",
        product_name="libLib.a",
    )


@pytest.fixture
def aggregate_target() -> TargetDescriptor:
    return TargetDescriptor(
        target_id="//tools:Gen",
        name="tools/Gen",
        blueprint_identifier="AA0000000000000000000004",
        kind=TargetKind.AGGREGATE,
    )


@pytest.fixture
def skipped_target() -> TargetDescriptor:
    """Opts out of scheme creation; also lacks a blueprint identifier."""
    return TargetDescriptor(
        target_id="//internal:Hidden",
        name="Hidden",
        should_create_scheme=False,
    )


@pytest.fixture
def targets(
    app_target, test_target, library_target, aggregate_target, skipped_target,
) -> Dict[str, TargetDescriptor]:
    return {
        "app": app_target,
        "tests": test_target,
        "lib": library_target,
        "gen": aggregate_target,
        "hidden": skipped_target,
    }


# ═══════════════════════════════════════════════════════════════════════════════
# targets.json on disk
# ═══════════════════════════════════════════════════════════════════════════════

TARGETS_DOCUMENT = {
    "targets": {
        "app": {
            "target_id": "//app:App ios-arm64-min15.0",
            "name": "App",
            "blueprint_identifier": "AA0000000000000000000001",
            "product_name": "App.app",
            "product_type": "com.apple.product-type.application",
        },
        "tests": {
            "target_id": "//app:AppTests ios-arm64-min15.0",
            "name": "AppTests",
            "blueprint_identifier": "AA0000000000000000000002",
            "product_name": "AppTests.xctest",
            "product_type": "com.apple.product-type.bundle.unit-test",
        },
        "lib": {
            "target_id": "//lib:Lib ios-arm64-min15.0",
            "name": "Lib",
            "blueprint_identifier": "AA0000000000000000000003",
            "product_type": "com.apple.product-type.library.static",
            "should_create_scheme": False,
        },
    },
}


@pytest.fixture
def targets_document() -> dict:
    return json.loads(json.dumps(TARGETS_DOCUMENT))


@pytest.fixture
def targets_json(tmp_path: Path, targets_document: dict) -> Path:
    path = tmp_path / "targets.json"
    path.write_text(json.dumps(targets_document), encoding="utf-8")
    return path
