"""Tests for core.references and the policy enums it depends on."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from scheme_autogen.core.references import (
    ReferenceConstructionError,
    create_buildable_reference,
    resolve_container_reference,
)
from scheme_autogen.io.schema import TargetDescriptor
from scheme_autogen.policy.modes import BuildMode
from scheme_autogen.policy.product_type import ProductType


class TestContainerReference:
    def test_prefixes_project_path(self):
        assert resolve_container_reference("ios/App.xcodeproj") == (
            "container:ios/App.xcodeproj"
        )

    def test_keeps_existing_reference(self):
        assert resolve_container_reference("container:App.xcodeproj") == (
            "container:App.xcodeproj"
        )

    @pytest.mark.parametrize("path", ["", "   ", "container:"])
    def test_empty_path_raises(self, path):
        with pytest.raises(ReferenceConstructionError):
            resolve_container_reference(path)


class TestBuildableReference:
    def test_fields(self, app_target, container):
        ref = create_buildable_reference(app_target, container)
        assert ref.referenced_container == container
        assert ref.blueprint_identifier == "AA0000000000000000000001"
        assert ref.buildable_name == "App.app"
        assert ref.blueprint_name == "App"

    def test_buildable_name_falls_back_to_name(self, aggregate_target, container):
        ref = create_buildable_reference(aggregate_target, container)
        assert ref.buildable_name == "tools/Gen"

    def test_missing_blueprint_identifier(self, skipped_target, container):
        with pytest.raises(ReferenceConstructionError, match="Hidden"):
            create_buildable_reference(skipped_target, container)

    def test_blank_name(self, container):
        target = TargetDescriptor(
            target_id="//x:X", name="  ", blueprint_identifier="CC01",
        )
        with pytest.raises(ReferenceConstructionError, match="empty name"):
            create_buildable_reference(target, container)

    @pytest.mark.parametrize("bad", ["", "container:", "App.xcodeproj"])
    def test_bad_container(self, app_target, bad):
        with pytest.raises(ReferenceConstructionError, match="container"):
            create_buildable_reference(app_target, bad)

    def test_reference_is_frozen(self, app_target, container):
        ref = create_buildable_reference(app_target, container)
        with pytest.raises(ValidationError):
            ref.blueprint_name = "Other"  # type: ignore[misc]

    def test_error_is_value_error(self):
        assert issubclass(ReferenceConstructionError, ValueError)


class TestModes:
    def test_bazel_flags(self):
        assert BuildMode.BAZEL.uses_bazel_environment_variables
        assert BuildMode.BAZEL.uses_bazel_mode_build_scripts

    def test_xcode_flags(self):
        assert not BuildMode.XCODE.uses_bazel_environment_variables
        assert not BuildMode.XCODE.uses_bazel_mode_build_scripts


class TestProductType:
    def test_test_bundles(self):
        assert ProductType.UNIT_TEST_BUNDLE.is_test_bundle
        assert ProductType.UI_TEST_BUNDLE.is_test_bundle
        assert not ProductType.APPLICATION.is_test_bundle

    def test_launchable(self):
        assert ProductType.APPLICATION.is_launchable
        assert ProductType.COMMAND_LINE_TOOL.is_launchable
        assert not ProductType.STATIC_LIBRARY.is_launchable
        assert not ProductType.UNIT_TEST_BUNDLE.is_launchable

    def test_launch_environment(self):
        assert ProductType.APPLICATION.bazel_launch_environment_variables == {
            "BUILD_WORKSPACE_DIRECTORY": "$(BUILD_WORKSPACE_DIRECTORY)",
        }
        assert ProductType.FRAMEWORK.bazel_launch_environment_variables is None

    def test_launch_environment_is_a_copy(self):
        env = ProductType.APPLICATION.bazel_launch_environment_variables
        env["EXTRA"] = "1"
        assert "EXTRA" not in ProductType.APPLICATION.bazel_launch_environment_variables
