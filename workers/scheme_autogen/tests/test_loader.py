"""Tests for io.loader — targets.json validation and product-type defaults."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from scheme_autogen.io.loader import load_targets, parse_targets
from scheme_autogen.io.schema import TargetKind
from scheme_autogen.policy.product_type import ProductType


class TestParseTargets:
    def test_keys_preserved(self, targets_document):
        targets = parse_targets(targets_document)
        assert set(targets) == {"app", "tests", "lib"}

    def test_capabilities_from_product_type(self, targets_document):
        targets = parse_targets(targets_document)
        assert targets["app"].is_launchable
        assert not targets["app"].is_testable
        assert targets["tests"].is_testable
        assert not targets["tests"].is_launchable
        assert not targets["lib"].is_launchable

    def test_explicit_capabilities_win(self, targets_document):
        targets_document["targets"]["app"]["capabilities"] = {"is_launchable": False}
        targets = parse_targets(targets_document)
        assert not targets["app"].is_launchable

    def test_default_launch_environment(self, targets_document):
        targets = parse_targets(targets_document)
        assert targets["app"].launch_environment_variables == {
            "BUILD_WORKSPACE_DIRECTORY": "$(BUILD_WORKSPACE_DIRECTORY)",
        }
        assert targets["lib"].launch_environment_variables is None

    def test_explicit_launch_environment_wins(self, targets_document):
        targets_document["targets"]["app"]["launch_environment_variables"] = {"KEY": "VALUE"}
        targets = parse_targets(targets_document)
        assert targets["app"].launch_environment_variables == {"KEY": "VALUE"}

    def test_defaults_without_product_type(self):
        targets = parse_targets({"targets": {"t": {"target_id": "//t", "name": "T"}}})
        target = targets["t"]
        assert target.kind is TargetKind.NATIVE
        assert target.product_type is None
        assert not target.is_testable and not target.is_launchable
        assert target.default_build_configuration_name == "Debug"
        assert target.should_create_scheme

    def test_product_type_enum(self, targets_document):
        targets = parse_targets(targets_document)
        assert targets["tests"].product_type is ProductType.UNIT_TEST_BUNDLE

    def test_missing_targets_mapping(self):
        with pytest.raises(ValueError, match="targets"):
            parse_targets({"schemes": {}})

    def test_row_not_object(self):
        with pytest.raises(ValueError, match="not an object"):
            parse_targets({"targets": {"x": []}})

    def test_unknown_product_type(self, targets_document):
        targets_document["targets"]["app"]["product_type"] = "com.example.nope"
        with pytest.raises(ValueError):
            parse_targets(targets_document)

    @pytest.mark.parametrize("caps", [5, "yes", [True]])
    def test_capabilities_not_object(self, targets_document, caps):
        targets_document["targets"]["app"]["capabilities"] = caps
        with pytest.raises(ValueError, match="'app' capabilities is not an object"):
            parse_targets(targets_document)

    def test_null_capabilities_use_product_type(self, targets_document):
        targets_document["targets"]["app"]["capabilities"] = None
        targets = parse_targets(targets_document)
        assert targets["app"].is_launchable

    def test_missing_required_field(self):
        with pytest.raises(ValidationError):
            parse_targets({"targets": {"x": {"name": "X"}}})


class TestLoadTargets:
    def test_load_from_disk(self, targets_json):
        targets = load_targets(targets_json)
        assert targets["app"].blueprint_identifier == "AA0000000000000000000001"
        assert targets["lib"].should_create_scheme is False
