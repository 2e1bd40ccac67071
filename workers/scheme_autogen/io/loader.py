"""
Loader — read target descriptors handed over by the target provider.

Expected file shape (``targets.json``)::

    {
      "targets": {
        "<target key>": {
          "target_id": "//app:App ios-arm64-min15.0",
          "name": "App",
          "blueprint_identifier": "A1B2C3...",
          "product_type": "com.apple.product-type.application",
          ...
        }
      }
    }

Capability flags and the launch environment are optional; when a row
leaves them out they are derived from ``product_type``.  Field types are
validated at the Pydantic boundary (``TargetDescriptor``).
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

from scheme_autogen.io.schema import TargetDescriptor
from scheme_autogen.policy.product_type import ProductType

log = logging.getLogger(__name__)


def _load_json(path: Path) -> Any:
    """Read a JSON file and return the parsed object."""
    with open(path, "r", encoding="utf-8") as fh:
        return json.load(fh)


def _with_product_type_defaults(key: str, row: Dict[str, Any]) -> Dict[str, Any]:
    """Fill capabilities / launch environment from the product type."""
    raw_type = row.get("product_type")
    if raw_type is None:
        return row

    product_type = ProductType(raw_type)
    row = dict(row)

    raw_caps = row.get("capabilities")
    if raw_caps is None:
        raw_caps = {}
    if not isinstance(raw_caps, dict):
        raise ValueError(f"Target {key!r} capabilities is not an object")
    caps = dict(raw_caps)
    caps.setdefault("is_testable", product_type.is_test_bundle)
    caps.setdefault("is_launchable", product_type.is_launchable)
    row["capabilities"] = caps

    if "launch_environment_variables" not in row:
        row["launch_environment_variables"] = (
            product_type.bazel_launch_environment_variables
        )
    return row


def parse_targets(data: Dict[str, Any]) -> Dict[str, TargetDescriptor]:
    """Validate a parsed ``targets.json`` document.

    Returns target key → ``TargetDescriptor``.  Raises ``ValueError`` on
    a malformed document and ``pydantic.ValidationError`` on bad fields.
    """
    if not isinstance(data, dict) or not isinstance(data.get("targets"), dict):
        raise ValueError("targets document missing 'targets' mapping")

    targets: Dict[str, TargetDescriptor] = {}
    for key, row in data["targets"].items():
        if not isinstance(row, dict):
            raise ValueError(f"Target {key!r} is not an object")
        targets[key] = TargetDescriptor.model_validate(
            _with_product_type_defaults(key, row)
        )
    return targets


def load_targets(targets_path: Path) -> Dict[str, TargetDescriptor]:
    """Load ``targets.json`` from disk."""
    targets = parse_targets(_load_json(targets_path))
    log.info("Loaded %d targets from %s", len(targets), targets_path)
    return targets
