"""
Writer — deterministic serialization for scheme_autogen outputs.

Filesystem layout:
    <output_dir>/scheme_report.json
    <output_dir>/schemes/<scheme name>.json

Conventions (matching all other workers):
  - JSON: indent=2, sort_keys=True, trailing newline.
  - Directories created with mkdir(parents=True, exist_ok=True).
"""
from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Dict, List

from scheme_autogen.io.schema import SchemeReport, XCScheme

log = logging.getLogger(__name__)


def _dump(model) -> str:
    return json.dumps(model.model_dump(mode="json"), indent=2, sort_keys=True) + "\n"


def _check_unique_names(schemes: List[XCScheme]) -> None:
    """Scheme names double as file names; a clash would drop a scheme."""
    by_name: Dict[str, List[str]] = defaultdict(list)
    for scheme in schemes:
        ref = scheme.build_action.build_action_entries[0].buildable_reference
        by_name[scheme.name].append(ref.blueprint_identifier)

    clashes = {name: ids for name, ids in by_name.items() if len(ids) > 1}
    if clashes:
        detail = "; ".join(
            f"{name!r} <- {sorted(ids)}" for name, ids in sorted(clashes.items())
        )
        raise ValueError(f"Duplicate scheme names: {detail}")


def write_outputs(
    report: SchemeReport,
    schemes: List[XCScheme],
    output_dir: Path,
) -> Path:
    """Write the report and one file per scheme into *output_dir*.

    Returns the output directory path.  Raises ``ValueError`` before
    anything is written when two schemes would share a file name.
    """
    _check_unique_names(schemes)
    output_dir.mkdir(parents=True, exist_ok=True)

    report_path = output_dir / "scheme_report.json"
    report_path.write_text(_dump(report), encoding="utf-8")
    log.info("Wrote %s", report_path)

    schemes_dir = output_dir / "schemes"
    schemes_dir.mkdir(parents=True, exist_ok=True)
    for scheme in sorted(schemes, key=lambda s: s.name):
        (schemes_dir / f"{scheme.name}.json").write_text(
            _dump(scheme), encoding="utf-8",
        )
    log.info("Wrote %d schemes to %s", len(schemes), schemes_dir)

    return output_dir
