"""
Runner — top-level orchestration: targets.json → schemes + report.

Ties loading, synthesis and writing together into a single
``run_scheme_autogen`` function that can be called from the API
endpoint, from the CLI, or programmatically.
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Mapping, Optional, Tuple

from scheme_autogen.core.references import (
    ReferenceConstructionError,
    resolve_container_reference,
)
from scheme_autogen.core.synthesizer import create_autogenerated_schemes
from scheme_autogen.io.loader import load_targets
from scheme_autogen.io.schema import (
    SchemeCounts,
    SchemeReport,
    TargetDescriptor,
    XCScheme,
)
from scheme_autogen.io.writer import write_outputs
from scheme_autogen.policy.modes import BuildMode, SchemeAutogenerationMode
from scheme_autogen.policy.profile import SchemeProfile

logger = logging.getLogger(__name__)


# ── Public API ───────────────────────────────────────────────────────────────

def generate_schemes(
    targets: Mapping[str, TargetDescriptor],
    referenced_container: str,
    build_mode: BuildMode = BuildMode.XCODE,
    scheme_autogeneration_mode: SchemeAutogenerationMode = SchemeAutogenerationMode.AUTO,
    profile: Optional[SchemeProfile] = None,
) -> Tuple[SchemeReport, List[XCScheme]]:
    """Synthesize schemes for in-memory targets and summarize the run."""
    if profile is None:
        profile = SchemeProfile.v1()

    schemes = create_autogenerated_schemes(
        scheme_autogeneration_mode,
        build_mode,
        referenced_container,
        targets,
        profile,
    )

    report = SchemeReport(
        profile_id=profile.profile_id,
        build_mode=build_mode.value,
        scheme_autogeneration_mode=scheme_autogeneration_mode.value,
        referenced_container=referenced_container,
        counts=_count(targets, schemes, scheme_autogeneration_mode),
        scheme_names=sorted(s.name for s in schemes),
    )
    logger.info(
        "Synthesized %d schemes from %d targets (%d skipped)",
        report.counts.n_schemes,
        report.counts.n_targets,
        report.counts.n_skipped,
    )
    return report, schemes


def run_scheme_autogen(
    targets_path: Path,
    project_path: str,
    build_mode: BuildMode = BuildMode.XCODE,
    scheme_autogeneration_mode: SchemeAutogenerationMode = SchemeAutogenerationMode.AUTO,
    profile: Optional[SchemeProfile] = None,
    output_dir: Optional[Path] = None,
) -> Tuple[SchemeReport, List[XCScheme]]:
    """Load targets from disk, synthesize schemes, optionally write them.

    Parameters
    ----------
    targets_path:
        Path to ``targets.json``.
    project_path:
        Project path or an existing ``container:`` reference.
    build_mode:
        Active build mode.
    scheme_autogeneration_mode:
        ``NONE`` yields no schemes; targets are still loaded and counted.
    profile:
        Scheme constants.  Defaults to ``SchemeProfile.v1()``.
    output_dir:
        If provided, write outputs to this directory.

    Returns
    -------
    (SchemeReport, List[XCScheme])
    """
    referenced_container = resolve_container_reference(project_path)
    targets = load_targets(targets_path)

    report, schemes = generate_schemes(
        targets,
        referenced_container,
        build_mode=build_mode,
        scheme_autogeneration_mode=scheme_autogeneration_mode,
        profile=profile,
    )

    if output_dir is not None:
        write_outputs(report, schemes, output_dir)

    return report, schemes


# ── Helpers ──────────────────────────────────────────────────────────────────

def _count(
    targets: Mapping[str, TargetDescriptor],
    schemes: List[XCScheme],
    mode: SchemeAutogenerationMode,
) -> SchemeCounts:
    counts = SchemeCounts(n_targets=len(targets), n_schemes=len(schemes))
    if mode is SchemeAutogenerationMode.NONE:
        return counts

    counts.n_skipped = sum(1 for t in targets.values() if not t.should_create_scheme)
    for scheme in schemes:
        if scheme.test_action.testables:
            counts.n_testable += 1
        if scheme.launch_action.runnable is not None:
            counts.n_launchable += 1
        if scheme.build_action.pre_actions:
            counts.n_with_pre_actions += 1
    return counts


# ── CLI ──────────────────────────────────────────────────────────────────────

def main():
    """CLI entry point for scheme_autogen."""
    parser = argparse.ArgumentParser(
        description="scheme_autogen — Generate per-target IDE schemes from build targets",
    )
    parser.add_argument(
        "targets",
        type=Path,
        help="Path to targets.json",
    )
    parser.add_argument(
        "--project",
        required=True,
        help="Project path (e.g. path/App.xcodeproj) or container: reference",
    )
    parser.add_argument(
        "--build-mode",
        choices=[m.value for m in BuildMode],
        default=BuildMode.XCODE.value,
    )
    parser.add_argument(
        "--scheme-mode",
        choices=[m.value for m in SchemeAutogenerationMode],
        default=SchemeAutogenerationMode.AUTO.value,
    )
    parser.add_argument(
        "-o", "--output-dir",
        type=Path,
        default=None,
        help="Directory to write JSON outputs",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.targets.exists():
        logger.error("File not found: %s", args.targets)
        sys.exit(1)

    try:
        report, schemes = run_scheme_autogen(
            targets_path=args.targets,
            project_path=args.project,
            build_mode=BuildMode(args.build_mode),
            scheme_autogeneration_mode=SchemeAutogenerationMode(args.scheme_mode),
            output_dir=args.output_dir,
        )
    except ReferenceConstructionError as e:
        logger.error("Scheme generation failed: %s", e)
        sys.exit(1)

    print(f"Targets: {report.counts.n_targets} "
          f"(skipped={report.counts.n_skipped})")
    print(f"Schemes: {report.counts.n_schemes} "
          f"(testable={report.counts.n_testable}, "
          f"launchable={report.counts.n_launchable})")

    if args.output_dir:
        print(f"Outputs written to: {args.output_dir}")


if __name__ == "__main__":
    main()
