"""
Synthesizer — turn target descriptors into scheme descriptors.

One scheme per eligible target.  Which actions carry a runnable, a
macro expansion or testables is decided purely by the target's
capability flags; pre-actions come from ``core.pre_actions``.

Pure functions, no IO.  The first target that fails reference
construction aborts the whole call; no partial result is returned.
"""
from __future__ import annotations

import logging
from typing import List, Mapping, Optional

from scheme_autogen.core.pre_actions import build_pre_actions
from scheme_autogen.core.references import create_buildable_reference
from scheme_autogen.io.schema import (
    ALL_BUILD_FOR,
    AnalyzeAction,
    ArchiveAction,
    BuildAction,
    BuildActionEntry,
    BuildableProductRunnable,
    BuildableReference,
    LaunchAction,
    ProfileAction,
    TargetDescriptor,
    TestAction,
    TestableReference,
    XCScheme,
)
from scheme_autogen.policy.modes import BuildMode, SchemeAutogenerationMode
from scheme_autogen.policy.profile import SchemeProfile

logger = logging.getLogger(__name__)


def create_autogenerated_schemes(
    scheme_autogeneration_mode: SchemeAutogenerationMode,
    build_mode: BuildMode,
    referenced_container: str,
    targets: Mapping[str, TargetDescriptor],
    profile: Optional[SchemeProfile] = None,
) -> List[XCScheme]:
    """Create one scheme for every target that asks for one.

    Parameters
    ----------
    scheme_autogeneration_mode:
        ``NONE`` returns an empty list before any target is looked at.
    build_mode:
        Decides pre-actions and launch environment variables.
    referenced_container:
        ``container:`` reference shared by every buildable reference.
    targets:
        Target key → descriptor.  Iteration order is kept but carries
        no meaning.
    profile:
        Scheme constants.  Defaults to ``SchemeProfile.v1()``.

    Raises
    ------
    ReferenceConstructionError
        Propagated from the first target whose reference can't be built.
    """
    if scheme_autogeneration_mode is SchemeAutogenerationMode.NONE:
        return []

    if profile is None:
        profile = SchemeProfile.v1()

    schemes: List[XCScheme] = []
    for key, target in targets.items():
        scheme = create_scheme(build_mode, referenced_container, target, profile)
        if scheme is None:
            logger.debug("Skipping %s — scheme creation disabled", key)
            continue
        schemes.append(scheme)
    return schemes


def create_scheme(
    build_mode: BuildMode,
    referenced_container: str,
    target: TargetDescriptor,
    profile: Optional[SchemeProfile] = None,
) -> Optional[XCScheme]:
    """Create the scheme for a single target, or *None* if it opts out."""
    if not target.should_create_scheme:
        return None

    if profile is None:
        profile = SchemeProfile.v1()

    buildable_reference = create_buildable_reference(target, referenced_container)
    build_configuration = target.default_build_configuration_name

    runnable: Optional[BuildableProductRunnable]
    macro_expansion: Optional[BuildableReference]
    testables: List[TestableReference]
    if target.is_testable:
        runnable = None
        macro_expansion = buildable_reference
        testables = [TestableReference(
            skipped=False,
            buildable_reference=buildable_reference,
        )]
    else:
        runnable = (
            BuildableProductRunnable(buildable_reference=buildable_reference)
            if target.is_launchable else None
        )
        macro_expansion = None
        testables = []

    build_action = BuildAction(
        build_action_entries=[BuildActionEntry(
            buildable_reference=buildable_reference,
            build_for=list(ALL_BUILD_FOR),
        )],
        pre_actions=build_pre_actions(
            build_mode, target, buildable_reference, profile,
        ),
        parallelize_build=True,
        build_implicit_dependencies=True,
    )

    # Macro expansion stays off the test action even for testable targets.
    test_action = TestAction(
        build_configuration=build_configuration,
        macro_expansion=None,
        testables=testables,
        custom_lldb_init_file=profile.custom_lldb_init_file,
    )

    environment_variables = None
    if (
        build_mode.uses_bazel_environment_variables
        and target.launch_environment_variables is not None
    ):
        environment_variables = dict(target.launch_environment_variables)

    launch_action = LaunchAction(
        runnable=runnable,
        build_configuration=build_configuration,
        macro_expansion=macro_expansion,
        environment_variables=environment_variables,
        custom_lldb_init_file=profile.custom_lldb_init_file,
    )

    return XCScheme(
        name=target.scheme_name,
        last_upgrade_version=profile.last_upgrade_version,
        version=profile.version,
        build_action=build_action,
        test_action=test_action,
        launch_action=launch_action,
        profile_action=ProfileAction(
            buildable_product_runnable=runnable,
            build_configuration=build_configuration,
        ),
        analyze_action=AnalyzeAction(build_configuration=build_configuration),
        archive_action=ArchiveAction(
            build_configuration=build_configuration,
            reveal_archive_in_organizer=profile.reveal_archive_in_organizer,
        ),
        was_created_for_app_extension=None,
    )
