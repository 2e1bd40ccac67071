"""
Pre-actions — shell hooks attached to a scheme's build action.

When Bazel drives the build, the IDE-triggered build runs a script that
writes (native targets) or clears (everything else) the output-groups
signal file, which tells the Bazel build step which target to build.

Pure function, no IO.
"""
from __future__ import annotations

from typing import List

from scheme_autogen.io.schema import (
    BuildableReference,
    ExecutionAction,
    TargetDescriptor,
)
from scheme_autogen.policy.modes import BuildMode
from scheme_autogen.policy.profile import SchemeProfile

NATIVE_OUTPUT_GROUPS_SCRIPT = """\
mkdir -p "${BAZEL_BUILD_OUTPUT_GROUPS_FILE%/*}"
echo "b $BAZEL_TARGET_ID" > "$BAZEL_BUILD_OUTPUT_GROUPS_FILE"
"""

CLEAR_OUTPUT_GROUPS_SCRIPT = """\
if [[ -s "$BAZEL_BUILD_OUTPUT_GROUPS_FILE" ]]; then
    rm "$BAZEL_BUILD_OUTPUT_GROUPS_FILE"
fi
"""


def build_pre_actions(
    build_mode: BuildMode,
    target: TargetDescriptor,
    buildable_reference: BuildableReference,
    profile: SchemeProfile | None = None,
) -> List[ExecutionAction]:
    """Return the build pre-actions for *target* (zero or one entries)."""
    if not build_mode.uses_bazel_mode_build_scripts:
        return []

    if profile is None:
        profile = SchemeProfile.v1()

    if target.is_native_kind:
        script_text = NATIVE_OUTPUT_GROUPS_SCRIPT
    else:
        script_text = CLEAR_OUTPUT_GROUPS_SCRIPT

    return [ExecutionAction(
        script_text=script_text,
        title=profile.output_groups_title,
        environment_buildable=buildable_reference,
    )]
