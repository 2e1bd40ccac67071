"""
References — container and buildable-reference construction.

Pure functions, no IO.  The only failure class raised by the core lives
here: ``ReferenceConstructionError``.
"""
from __future__ import annotations

from pathlib import PurePosixPath
from typing import Union

from scheme_autogen.io.schema import BuildableReference, TargetDescriptor

CONTAINER_PREFIX = "container:"


class ReferenceConstructionError(ValueError):
    """A target or container cannot be turned into a buildable reference."""


def resolve_container_reference(project_path: Union[str, PurePosixPath]) -> str:
    """Return the ``container:`` reference for a project path.

    Already-prefixed references are returned unchanged.
    """
    text = str(project_path).strip()
    if not text or text == CONTAINER_PREFIX:
        raise ReferenceConstructionError("Empty project path for container reference")
    if text.startswith(CONTAINER_PREFIX):
        return text
    return f"{CONTAINER_PREFIX}{text}"


def create_buildable_reference(
    target: TargetDescriptor,
    referenced_container: str,
) -> BuildableReference:
    """Build the reference every action of *target*'s scheme points at.

    Raises
    ------
    ReferenceConstructionError
        When the container reference is blank or not a ``container:``
        reference, or the target has no blueprint identifier or name.
    """
    if not referenced_container.startswith(CONTAINER_PREFIX) or (
        not referenced_container[len(CONTAINER_PREFIX):].strip()
    ):
        raise ReferenceConstructionError(
            f"Invalid container reference {referenced_container!r}"
        )

    blueprint_identifier = (target.blueprint_identifier or "").strip()
    if not blueprint_identifier:
        raise ReferenceConstructionError(
            f"Target {target.target_id!r} has no blueprint identifier"
        )

    if not target.name.strip():
        raise ReferenceConstructionError(
            f"Target {target.target_id!r} has an empty name"
        )

    return BuildableReference(
        referenced_container=referenced_container,
        blueprint_identifier=blueprint_identifier,
        buildable_name=target.buildable_name,
        blueprint_name=target.name,
    )
