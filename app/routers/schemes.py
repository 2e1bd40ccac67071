"""
Schemes Router
Per-target scheme generation.

Runs the scheme_autogen package either over targets posted inline or
over a ``targets.json`` file stored under the projects root.
"""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from app.config import settings
from scheme_autogen import GENERATOR_VERSION, PACKAGE_NAME, SCHEMA_VERSION  # type: ignore
from scheme_autogen.core.references import resolve_container_reference  # type: ignore
from scheme_autogen.io.loader import parse_targets  # type: ignore
from scheme_autogen.io.schema import SchemeReport, XCScheme  # type: ignore
from scheme_autogen.policy.modes import (  # type: ignore
    BuildMode,
    SchemeAutogenerationMode,
)
from scheme_autogen.runner import generate_schemes, run_scheme_autogen  # type: ignore

logger = logging.getLogger(__name__)


# =============================================================================
# Request / Response Models
# =============================================================================

class SchemeGenerateRequest(BaseModel):
    """Inline scheme generation request."""

    targets: Dict[str, Dict[str, Any]] = Field(
        ...,
        description="Target key → target descriptor (same shape as targets.json)",
    )
    project_path: str = Field(
        ...,
        description="Project path or 'container:' reference",
    )
    build_mode: Optional[BuildMode] = Field(
        None,
        description="Build mode (default: DEFAULT_BUILD_MODE setting)",
    )
    scheme_autogeneration_mode: Optional[SchemeAutogenerationMode] = Field(
        None,
        description="none | auto | all (default: DEFAULT_SCHEME_AUTOGENERATION_MODE setting)",
    )


class SchemeGenerateResponse(BaseModel):
    """Generated schemes plus the run summary."""

    package_name: str = PACKAGE_NAME  # type: ignore
    generator_version: str = GENERATOR_VERSION  # type: ignore
    schema_version: str = SCHEMA_VERSION  # type: ignore
    report: SchemeReport
    schemes: List[XCScheme] = Field(default_factory=list)


class SchemeRunRequest(BaseModel):
    """Generate schemes for a project stored under the projects root."""

    project: str = Field(
        ...,
        description="Project directory name under the projects root",
    )
    project_path: Optional[str] = Field(
        None,
        description="Project path for the container reference (default: '<project>.xcodeproj')",
    )
    build_mode: Optional[BuildMode] = None
    scheme_autogeneration_mode: Optional[SchemeAutogenerationMode] = None
    projects_root: Optional[str] = Field(
        None,
        description="Override path to the projects root",
    )
    write_outputs: bool = Field(
        True,
        description="Write scheme JSON outputs to disk",
    )


class SchemeRunResponse(BaseModel):
    report: SchemeReport
    output_dir: Optional[str] = None


# =============================================================================
# Helpers
# =============================================================================

def _build_mode(requested: Optional[BuildMode]) -> BuildMode:
    return requested or settings.DEFAULT_BUILD_MODE


def _scheme_mode(requested: Optional[SchemeAutogenerationMode]) -> SchemeAutogenerationMode:
    return requested or settings.DEFAULT_SCHEME_AUTOGENERATION_MODE


# =============================================================================
# Router
# =============================================================================

router = APIRouter()


@router.post(
    "/generate",
    response_model=SchemeGenerateResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate schemes for targets posted inline",
)
async def generate_schemes_endpoint(request: SchemeGenerateRequest):
    """
    Validate the posted targets, synthesize one scheme per target that
    asks for one, and return the schemes with a run summary.

    A target whose buildable reference cannot be built fails the whole
    request with 422; no partial result is returned.
    """
    try:
        referenced_container = resolve_container_reference(request.project_path)
        targets = parse_targets({"targets": request.targets})
        report, schemes = generate_schemes(
            targets,
            referenced_container,
            build_mode=_build_mode(request.build_mode),
            scheme_autogeneration_mode=_scheme_mode(request.scheme_autogeneration_mode),
        )
    except ValueError as e:
        logger.warning("Scheme generation rejected: %s", e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return SchemeGenerateResponse(report=report, schemes=schemes)


@router.post(
    "/run",
    response_model=SchemeRunResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate schemes for a stored project's targets.json",
)
async def run_schemes_endpoint(request: SchemeRunRequest):
    """
    Expected filesystem layout::

        <projects_root>/<project>/targets.json

    Outputs are written to::

        <projects_root>/<project>/schemes_autogen/
    """
    root = Path(request.projects_root or settings.projects_root)
    project_dir = root / request.project
    targets_path = project_dir / "targets.json"

    if not targets_path.exists():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"targets.json not found: {targets_path}",
        )

    output_dir = project_dir / "schemes_autogen" if request.write_outputs else None

    try:
        report, _ = run_scheme_autogen(
            targets_path=targets_path,
            project_path=request.project_path or f"{request.project}.xcodeproj",
            build_mode=_build_mode(request.build_mode),
            scheme_autogeneration_mode=_scheme_mode(request.scheme_autogeneration_mode),
            output_dir=output_dir,
        )
    except ValueError as e:
        logger.error("Scheme generation failed for %s: %s", request.project, e)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        )

    return SchemeRunResponse(
        report=report,
        output_dir=str(output_dir) if output_dir else None,
    )
