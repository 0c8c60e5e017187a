"""API route definitions."""

import logging as std_logging

import structlog
from fastapi import APIRouter

from similar_maps import __version__
from similar_maps.api.dependencies import AnalysisPipelineDep, DeletionPlannerDep
from similar_maps.models.requests import AnalyzeRequest, DeletionPlanRequest
from similar_maps.models.responses import AnalyzeResponse, DeletionPlanResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check() -> HealthResponse:
    """Check that the service is up."""
    return HealthResponse(status="healthy", version=__version__)


@router.post("/analyze", response_model=AnalyzeResponse, tags=["Analysis"])
async def analyze(
    request: AnalyzeRequest,
    pipeline: AnalysisPipelineDep,
) -> AnalyzeResponse:
    """Find duplicate and similar maps in a collection.

    Groups exact copies by hash and different versions of the same song by
    fuzzy title/artist matching, then ranks each group and recommends the
    version to keep.
    """
    ctx = structlog.contextvars.get_contextvars()
    request_id = ctx.get("request_id", "unknown")
    std_logging.info(f"analyze_request - {len(request.maps)} maps [request_id: {request_id}]")
    return await pipeline.execute(request)


@router.post("/deletion-plan", response_model=DeletionPlanResponse, tags=["Analysis"])
async def deletion_plan(
    request: DeletionPlanRequest,
    planner: DeletionPlannerDep,
) -> DeletionPlanResponse:
    """Resolve a group/map selection into the maps to delete.

    Nothing is deleted here; the returned paths are meant for the client's
    own deletion step.
    """
    ctx = structlog.contextvars.get_contextvars()
    request_id = ctx.get("request_id", "unknown")
    std_logging.info(
        f"deletion_plan_request - {len(request.selected_groups)} groups, "
        f"{len(request.selected_maps)} maps [request_id: {request_id}]"
    )
    return planner.execute(request)
