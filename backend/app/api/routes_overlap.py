"""
API routes for polygon overlap analysis.

The endpoints here validate two client supplied polygons, classify
their spatial relationship (apart, adjacent, containment or
intersecting), compute the boundary crossing points when they
intersect and keep a history of every analysis in the database.

Validation failures are reported as HTTP 400 with the validator's
message; unknown analysis identifiers produce HTTP 404.
"""

from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query

from .models import (
    AnalysisDetail,
    AnalysisSummary,
    OverlapRequest,
    OverlapResponse,
    Point2D,
    ShapeInput,
    ShapeValidateResponse,
)
from ..services.analyses_store import (
    AnalysisRecord,
    delete_analysis as delete_analysis_record,
    encode_coordinates,
    encode_points,
    get_analysis as get_analysis_record,
    insert_analysis,
    list_analyses as list_analysis_records,
)
from ..services.overlap import analyze, describe
from ..services.polygon import Polygon
from ..services.validation import ShapeValidationError, build_polygon

logger = logging.getLogger(__name__)

router = APIRouter()

ABOUT_TEXT = (
    "This is a utility application that analyzes 2-D convex polygons, "
    "rectangles included, to detect their mutual spatial characteristics. "
    "It supports shapes that are aligned with the two axes as well as "
    "shapes rotated at an angle to the axes."
)


def _build(shape: ShapeInput, label: str) -> Polygon:
    try:
        return build_polygon(shape.coordinates, shape=shape.shape, name=shape.name)
    except ShapeValidationError as exc:
        raise HTTPException(status_code=400, detail=f"Polygon {label}: {exc}")


def _summary(record: AnalysisRecord) -> AnalysisSummary:
    return AnalysisSummary(
        analysisId=record.analysis_id,
        nameA=record.name_a,
        nameB=record.name_b,
        relationship=record.relationship,
        container=record.container,
        createdAt=record.created_at,
    )


@router.get("/about")
async def about() -> dict[str, str]:
    """Describe what the analyzer does."""
    return {"about": ABOUT_TEXT}


@router.post("/shapes/validate", response_model=ShapeValidateResponse)
async def validate_shape(shape: ShapeInput) -> ShapeValidateResponse:
    """Run the validator for ``shape.shape`` without analysing anything."""
    try:
        polygon = build_polygon(shape.coordinates, shape=shape.shape, name=shape.name)
    except ShapeValidationError as exc:
        return ShapeValidateResponse(valid=False, reason=str(exc))
    return ShapeValidateResponse(valid=True, sideCount=polygon.side_count)


@router.post("/overlap", response_model=OverlapResponse, status_code=201)
async def create_analysis(body: OverlapRequest) -> OverlapResponse:
    """Analyse the relationship between polygons A and B.

    Both polygons are validated first.  The result is stored and
    returned along with a human readable message.  ``metadata``
    carries the candidate edges used by the intersection solver and
    whether the classifier had to swap the roles of A and B.
    """
    a = _build(body.a, "A")
    b = _build(body.b, "B")
    try:
        report = analyze(a, b)
    except Exception as exc:
        logger.exception("overlap analysis failed for %s/%s: %s", a.name, b.name, exc)
        raise HTTPException(status_code=500, detail=f"Failed to analyse polygons: {exc}")

    message = describe(report, a, b)
    points = [p.as_tuple() for p in report.points]
    record = insert_analysis(
        AnalysisRecord(
            analysis_id=uuid.uuid4().hex,
            name_a=a.name,
            name_b=b.name,
            shape_a=body.a.shape,
            shape_b=body.b.shape,
            coordinates_a=encode_coordinates(a.vertices),
            coordinates_b=encode_coordinates(b.vertices),
            relationship=report.relationship.value,
            container=report.container,
            points=encode_points(points),
            message=message,
        )
    )
    logger.info(
        "Analysis %s: %s vs %s -> %s",
        record.analysis_id,
        a.name,
        b.name,
        report.relationship.value,
    )
    resolution = report.resolution
    return OverlapResponse(
        analysisId=record.analysis_id,
        relationship=report.relationship.value,
        container=report.container,
        message=message,
        points=[Point2D(x=x, y=y) for x, y in points],
        metadata={
            "swapped": bool(resolution.container_flag),
            "candidateEdgesA": list(resolution.candidate_edges_a),
            "candidateEdgesB": list(resolution.candidate_edges_b),
            "sideCountA": a.side_count,
            "sideCountB": b.side_count,
        },
    )


@router.get("/overlap/analyses", response_model=list[AnalysisSummary])
async def list_analyses(
    relationship: Optional[str] = Query(
        None,
        description="Only return analyses with this relationship",
        pattern="^(apart|adjacent|contains|intersecting)$",
    ),
) -> List[AnalysisSummary]:
    """Return stored analyses, newest first."""
    return [_summary(r) for r in list_analysis_records(relationship)]


@router.get("/overlap/analyses/{analysis_id}", response_model=AnalysisDetail)
async def get_analysis(analysis_id: str) -> AnalysisDetail:
    """Return one stored analysis with its inputs and results."""
    record = get_analysis_record(analysis_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Analysis not found")
    coords_a, coords_b = record.coordinate_lists()
    return AnalysisDetail(
        **_summary(record).model_dump(),
        shapeA=record.shape_a,
        shapeB=record.shape_b,
        coordinatesA=coords_a,
        coordinatesB=coords_b,
        points=[Point2D(x=x, y=y) for x, y in record.point_list()],
        message=record.message,
    )


@router.delete("/overlap/analyses/{analysis_id}", status_code=204)
async def delete_analysis(analysis_id: str) -> None:
    """Delete a stored analysis."""
    if not delete_analysis_record(analysis_id):
        raise HTTPException(status_code=404, detail="Analysis not found")
    return None
