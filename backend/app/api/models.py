"""
Pydantic data models for the overlap analyzer API.

These models define the shapes of requests and responses used by the
backend.  Keeping the schemas in one place makes the API contract easy
to review and keeps the route handlers thin.
"""

from __future__ import annotations

from typing import List, Dict, Any, Union
from pydantic import BaseModel, Field
from typing import Literal


class ShapeInput(BaseModel):
    """A polygon as submitted by a client."""

    name: str | None = Field(
        default=None,
        description="Display name used in result messages (defaults to the shape kind)",
    )
    shape: Literal["rectangle", "polygon"] = Field(
        default="polygon",
        description="Which validator applies: 'rectangle' or generic convex 'polygon'",
    )
    # Either a JSON list of numbers or the console style string
    # "x1 y1 x2 y2 ...".  Vertices must be given in sequential order,
    # clockwise or counter‑clockwise, starting from any vertex.
    coordinates: Union[List[float], str] = Field(
        ..., description="Flat vertex coordinates x1, y1, x2, y2, ..."
    )


class ShapeValidateResponse(BaseModel):
    """Response returned after validating a single shape."""

    valid: bool = Field(..., description="Whether the shape passed its validator")
    reason: str | None = Field(
        default=None, description="Why validation failed, when it did"
    )
    sideCount: int | None = Field(
        default=None, description="Number of vertices of the parsed polygon"
    )


class OverlapRequest(BaseModel):
    """Request body for analysing a pair of polygons."""

    a: ShapeInput = Field(..., description="Polygon A")
    b: ShapeInput = Field(..., description="Polygon B")


class Point2D(BaseModel):
    """Single 2D point."""

    x: float
    y: float


class OverlapResponse(BaseModel):
    """Result of an overlap analysis."""

    analysisId: str = Field(..., description="Identifier of the stored analysis")
    relationship: Literal["apart", "adjacent", "contains", "intersecting"] = Field(
        ..., description="Spatial relationship between A and B"
    )
    container: Literal["a", "b"] | None = Field(
        default=None,
        description="Which polygon contains the other when relationship is 'contains'",
    )
    message: str = Field(..., description="Human readable summary of the result")
    points: List[Point2D] = Field(
        default_factory=list,
        description="Boundary intersection points when relationship is 'intersecting'",
    )
    metadata: Dict[str, Any] = Field(
        default_factory=dict,
        description="Additional details such as candidate edges and whether roles were swapped",
    )


class AnalysisSummary(BaseModel):
    """Summary of a stored analysis."""

    analysisId: str
    nameA: str
    nameB: str
    relationship: str
    container: str | None = None
    createdAt: Any = Field(..., description="Timestamp of when the analysis was run")


class AnalysisDetail(AnalysisSummary):
    """Stored analysis with its inputs and results."""

    shapeA: str
    shapeB: str
    coordinatesA: List[float]
    coordinatesB: List[float]
    points: List[Point2D] = Field(default_factory=list)
    message: str
