"""
Persistence of overlap analyses.

Every analysis served by the API is stored as an ``AnalysisRecord`` so
clients can list and re‑open earlier results.  Coordinates and
intersection points are kept as JSON text columns; the record is a
snapshot and is never recomputed.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from sqlmodel import SQLModel, Field, select

from .db import create_db_and_tables, get_session


class AnalysisRecord(SQLModel, table=True):
    """Database model for one analysed polygon pair."""

    analysis_id: str = Field(primary_key=True)
    name_a: str
    name_b: str
    shape_a: str = Field(default="polygon")
    shape_b: str = Field(default="polygon")
    # JSON encoded flat coordinate lists
    coordinates_a: str
    coordinates_b: str
    relationship: str = Field(index=True)
    # "a", "b" or None
    container: Optional[str] = None
    # JSON encoded list of [x, y] pairs
    points: str = Field(default="[]")
    message: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def coordinate_lists(self) -> Tuple[List[float], List[float]]:
        return json.loads(self.coordinates_a), json.loads(self.coordinates_b)

    def point_list(self) -> List[Tuple[float, float]]:
        return [(float(x), float(y)) for x, y in json.loads(self.points)]


def encode_coordinates(values: Sequence[float]) -> str:
    return json.dumps([float(v) for v in values])


def encode_points(points: Sequence[Tuple[float, float]]) -> str:
    return json.dumps([[float(x), float(y)] for x, y in points])


def init_db() -> None:
    """Initialise the database and create tables if they do not exist."""
    create_db_and_tables()


def insert_analysis(record: AnalysisRecord) -> AnalysisRecord:
    """Persist ``record`` and return it refreshed from the database."""
    with get_session() as session:
        session.add(record)
        session.commit()
        session.refresh(record)
        return record


def get_analysis(analysis_id: str) -> Optional[AnalysisRecord]:
    """Return the analysis with the given id, or ``None``."""
    with get_session() as session:
        return session.get(AnalysisRecord, analysis_id)


def list_analyses(relationship: Optional[str] = None) -> List[AnalysisRecord]:
    """Return stored analyses, newest first, optionally filtered."""
    with get_session() as session:
        statement = select(AnalysisRecord)
        if relationship is not None:
            statement = statement.where(AnalysisRecord.relationship == relationship)
        statement = statement.order_by(AnalysisRecord.created_at.desc())
        return list(session.exec(statement))


def delete_analysis(analysis_id: str) -> bool:
    """Delete an analysis.  Returns False if it did not exist."""
    with get_session() as session:
        record = session.get(AnalysisRecord, analysis_id)
        if record is None:
            return False
        session.delete(record)
        session.commit()
        return True
