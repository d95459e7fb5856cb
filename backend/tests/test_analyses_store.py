"""Tests for the analysis history store."""

import sys
import uuid
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from app.services.analyses_store import (  # type: ignore
    AnalysisRecord,
    delete_analysis,
    encode_coordinates,
    encode_points,
    get_analysis,
    init_db,
    insert_analysis,
)


def _record() -> AnalysisRecord:
    return AnalysisRecord(
        analysis_id=uuid.uuid4().hex,
        name_a="P",
        name_b="Q",
        coordinates_a=encode_coordinates([0, 0, 2, 0, 2, 2, 0, 2]),
        coordinates_b=encode_coordinates([1, 1, 3, 1, 3, 3, 1, 3]),
        relationship="intersecting",
        points=encode_points([(2.0, 1.0), (1.0, 2.0)]),
        message="P A and Q B intersect.",
    )


def test_new_records_carry_an_aware_timestamp() -> None:
    record = _record()
    assert record.created_at.tzinfo is not None
    assert record.created_at.utcoffset().total_seconds() == 0


def test_insert_get_and_delete() -> None:
    init_db()
    record = insert_analysis(_record())
    stored = get_analysis(record.analysis_id)
    assert stored is not None
    assert stored.created_at is not None
    assert stored.point_list() == [(2.0, 1.0), (1.0, 2.0)]
    assert stored.coordinate_lists()[0] == [0.0, 0.0, 2.0, 0.0, 2.0, 2.0, 0.0, 2.0]
    assert delete_analysis(record.analysis_id) is True
    assert get_analysis(record.analysis_id) is None
    assert delete_analysis(record.analysis_id) is False
