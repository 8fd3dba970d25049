"""Shared test fixtures."""

from typing import Any, Dict, List
from unittest.mock import Mock

import pandas as pd
import pytest
import requests

from score_dashboard.data.models import ScoreRecord, records_to_frame


def make_item(record_id: int, created_at: str, score: int) -> Dict[str, Any]:
    return {"id": record_id, "created_at": created_at, "score": score}


def make_frame(*rows) -> pd.DataFrame:
    """Build a RecordSet from (id, created_at, score) tuples; created_at is UTC without offset."""
    return records_to_frame([ScoreRecord.from_payload(make_item(*row)) for row in rows])


@pytest.fixture
def sample_items() -> List[Dict[str, Any]]:
    # Deliberately out of order
    return [
        make_item(3, "2024-05-01T03:00:00", 0),
        make_item(1, "2024-05-01T01:00:00", 10),
        make_item(2, "2024-05-01T02:00:00", -5),
    ]


@pytest.fixture
def sample_frame(sample_items) -> pd.DataFrame:
    return records_to_frame([ScoreRecord.from_payload(item) for item in sample_items])


@pytest.fixture
def fake_session():
    """requests.Session stand-in whose response is configured per test."""

    def _build(payload: Any = None, status_code: int = 200, json_error: bool = False, get_error=None):
        response = Mock()
        response.status_code = status_code
        if status_code >= 400:
            response.raise_for_status.side_effect = requests.HTTPError(
                f"{status_code} Server Error"
            )
        else:
            response.raise_for_status.return_value = None
        if json_error:
            response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        else:
            response.json.return_value = payload

        session = Mock(spec=requests.Session)
        if get_error is not None:
            session.get.side_effect = get_error
        else:
            session.get.return_value = response
        return session

    return _build
