"""
Score API client: fetches the record set and validates the payload shape.
"""

from __future__ import annotations

import time
from typing import Any, List, Optional

import pandas as pd
import requests
import structlog

from score_dashboard.config import load_settings
from score_dashboard.data.errors import ApplicationError, TransportError
from score_dashboard.data.models import ScoreRecord, records_to_frame

logger = structlog.get_logger(__name__)

STATUS_OK = "OK"


def parse_payload(payload: Any) -> pd.DataFrame:
    """Validate a decoded API payload and return the records sorted by created_at.

    Raises ApplicationError when the status marker is not OK or the records
    do not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise ApplicationError(
            f"Unexpected payload shape: expected an object, got {type(payload).__name__}"
        )

    status = payload.get("status")
    if status != STATUS_OK:
        raise ApplicationError(f"Unexpected API status: {status!r}")

    items = payload.get("data")
    if not isinstance(items, list):
        raise ApplicationError("Unexpected payload shape: 'data' must be a list")

    records: List[ScoreRecord] = []
    for position, item in enumerate(items):
        try:
            records.append(ScoreRecord.from_payload(item))
        except ValueError as exc:
            raise ApplicationError(
                f"Unexpected payload shape: record {position}: {exc}"
            ) from exc

    return records_to_frame(records)


def fetch_records(
    url: Optional[str] = None,
    session: Optional[requests.Session] = None,
    timeout: Optional[float] = None,
) -> pd.DataFrame:
    """Fetch the full record set from the score API.

    One GET, no parameters. TransportError covers failed requests, non-2xx
    responses and non-JSON bodies; ApplicationError covers a payload whose
    status is not OK. Callers own the shared RecordSet and replace it only
    on success.
    """
    if url is None or timeout is None:
        settings = load_settings()
        url = url or settings.api_url
        timeout = timeout if timeout is not None else settings.request_timeout_seconds

    http = session or requests
    started = time.perf_counter()
    try:
        response = http.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.RequestException as exc:
        logger.warning("records_fetch_failed", kind=TransportError.kind, url=url, error=str(exc))
        raise TransportError(f"Failed to fetch score data: {exc}") from exc

    try:
        payload = response.json()
    except ValueError as exc:
        logger.warning("records_fetch_failed", kind=TransportError.kind, url=url, error=str(exc))
        raise TransportError("Failed to fetch score data: response body is not valid JSON") from exc

    try:
        records = parse_payload(payload)
    except ApplicationError as exc:
        logger.warning("records_fetch_failed", kind=ApplicationError.kind, url=url, error=str(exc))
        raise

    elapsed_ms = round((time.perf_counter() - started) * 1000, 1)
    logger.info("records_fetched", url=url, count=len(records), elapsed_ms=elapsed_ms)
    return records
