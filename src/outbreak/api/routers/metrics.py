"""State-count and log endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Query, Request

from outbreak.api.schemas import LogEntryResponse, TimeSeriesResponse
from outbreak.api.serializers import serialize_counts
from outbreak.core.state import State

router = APIRouter()


def _get_or_404(request: Request, session_id: str):
    mgr = request.app.state.session_manager
    try:
        return mgr.get_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")


@router.get("/{session_id}/counts")
def get_counts(session_id: str, request: Request) -> dict[str, int]:
    session = _get_or_404(request, session_id)
    with session.lock:
        return serialize_counts(session.world)


@router.get("/{session_id}/log", response_model=list[LogEntryResponse])
def get_log(session_id: str, request: Request):
    session = _get_or_404(request, session_id)
    with session.lock:
        return session.log.export_for_visualization()


@router.get("/{session_id}/time-series/{state}", response_model=TimeSeriesResponse)
def get_time_series(
    session_id: str,
    state: str,
    request: Request,
    field: str = Query("counts"),
):
    session = _get_or_404(request, session_id)

    try:
        parsed = State(state)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown state: '{state}'")

    try:
        with session.lock:
            values = session.log.get_time_series(parsed, field)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return {
        "state": parsed.value,
        "field": field,
        "samples": list(range(len(values))),
        "values": [int(v) for v in values],
    }
