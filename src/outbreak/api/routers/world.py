"""Render snapshot of a session's world."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from outbreak.api.schemas import WorldResponse
from outbreak.api.serializers import serialize_world

router = APIRouter()


@router.get("/{session_id}", response_model=WorldResponse)
def get_world(session_id: str, request: Request):
    mgr = request.app.state.session_manager
    try:
        session = mgr.get_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")

    with session.lock:
        return serialize_world(session.world)
