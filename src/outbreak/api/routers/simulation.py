"""Simulation session management and intervention endpoints."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from outbreak.api.schemas import (
    CreateSessionRequest,
    MaskCoverageRequest,
    SessionResponse,
    SessionSummary,
    StepRequest,
)
from outbreak.api.serializers import serialize_session
from outbreak.api.sessions import SimulationSession
from outbreak.core.config import SimulationConfig
from outbreak.experiment.presets import get_preset

router = APIRouter()


def _get_or_404(request: Request, session_id: str):
    mgr = request.app.state.session_manager
    try:
        return mgr.get_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")


def _snapshot(session: SimulationSession) -> dict:
    with session.lock:
        return serialize_session(session)


@router.post("/sessions", response_model=SessionResponse)
def create_session(req: CreateSessionRequest, request: Request):
    mgr = request.app.state.session_manager

    config = None
    if req.preset:
        try:
            config = get_preset(req.preset)
        except KeyError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
    elif req.config is not None:
        config = SimulationConfig.from_dict(req.config.model_dump(exclude_unset=True))

    session = mgr.create_session(config=config, name=req.name)
    return _snapshot(session)


@router.get("/sessions", response_model=list[SessionSummary])
def list_sessions(request: Request):
    mgr = request.app.state.session_manager
    return mgr.list_sessions()


@router.get("/sessions/{session_id}", response_model=SessionResponse)
def get_session(session_id: str, request: Request):
    return _snapshot(_get_or_404(request, session_id))
@router.delete("/sessions/{session_id}")
def delete_session(session_id: str, request: Request):
    mgr = request.app.state.session_manager
    try:
        mgr.delete_session(session_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Session '{session_id}' not found")
    return {"deleted": True}


@router.post("/sessions/{session_id}/step", response_model=SessionResponse)
def step_session(session_id: str, req: StepRequest, request: Request):
    _get_or_404(request, session_id)
    session = request.app.state.session_manager.step(session_id, req.n)
    return _snapshot(session)


@router.post("/sessions/{session_id}/reset", response_model=SessionResponse)
def reset_session(session_id: str, request: Request):
    _get_or_404(request, session_id)
    session = request.app.state.session_manager.reset_session(session_id)
    return _snapshot(session)


@router.post("/sessions/{session_id}/lockdown", response_model=SessionResponse)
def toggle_lockdown(session_id: str, request: Request):
    _get_or_404(request, session_id)
    session = request.app.state.session_manager.toggle_lockdown(session_id)
    return _snapshot(session)


@router.post("/sessions/{session_id}/hotspots", response_model=SessionResponse)
def toggle_hotspots(session_id: str, request: Request):
    _get_or_404(request, session_id)
    session = request.app.state.session_manager.toggle_hotspots(session_id)
    return _snapshot(session)


@router.post("/sessions/{session_id}/masks", response_model=SessionResponse)
def set_mask_coverage(session_id: str, req: MaskCoverageRequest, request: Request):
    _get_or_404(request, session_id)
    session = request.app.state.session_manager.set_mask_coverage(
        session_id, req.mask_coverage,
    )
    return _snapshot(session)
