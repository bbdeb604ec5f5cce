"""Experiment-related endpoints: presets."""

from __future__ import annotations

from fastapi import APIRouter

from outbreak.api.schemas import PresetInfo
from outbreak.experiment.presets import get_preset, list_presets

router = APIRouter()


@router.get("/presets", response_model=list[PresetInfo])
def get_presets():
    return [
        {"name": name, "config": get_preset(name).to_dict()}
        for name in list_presets()
    ]
