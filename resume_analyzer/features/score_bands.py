from __future__ import annotations

from typing import Literal

from .rubric import ScoreBands, load_rubric

ScoreBand = Literal["success", "warning", "destructive"]


def score_band(score: int, bands: ScoreBands | None = None) -> ScoreBand:
    bands = bands or load_rubric().bands
    if score >= bands.success_min:
        return "success"
    if score >= bands.warning_min:
        return "warning"
    return "destructive"
