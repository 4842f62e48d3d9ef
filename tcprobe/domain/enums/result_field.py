# tcprobe/domain/enums/result_field.py
from __future__ import annotations

from enum import StrEnum


class ResultField(StrEnum):
    """Selectable output fields. Declaration order is the canonical print order."""
    start = "start"
    end = "end"
    duration = "duration"
    fps = "fps"
    resolution = "resolution"
    codec = "codec"
    colorspace = "colorspace"


CANONICAL_ORDER: tuple[ResultField, ...] = tuple(ResultField)
