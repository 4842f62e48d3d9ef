# services/schemas/probe.py
from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from tcprobe.domain.enums.result_field import ResultField


class ProbeRequest(BaseModel):
    path: str = Field(..., description="Absolute path to the media file",
                      examples=["/media/incoming/A001C003.mov"])
    fields: List[ResultField] = Field(..., min_length=1,
                                      examples=[["start", "end", "duration"]])


class ProbeResponse(BaseModel):
    start: str = Field("", examples=["20:51:01:20"])
    end: str = Field("", examples=["20:51:04;13"])
    duration: str = Field("", examples=["84"])
    fps: str = Field("", examples=["29.97"])
    resolution: str = Field("", examples=["1920*1080"])
    codec: str = Field("", examples=["Prores HQ / yuv422p10le"])
    colorspace: str = Field("", examples=["bt709"])


class ProbeErrorResponse(BaseModel):
    kind: str
    detail: str
