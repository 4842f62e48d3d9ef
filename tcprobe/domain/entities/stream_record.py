# tcprobe/domain/entities/stream_record.py
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StreamRecord:
    """
    Fields pulled out of the video stream's block of a probe report.
    String fields are "" when the key was never seen; `nb_frames` is 0 when absent
    and kept as parsed otherwise, sign included.
    `fps` and `stream_index` come from the report overview, not from the block.
    """
    stream_index: int
    fps: str = ""
    timecode: str = ""
    nb_frames: int = 0
    width: str = ""
    height: str = ""
    codec_name: str = ""
    profile: str = ""
    pix_fmt: str = ""
    color_space: str = ""
