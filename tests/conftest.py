# tests/conftest.py
from __future__ import annotations

from typing import Callable, Optional

import pytest

OVERVIEW = """\
ffprobe version 6.1 Copyright (c) 2007-2023 the FFmpeg developers
Input #0, mov,mp4,m4a,3gp,3g2,mj2, from 'A001C003_230101.mov':
  Metadata:
    major_brand     : qt
    creation_time   : 2023-01-01T10:00:00.000000Z
  Duration: 00:00:03.40, start: 0.000000, bitrate: 181042 kb/s
  Stream #0:0(und): Video: prores (HQ) (apch / 0x68637061), yuv422p10le(tv, bt709, progressive), 1920x1080, 178713 kb/s, SAR 1:1 DAR 16:9, {fps} fps, {fps} tbr, 30k tbn (default)
    Metadata:
      handler_name    : Apple Video Media Handler
      timecode        : {timecode}
  Stream #0:1(und): Audio: pcm_s24le (in24 / 0x34326E69), 48000 Hz, stereo, s32 (24 bit), 2304 kb/s (default)
  Stream #0:2(eng): Data: none (tmcd / 0x64636D74), 0 kb/s
"""

VIDEO_BLOCK_HEAD = """\
[STREAM]
index=0
codec_name=prores
codec_long_name=Apple ProRes (iCodec Pro)
profile=HQ
codec_type=video
codec_tag_string=apch
"""

VIDEO_BLOCK_TAIL = """\
pix_fmt=yuv422p10le
level=-99
color_range=tv
color_space=bt709
r_frame_rate=30000/1001
avg_frame_rate=30000/1001
time_base=1/30000
duration=3.403400
{nb_frames_line}
DISPOSITION:default=1
TAG:language=und
TAG:handler_name=Apple Video Media Handler
{timecode_line}
[/STREAM]
"""

AUDIO_BLOCK = """\
[STREAM]
index=1
codec_name=pcm_s24le
codec_type=audio
sample_rate=48000
channels=2
nb_frames=163368
[/STREAM]
"""

DATA_BLOCK = """\
[STREAM]
index=2
codec_name=none
codec_type=data
nb_frames=1
TAG:timecode=00:00:00:00
[/STREAM]
"""


def build_report(
    *,
    fps: str = "29.97",
    timecode: Optional[str] = "00:00:00:00",
    nb_frames: Optional[str] = "102",
    width: Optional[str] = "1920",
    height: Optional[str] = "1080",
) -> str:
    size_lines = []
    if width is not None:
        size_lines.append(f"width={width}")
    if height is not None:
        size_lines.append(f"height={height}")
    video = (
        VIDEO_BLOCK_HEAD
        + "".join(f"{line}\n" for line in size_lines)
        + "coded_width=1920\ncoded_height=1080\n"
        + VIDEO_BLOCK_TAIL.format(
            nb_frames_line=f"nb_frames={nb_frames}" if nb_frames is not None else "nb_read_frames=N/A",
            timecode_line=f"TAG:timecode={timecode}" if timecode is not None else "TAG:encoder=Apple ProRes HQ",
        )
    )
    overview = OVERVIEW.format(fps=fps, timecode=timecode or "")
    return overview + video + AUDIO_BLOCK + DATA_BLOCK


@pytest.fixture()
def report_factory() -> Callable[..., str]:
    """Build a realistic `ffprobe -show_streams` report (overview + blocks)."""
    return build_report


class FakeReportSource:
    """ReportSourcePort double that hands back a canned report and records calls."""
    def __init__(self, report: str):
        self.report = report
        self.calls = []

    def read_report(self, path):
        self.calls.append(path)
        return self.report


@pytest.fixture()
def fake_source_factory() -> Callable[[str], FakeReportSource]:
    return FakeReportSource
