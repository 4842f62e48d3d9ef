# tcprobe/services/report/parser.py
from __future__ import annotations

import re
from typing import Dict, List, Tuple

from tcprobe.common.logging import get_logger
from tcprobe.domain.entities.stream_record import StreamRecord
from tcprobe.domain.entities.timecode import is_timecode
from tcprobe.domain.enums.error_kind import ErrorKind
from tcprobe.domain.errors import ReportParseError

logger = get_logger(__name__)

STREAM_OPEN = "[STREAM]"
STREAM_CLOSE = "[/STREAM]"

_VIDEO_LINE_RE = re.compile(r"^Stream #0:([0-9]+)")
_BLOCK_SPLIT_RE = re.compile(r"(?<=" + re.escape(STREAM_CLOSE) + r")")
_INT_RE = re.compile(r"[+-]?[0-9]+")

# block line prefix -> StreamRecord attribute
BLOCK_KEYS: Dict[str, str] = {
    "nb_frames=": "nb_frames",
    "width=": "width",
    "height=": "height",
    "codec_name=": "codec_name",
    "profile=": "profile",
    "pix_fmt=": "pix_fmt",
    "color_space=": "color_space",
    "TAG:timecode=": "timecode",
}


def split_report(report: str) -> Tuple[str, str]:
    """Split a report into (overview, stream block section) at the first [STREAM] marker."""
    idx = report.find(STREAM_OPEN)
    if idx == -1:
        raise ReportParseError(ErrorKind.NoStreamMarker, "cannot find [STREAM] lines")
    return report[:idx], report[idx:]


def find_video_stream(overview: str) -> Tuple[int, str]:
    """
    Scan overview lines for the first `Stream #0:<n>...: Video: ...` line.
    Returns (n, fps) where fps is the token right before `fps`/`fps,`, or "".
    """
    for raw in overview.split("\n"):
        line = raw.strip()
        m = _VIDEO_LINE_RE.match(line)
        if not m:
            continue
        tokens = line.split()
        if len(tokens) < 3 or tokens[2] != "Video:":
            continue
        fps = ""
        for i, tok in enumerate(tokens):
            if tok in ("fps", "fps,") and i > 0:
                fps = tokens[i - 1]
                break
        return int(m.group(1)), fps
    raise ReportParseError(ErrorKind.NoVideoStream, "not found video stream")


def split_blocks(section: str) -> List[str]:
    """Cut the stream section after every [/STREAM], keeping the marker with its block."""
    return _BLOCK_SPLIT_RE.split(section)


def _scan_block(block: str, fps: str) -> Dict[str, object]:
    values: Dict[str, object] = {}
    for raw in block.split("\n"):
        # stop as soon as everything `end` needs is known
        if fps and values.get("timecode") and values.get("nb_frames"):
            break
        line = raw.rstrip("\r")
        for prefix, attr in BLOCK_KEYS.items():
            if not line.startswith(prefix) or attr in values:
                continue
            value = line[len(prefix):]
            if attr == "nb_frames":
                if not _INT_RE.fullmatch(value):
                    raise ReportParseError(ErrorKind.InvalidFrameCount, f"invalid frames: {line}")
                values[attr] = int(value)
            elif attr == "timecode":
                if not is_timecode(value):
                    raise ReportParseError(ErrorKind.InvalidTimecodeTag, f"invalid timecode: {line}")
                values[attr] = value
            else:
                values[attr] = value
            break
    return values


def extract(report: str) -> StreamRecord:
    """
    Pull the video stream's fields out of an `ffprobe -show_streams` text report.

    The overview `Stream #0:<n>` ordinal selects the n-th [STREAM] block by position.
    Keys are first-seen-wins within the block. Scanning stops early once fps, the
    timecode tag and nb_frames are all known, so later keys in the block are not read.
    """
    overview, section = split_report(report)
    index, fps = find_video_stream(overview)
    logger.debug("video stream index=%s fps=%r", index, fps)

    blocks = split_blocks(section)
    if index >= len(blocks):
        raise ReportParseError(
            ErrorKind.StreamIndexOutOfRange,
            f"unmatched video stream: index {index}, {len(blocks)} block(s)",
        )
    values = _scan_block(blocks[index], fps)

    return StreamRecord(
        stream_index=index,
        fps=fps,
        **values,  # type: ignore[arg-type]
    )

