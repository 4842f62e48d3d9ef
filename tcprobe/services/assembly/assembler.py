# tcprobe/services/assembly/assembler.py
from __future__ import annotations

import string
from typing import Callable, Dict

from tcprobe.common.logging import get_logger
from tcprobe.domain.entities.probe import ProbeConfig, ProbeResult
from tcprobe.domain.entities.stream_record import StreamRecord
from tcprobe.domain.entities.timecode import Timecode
from tcprobe.domain.enums.error_kind import ErrorKind
from tcprobe.domain.enums.result_field import ResultField
from tcprobe.domain.errors import AssemblyError, ProbeError
from tcprobe.domain.policies.frame_rates import timecode_rate

logger = get_logger(__name__)

Recipe = Callable[[StreamRecord], str]


# ---- field recipes -------------------------------------------------------------
def _require_timecode(rec: StreamRecord) -> str:
    if not rec.timecode:
        raise AssemblyError(ErrorKind.MissingTimecode, "missing TAG:timecode information")
    return rec.timecode


def _require_frames(rec: StreamRecord) -> int:
    if rec.nb_frames <= 0:
        raise AssemblyError(ErrorKind.MissingFrameCount, "missing nb_frames information")
    return rec.nb_frames


def start_of(rec: StreamRecord) -> str:
    return _require_timecode(rec)


def end_of(rec: StreamRecord) -> str:
    """Timecode of the last displayed frame: start + (nb_frames - 1)."""
    code = _require_timecode(rec)
    if not rec.fps:
        raise AssemblyError(ErrorKind.MissingFps, "missing fps information")
    frames = _require_frames(rec)
    base, drop = timecode_rate(rec.fps)
    return Timecode.parse(code, base, drop).add(frames - 1).format()


def duration_of(rec: StreamRecord) -> str:
    return str(_require_frames(rec))


def fps_of(rec: StreamRecord) -> str:
    return rec.fps


def resolution_of(rec: StreamRecord) -> str:
    if not rec.width:
        raise AssemblyError(ErrorKind.MissingWidth, "missing width information")
    if not rec.height:
        raise AssemblyError(ErrorKind.MissingHeight, "missing height information")
    return f"{rec.width}*{rec.height}"


def codec_of(rec: StreamRecord) -> str:
    return f"{string.capwords(rec.codec_name.lower())} {rec.profile} / {rec.pix_fmt}"


def colorspace_of(rec: StreamRecord) -> str:
    return rec.color_space


RECIPES: Dict[ResultField, Recipe] = {
    ResultField.start: start_of,
    ResultField.end: end_of,
    ResultField.duration: duration_of,
    ResultField.fps: fps_of,
    ResultField.resolution: resolution_of,
    ResultField.codec: codec_of,
    ResultField.colorspace: colorspace_of,
}


def assemble(config: ProbeConfig, record: StreamRecord) -> ProbeResult:
    """
    Compute every requested field in canonical order. The first failure aborts
    the whole assembly; nothing computed before it is returned.
    """
    values: Dict[str, str] = {}
    for fld in config.requested():
        try:
            values[fld.value] = RECIPES[fld](record)
        except ProbeError as e:
            logger.debug("field %s failed: %s", fld.value, e)
            raise
    return ProbeResult(**values)
