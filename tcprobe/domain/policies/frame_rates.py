from __future__ import annotations

from typing import Dict, Tuple

from tcprobe.domain.enums.error_kind import ErrorKind
from tcprobe.domain.errors import AssemblyError

# fps token as printed by ffprobe -> (timecode base, drop-frame)
# 23.98 / 23.976 counts in 24 base and does not drop codes.
TIMECODE_RATES: Dict[str, Tuple[int, bool]] = {
    "24": (24, False),
    "23.98": (24, False),
    "23.976": (24, False),
    "30": (30, False),
    "29.97": (30, True),
}


def timecode_rate(fps: str) -> Tuple[int, bool]:
    """
    Domain policy mapping an fps string to the (base, drop) pair used for timecode math.
    Raises AssemblyError(UnsupportedFps) for anything we cannot count in.
    """
    try:
        return TIMECODE_RATES[fps]
    except KeyError:
        raise AssemblyError(ErrorKind.UnsupportedFps, f"unsupported fps: {fps}") from None
