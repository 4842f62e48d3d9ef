# tcprobe/domain/entities/timecode.py
from __future__ import annotations

import re

from tcprobe.common.logging import get_logger
from tcprobe.domain.enums.error_kind import ErrorKind
from tcprobe.domain.errors import TimecodeError

logger = get_logger(__name__)

SUPPORTED_BASES = (24, 30)

# frames in 10 real minutes of 30-base drop-frame: 10*60*30 minus 2 codes for 9 of the 10 minutes
FRAMES_PER_10_MIN_DROP = 17982
# frames in a dropping minute: 60*30 - 2
FRAMES_PER_MIN_DROP = 1798

TIMECODE_RE = re.compile(r"^([0-9]{2}):([0-9]{2}):([0-9]{2})[:;]([0-9]{2})$")


def is_timecode(code: str) -> bool:
    """True when `code` has the fixed 11-character HH:MM:SS:FF (or ;FF) shape."""
    return bool(code) and len(code) == 11 and TIMECODE_RE.match(code) is not None


class Timecode:
    """
    SMPTE timecode for 24 and 30 base rates, drop-frame aware.

    The position is kept as an absolute frame count in the non-drop timeline;
    drop-frame codes are removed on parse and reintroduced on format.
    See http://andrewduncan.net/timecodes/ for the drop-frame arithmetic.
    """

    __slots__ = ("_base", "_drop", "_frame")

    def __init__(self, frame: int, base: int, drop: bool = False):
        if base not in SUPPORTED_BASES:
            raise TimecodeError(ErrorKind.UnsupportedBase, f"unknown base for timecode: {base}")
        if frame < 0:
            raise ValueError(f"frame must be non-negative, got {frame}")
        self._base = base
        self._drop = self._validate_drop(base, drop)
        self._frame = frame

    @staticmethod
    def _validate_drop(base: int, drop: bool) -> bool:
        # 23.98 / 23.976 is not a drop-frame system
        if drop and base != 30:
            logger.debug("drop-frame requested for base %s; using non-drop", base)
            return False
        return bool(drop)

    @classmethod
    def parse(cls, code: str, base: int, drop: bool = False) -> "Timecode":
        if base not in SUPPORTED_BASES:
            raise TimecodeError(ErrorKind.UnsupportedBase, f"unknown base for timecode: {base}")
        m = TIMECODE_RE.match(code or "")
        if not m or len(code) != 11:
            raise TimecodeError(ErrorKind.InvalidTimecode, f"invalid timecode: {code!r}")
        h, mi, s, f = (int(g) for g in m.groups())
        drop = cls._validate_drop(base, drop)

        frame = 3600 * h * base + 60 * mi * base + s * base + f
        if drop:
            total_minutes = 60 * h + mi
            frame -= 2 * (total_minutes - total_minutes // 10)
        return cls(frame, base, drop)

    # ---- properties ---------------------------------------------------------
    @property
    def base(self) -> int:
        return self._base

    @property
    def drop(self) -> bool:
        return self._drop

    @property
    def frame(self) -> int:
        return self._frame

    # ---- mutation -----------------------------------------------------------
    def add(self, n: int) -> "Timecode":
        """Advance by `n` frames. Returns self so calls can be chained."""
        if n < 0:
            raise ValueError(f"cannot add a negative frame count: {n}")
        self._frame += n
        return self

    # ---- rendering ----------------------------------------------------------
    def format(self) -> str:
        base = self._base
        frame = self._frame
        if self._drop:
            tens, rem = divmod(frame, FRAMES_PER_10_MIN_DROP)
            # the first minute of every 10-minute chunk keeps its :00 and :01 codes
            minutes = (rem - 2) // FRAMES_PER_MIN_DROP if rem > 1 else 0
            frame += 18 * tens + 2 * minutes

        h = frame // base // 3600 % 24
        m = frame // base // 60 % 60
        s = frame // base % 60
        f = frame % base
        last_sep = ";" if self._drop else ":"
        return f"{h:02d}:{m:02d}:{s:02d}{last_sep}{f:02d}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Timecode({self.format()!r}, base={self._base}, drop={self._drop})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Timecode):
            return NotImplemented
        return (self._base, self._drop, self._frame) == (other._base, other._drop, other._frame)

    __hash__ = None  # mutable via add()
