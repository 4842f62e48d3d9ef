from __future__ import annotations
from enum import StrEnum

class ErrorKind(StrEnum):
    # report parsing
    NoStreamMarker = "NoStreamMarker"
    NoVideoStream = "NoVideoStream"
    StreamIndexOutOfRange = "StreamIndexOutOfRange"
    InvalidTimecodeTag = "InvalidTimecodeTag"
    InvalidFrameCount = "InvalidFrameCount"
    # result assembly
    MissingTimecode = "MissingTimecode"
    MissingFps = "MissingFps"
    MissingFrameCount = "MissingFrameCount"
    UnsupportedFps = "UnsupportedFps"
    MissingWidth = "MissingWidth"
    MissingHeight = "MissingHeight"
    # timecode codec
    InvalidTimecode = "InvalidTimecode"
    UnsupportedBase = "UnsupportedBase"
