# tcprobe/domain/errors.py
from __future__ import annotations

from tcprobe.domain.enums.error_kind import ErrorKind


class ProbeError(Exception):
    """
    Base for every terminal failure raised while turning a probe report into a result.
    Carries a machine-checkable `kind` plus contextual `detail` (offending line, string, ...).
    """

    def __init__(self, kind: ErrorKind, detail: str = ""):
        self.kind = ErrorKind(kind)
        self.detail = detail
        super().__init__(f"{self.kind}: {detail}" if detail else str(self.kind))


class TimecodeError(ProbeError, ValueError):
    """Malformed timecode string or unsupported base handed to the codec."""


class ReportParseError(ProbeError):
    """The probe report does not have the shape we expect."""


class AssemblyError(ProbeError):
    """A requested field cannot be computed from what the report provided."""
