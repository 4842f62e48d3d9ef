# tcprobe/services/api/deps.py
from __future__ import annotations

from tcprobe.domain.ports.report_source import ReportSourcePort
from tcprobe.services.probe.ffprobe_adapter import FFprobeAdapter


def get_report_source() -> ReportSourcePort:
    """
    Provide a ReportSourcePort implementation (ffprobe) via DI.
    Tests override this with a canned report.
    """
    return FFprobeAdapter()
