# tcprobe/services/probe/service.py
from __future__ import annotations

from pathlib import Path

from tcprobe.common.logging import get_logger
from tcprobe.domain.entities.probe import ProbeConfig, ProbeResult
from tcprobe.domain.ports.report_source import ReportSourcePort
from tcprobe.services.assembly.assembler import assemble
from tcprobe.services.report.parser import extract

logger = get_logger(__name__)


class TimecodeProbeService:
    """
    Orchestrates one probe: fetch the report, extract the video stream record,
    assemble the requested fields. Synchronous; every failure propagates.
    """

    def __init__(self, source: ReportSourcePort):
        self.source = source

    def probe(self, path: Path, config: ProbeConfig) -> ProbeResult:
        if not config.any():
            raise ValueError("at least one result field must be requested")
        report = self.source.read_report(Path(path))
        record = extract(report)
        result = assemble(config, record)
        logger.info("probed %s: %s", path, ", ".join(f.value for f in config.requested()))
        return result
