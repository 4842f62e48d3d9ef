from __future__ import annotations

import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from tcprobe.common.settings import get_settings
from tcprobe.common.logging import get_logger
from tcprobe.common.probe.ffprobe_helpers import build_ffprobe_cmd
from tcprobe.domain.ports.report_source import ReportSourcePort

logger = get_logger(__name__)


@dataclass(frozen=True)
class FFprobeError(RuntimeError):
    """Adapter-level error for probe failures."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        if self.stderr:
            return f"{self.message}: {self.stderr.strip()}"
        return self.message


class FFprobeAdapter(ReportSourcePort):
    """
    Infrastructure adapter implementing ReportSourcePort using `ffprobe -show_streams`.
    Returns the human-readable overview (stderr) followed by the [STREAM] blocks (stdout).
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, timeout_sec: Optional[int] = None):
        cfg = get_settings()
        # choose binary
        candidate = ffprobe_bin or cfg.ffprobe.bin
        if not candidate or candidate == "ffprobe":
            # try to resolve absolute path for nicer errors
            resolved = shutil.which(candidate or "ffprobe")
            if not resolved:
                raise FFprobeError("ffprobe not found on PATH; set FFPROBE__BIN or install ffmpeg.")
            candidate = resolved

        self.ffprobe_bin = candidate
        self.timeout_sec = int(timeout_sec or cfg.ffprobe.timeout_sec or 30)

    # ---- Port API -------------------------------------------------------------
    def read_report(self, path: Path) -> str:
        if not path:
            raise FFprobeError("No path provided to read_report().")
        if not Path(path).is_file():
            raise FFprobeError(f"File not found: {path}")

        cmd = build_ffprobe_cmd(Path(path), ffprobe_bin=self.ffprobe_bin)
        logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))

        try:
            proc = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
                check=False,  # we handle rc manually to attach stderr
            )
        except subprocess.TimeoutExpired as e:
            raise FFprobeError(f"ffprobe timed out after {self.timeout_sec}s", stderr=str(e)) from e
        except OSError as e:
            raise FFprobeError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e

        if proc.returncode != 0:
            raise FFprobeError("failed to execute ffprobe", stderr=proc.stderr, rc=proc.returncode)

        return (proc.stderr or "") + (proc.stdout or "")
