from __future__ import annotations
from pathlib import Path
from typing import Protocol

class ReportSourcePort(Protocol):
    def read_report(self, path: Path) -> str: ...
