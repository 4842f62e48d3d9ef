# tcprobe/domain/entities/probe.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Iterable, List

from tcprobe.domain.enums.result_field import CANONICAL_ORDER, ResultField


@dataclass(frozen=True)
class ProbeConfig:
    """
    Selection mask of result fields to compute. Request order never matters;
    output always follows ResultField declaration order.
    """
    start: bool = False
    end: bool = False
    duration: bool = False
    fps: bool = False
    resolution: bool = False
    codec: bool = False
    colorspace: bool = False

    @classmethod
    def from_fields(cls, names: Iterable[str | ResultField]) -> "ProbeConfig":
        return cls(**{ResultField(n).value: True for n in names})

    def requested(self) -> List[ResultField]:
        return [f for f in CANONICAL_ORDER if getattr(self, f.value)]

    def any(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))


@dataclass(frozen=True)
class ProbeResult:
    """
    One string per result field; "" means not requested (or, for the lenient
    fields, not present in the report).
    """
    start: str = ""
    end: str = ""
    duration: str = ""
    fps: str = ""
    resolution: str = ""
    codec: str = ""
    colorspace: str = ""

    def lines(self) -> List[str]:
        """Non-empty values in canonical order, one per printed line."""
        return [v for v in (getattr(self, f.value) for f in CANONICAL_ORDER) if v]

    def as_dict(self) -> dict[str, str]:
        return {f.value: getattr(self, f.value) for f in CANONICAL_ORDER}
