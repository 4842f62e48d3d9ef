# tcprobe/services/api/routers/probe.py
from __future__ import annotations
from http import HTTPStatus
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException

from tcprobe.common.settings import get_settings
from tcprobe.domain.entities.probe import ProbeConfig
from tcprobe.domain.errors import ProbeError
from tcprobe.domain.ports.report_source import ReportSourcePort
from tcprobe.services.api.deps import get_report_source
from tcprobe.services.probe.ffprobe_adapter import FFprobeError
from tcprobe.services.probe.service import TimecodeProbeService
from tcprobe.services.schemas.probe import ProbeErrorResponse, ProbeRequest, ProbeResponse

cfg = get_settings()
router = APIRouter(prefix=f"{cfg.api.prefix}/probe", tags=["probe"])


@router.post(
    "",
    response_model=ProbeResponse,
    responses={
        422: {"model": ProbeErrorResponse},
        502: {"model": ProbeErrorResponse},
    },
)
def probe_media(
    req: ProbeRequest,
    source: ReportSourcePort = Depends(get_report_source),
) -> ProbeResponse:
    svc = TimecodeProbeService(source)
    try:
        result = svc.probe(Path(req.path), ProbeConfig.from_fields(req.fields))
    except ProbeError as e:
        raise HTTPException(
            status_code=HTTPStatus.UNPROCESSABLE_ENTITY,
            detail={"kind": e.kind.value, "detail": e.detail},
        ) from e
    except FFprobeError as e:
        raise HTTPException(
            status_code=HTTPStatus.BAD_GATEWAY,
            detail={"kind": "FFprobeError", "detail": str(e)},
        ) from e
    return ProbeResponse(**result.as_dict())
