# tcprobe/services/api/routers/health.py
from __future__ import annotations
import shutil

from fastapi import APIRouter
from tcprobe.common.settings import get_settings

router = APIRouter()

@router.get("/healthz")
def healthz():
    """Liveness plus whether the configured ffprobe binary can be found."""
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "ffprobe_found": shutil.which(s.ffprobe.bin) is not None,
    }
