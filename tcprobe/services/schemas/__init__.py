from tcprobe.services.schemas.probe import (
    ProbeRequest,
    ProbeResponse,
    ProbeErrorResponse,
)

__all__ = [
    "ProbeRequest",
    "ProbeResponse",
    "ProbeErrorResponse",
]
