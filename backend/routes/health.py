import resource
import time
from datetime import datetime, timezone

from fastapi import APIRouter

import config

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


def _memory_usage() -> dict:
    usage = resource.getrusage(resource.RUSAGE_SELF)
    return {"maxRssKb": usage.ru_maxrss}    # KB on Linux, bytes on macOS


@router.get("/health")
def health():
    """
    Liveness probe with process details, polled by the uptime monitor.
    Failures surface through the global 500 handler.
    """
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime": round(time.monotonic() - _STARTED_AT, 3),
        "environment": config.ENVIRONMENT,
        "memory": _memory_usage(),
        "version": config.APP_VERSION,
    }
