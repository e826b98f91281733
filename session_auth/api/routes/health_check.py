import os
import time
from datetime import UTC, datetime

from fastapi import APIRouter

router = APIRouter(prefix="/health", tags=["Health"])

_started_at = time.monotonic()


def _uptime() -> float:
    return round(time.monotonic() - _started_at, 3)


def _timestamp() -> str:
    return datetime.now(UTC).isoformat()


@router.get("")
async def check():
    return {
        "status": "ok",
        "timestamp": _timestamp(),
        "services": {"application": {"status": "healthy", "uptime": _uptime()}},
    }


@router.get("/ready")
async def readiness():
    return {
        "status": "ok",
        "timestamp": _timestamp(),
        "services": {"application": {"status": "up", "uptime": _uptime()}},
    }


@router.get("/live")
async def liveness():
    return {
        "status": "ok",
        "uptime": _uptime(),
        "timestamp": _timestamp(),
        "pid": os.getpid(),
    }
