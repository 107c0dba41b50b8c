"""System routes: health check"""

from fastapi import APIRouter

from alfa_trading.responses import success, utc_timestamp

router = APIRouter(tags=["system"])


@router.get("/health")
async def health():
    timestamp = utc_timestamp()
    body = success({"status": "OK", "timestamp": timestamp})
    # Top-level copy for health checkers that only look for "status"
    body.update(status="OK", timestamp=timestamp)
    return body
