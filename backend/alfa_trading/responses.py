"""JSON response envelope shared by every endpoint"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


def success(data: Any, **extra: Any) -> Dict[str, Any]:
    """{"success": true, "data": ..., **extra}"""
    body = {"success": True, "data": data}
    body.update(extra)
    return body


def failure(error: str, details: Optional[Any] = None) -> Dict[str, Any]:
    """{"success": false, "error": ..., ["details": ...]}"""
    body = {"success": False, "error": error}
    if details is not None:
        body["details"] = details
    return body
