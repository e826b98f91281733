from typing import Tuple

from fastapi import Request

UNKNOWN = "unknown"


def request_provenance(request: Request) -> Tuple[str, str]:
    """User-Agent and client IP stamped onto new sessions."""
    user_agent = request.headers.get("user-agent") or UNKNOWN
    ip_address = request.client.host if request.client else UNKNOWN
    return user_agent[:500], (ip_address or UNKNOWN)[:45]
