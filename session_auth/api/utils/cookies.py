"""
Token cookie delivery.

Both cookies are HTTP-only with SameSite=strict. The refresh cookie is
scoped to the auth routes so it is only sent where it is consumed.
"""

from fastapi import Response

from session_auth.app.services.expiry import parse_duration

ACCESS_TOKEN_COOKIE = "access_token"
REFRESH_TOKEN_COOKIE = "refresh_token"
REFRESH_COOKIE_PATH = "/auth"


def _cookie_options(config, path: str) -> dict:
    return {
        "httponly": True,
        "secure": config.COOKIE_SECURE,
        "samesite": "strict",
        "domain": config.COOKIE_DOMAIN,
        "path": path,
    }


def set_token_cookies(response: Response, config, access_token: str, refresh_token: str):
    refresh_path = f"{config.API_PREFIX}{REFRESH_COOKIE_PATH}"
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        access_token,
        max_age=int(parse_duration(config.JWT_ACCESS_EXPIRY).total_seconds()),
        **_cookie_options(config, "/"),
    )
    response.set_cookie(
        REFRESH_TOKEN_COOKIE,
        refresh_token,
        max_age=int(parse_duration(config.JWT_REFRESH_EXPIRY).total_seconds()),
        **_cookie_options(config, refresh_path),
    )


def clear_token_cookies(response: Response, config):
    refresh_path = f"{config.API_PREFIX}{REFRESH_COOKIE_PATH}"
    response.delete_cookie(ACCESS_TOKEN_COOKIE, **_cookie_options(config, "/"))
    response.delete_cookie(REFRESH_TOKEN_COOKIE, **_cookie_options(config, refresh_path))
