import logging
import os

import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()

logger = logging.getLogger(__name__)

MIN_SECRET_LENGTH = 32


def _get(key, default):
    """Process environment wins over env.yaml, which wins over the default."""
    return os.environ.get(key, data.get(key, default))


def _as_bool(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def _as_list(value) -> list:
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return list(value)


class ConfigurationError(Exception):
    pass


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./auth.db")
    API_PREFIX = _get("API_PREFIX", "")
    API_PORT = int(_get("API_PORT", 8080))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _as_list(_get("CORS_ORIGINS", ["http://localhost:3000"]))
    CORS_ALLOW_CREDENTIALS = _as_bool(_get("CORS_ALLOW_CREDENTIALS", True))
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    JWT_ACCESS_SECRET = str(
        _get("JWT_ACCESS_SECRET", "dev-access-secret-change-in-production-0001")
    )
    JWT_REFRESH_SECRET = str(
        _get("JWT_REFRESH_SECRET", "dev-refresh-secret-change-in-production-001")
    )
    JWT_ACCESS_EXPIRY = str(_get("JWT_ACCESS_EXPIRY", "15m"))
    JWT_REFRESH_EXPIRY = str(_get("JWT_REFRESH_EXPIRY", "7d"))
    SALT_ROUNDS = int(_get("SALT_ROUNDS", 12))
    COOKIE_SECURE = _as_bool(_get("COOKIE_SECURE", False))
    COOKIE_DOMAIN = _get("COOKIE_DOMAIN", None)


def validate_config(config) -> None:
    """
    Startup checks.

    Raises:
        ConfigurationError: if a signing secret is shorter than 32 chars

    Malformed expiry strings are only logged; token issuance falls back to
    7 days for them.
    """
    from session_auth.app.services.expiry import is_valid_duration

    for key in ("JWT_ACCESS_SECRET", "JWT_REFRESH_SECRET"):
        secret = getattr(config, key, None)
        if not secret or len(secret) < MIN_SECRET_LENGTH:
            raise ConfigurationError(
                f"{key} must be at least {MIN_SECRET_LENGTH} characters"
            )

    for key in ("JWT_ACCESS_EXPIRY", "JWT_REFRESH_EXPIRY"):
        value = getattr(config, key, None)
        if not is_valid_duration(value):
            logger.warning(
                f"{key}={value!r} is not of the form <int><s|m|h|d>; "
                "falling back to 7d"
            )
