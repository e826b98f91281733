"""
Token Issuer

Signs access/refresh token pairs for an authenticated user.
"""

import asyncio
import uuid
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from .expiry import parse_duration

ALGORITHM = "HS256"


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


class TokenIssuer:
    """
    Issues signed access and refresh tokens.

    Business Rules:
    - Payload is {sub, email, role}; each token also gets iat, exp and a
      random jti so no two issued tokens are equal
    - Access and refresh tokens use distinct secrets and lifetimes
    - Both are signed concurrently; if either fails, nothing is returned
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_expiry: str = "15m",
        refresh_expiry: str = "7d",
    ):
        self.access_secret = access_secret
        self.refresh_secret = refresh_secret
        self.access_expiry = access_expiry
        self.refresh_expiry = refresh_expiry

    @classmethod
    def from_config(cls, config) -> "TokenIssuer":
        return cls(
            access_secret=config.JWT_ACCESS_SECRET,
            refresh_secret=config.JWT_REFRESH_SECRET,
            access_expiry=config.JWT_ACCESS_EXPIRY,
            refresh_expiry=config.JWT_REFRESH_EXPIRY,
        )

    async def issue(self, user_id: UUID, email: str, role: str) -> TokenPair:
        """
        Sign a new token pair.

        Args:
            user_id: Subject of both tokens
            email: User email claim
            role: User role claim (USER, ADMIN)

        Returns:
            TokenPair with both signed tokens

        Raises:
            JWTError: if either signing fails
        """
        payload = {"sub": str(user_id), "email": email, "role": role}

        access_token, refresh_token = await asyncio.gather(
            asyncio.to_thread(
                self._sign, payload, self.access_secret, self.access_expiry
            ),
            asyncio.to_thread(
                self._sign, payload, self.refresh_secret, self.refresh_expiry
            ),
        )
        return TokenPair(access_token=access_token, refresh_token=refresh_token)

    def verify_access_token(self, token: str) -> Optional[Dict[str, Any]]:
        """Decode an access token; None if the signature or expiry is invalid."""
        try:
            return jwt.decode(token, self.access_secret, algorithms=[ALGORITHM])
        except JWTError:
            return None

    @staticmethod
    def _sign(payload: Dict[str, Any], secret: str, expiry: str) -> str:
        now = datetime.now(UTC)
        claims = {
            **payload,
            "iat": now,
            "exp": now + parse_duration(expiry),
            "jti": str(uuid.uuid4()),
        }
        return jwt.encode(claims, secret, algorithm=ALGORITHM)
