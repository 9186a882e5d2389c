"""Token service — signs and verifies bearer tokens (JWT, HS256 by default).

Verification is self-contained: it checks the signature and the expiry and
returns the embedded claims without touching the database.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt


class InvalidTokenError(Exception):
    """Bad signature, malformed token or missing claims."""


class TokenExpiredError(InvalidTokenError):
    """Signature is fine but the validity window has passed."""


@dataclass(frozen=True)
class TokenClaims:
    user_id: str
    email: str
    role: str
    timestamp: int  # issuance, epoch milliseconds


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", ttl: timedelta = timedelta(hours=24)):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self.secret = secret
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(
        self,
        user_id: str,
        email: str,
        role: str,
        now: Optional[datetime] = None,
        ttl: Optional[timedelta] = None,
    ) -> str:
        now = now or datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "email": email,
            "role": role,
            "timestamp": int(now.timestamp() * 1000),
            "iat": now,
            "exp": now + (ttl or self.ttl),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired") from e
        except JWTError as e:
            raise InvalidTokenError("Invalid token") from e

        try:
            return TokenClaims(
                user_id=str(payload["userId"]),
                email=str(payload["email"]),
                role=str(payload["role"]),
                timestamp=int(payload["timestamp"]),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidTokenError("Token is missing required claims") from e
