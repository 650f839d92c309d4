"""JWT token codec.

Tokens are HS256-signed JWTs with the claims:
- sub: user id (stringified, as JWT requires)
- username: username at issue time
- iat: issued-at, Unix seconds
- exp: expiry, Unix seconds

Expiry has one-second resolution: a token is rejected once the current time
reaches the (floored) ``exp`` claim. There is no revocation; a token stays
valid until it expires.
"""

import logging
from dataclasses import dataclass
from datetime import timedelta

import jwt

from ..exceptions import InvalidToken
from ..utils import isodatetime
from .schemas import TokenClaim

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=1)
REQUIRED_CLAIMS = ["sub", "username", "iat", "exp"]


@dataclass(frozen=True)
class TokenCheck:
    """Outcome of verifying a token.

    Exactly one of ``claim`` (success) or ``reason`` (failure) is set.
    ``reason`` is ``"expired"`` or ``"invalid"``.
    """

    claim: TokenClaim | None = None
    reason: str | None = None

    @property
    def ok(self) -> bool:
        return self.claim is not None


class TokenCodec:
    """Issues and verifies signed, time-limited bearer tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        default_ttl: timedelta = DEFAULT_TTL,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm
        self.default_ttl = default_ttl

    def issue(self, user, ttl: timedelta | float | None = None) -> str:
        """
        Issue a token for ``user``.

        Args:
            user: Anything with ``id`` and ``username`` attributes
                (UserResponse, UserRecord or TokenClaim)
            ttl: Lifetime as timedelta or seconds; defaults to default_ttl

        Returns:
            Encoded JWT string
        """
        if ttl is None:
            ttl = self.default_ttl
        elif not isinstance(ttl, timedelta):
            ttl = timedelta(seconds=ttl)

        issued_at = isodatetime.utcnow()
        payload = {
            "sub": str(user.id),
            "username": user.username,
            "iat": issued_at,
            "exp": issued_at + ttl,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def check(self, token: str) -> TokenCheck:
        """Verify ``token`` and report the outcome without raising."""
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError:
            return TokenCheck(reason="expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Token rejected: {e}")
            return TokenCheck(reason="invalid")

        # Subject must be an integer user id
        try:
            claim = TokenClaim(
                id=int(payload["sub"]),
                username=payload["username"],
                iat=payload["iat"],
                exp=payload["exp"],
            )
        except (TypeError, ValueError) as e:
            logger.debug(f"Token claims rejected: {e}")
            return TokenCheck(reason="invalid")

        return TokenCheck(claim=claim)

    def verify(self, token: str) -> TokenClaim:
        """
        Verify ``token`` and return its claim.

        Raises:
            InvalidToken: If the token is malformed, forged or expired
        """
        result = self.check(token)
        if not result.ok:
            raise InvalidToken(details={"reason": result.reason})
        return result.claim

