"""FastAPI dependency that authenticates requests with a bearer token."""

import logging
from typing import Iterable, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from .errors import JwtError
from .parsed import Parsed
from .tokens import Tokens

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


class BearerTokenGuard:
    """Validate the request's bearer token and return its parsed claims.

    Usage::

        guard = BearerTokenGuard()

        @app.get("/me")
        def me(claims: Parsed = Depends(guard)) -> dict:
            return {"sub": claims.get_subject()}
    """

    def __init__(
        self,
        secret: Optional[str] = None,
        *,
        audience: Optional[str] = None,
        algorithms: Optional[Iterable[str]] = None,
        tokens: Optional[Tokens] = None,
    ) -> None:
        self.tokens = tokens or Tokens()
        settings = self.tokens.settings
        self.secret = secret if secret is not None else settings.jwt_secret
        if not self.secret:
            raise ValueError("A signing secret is required to validate bearer tokens")
        self.audience = audience if audience is not None else settings.audience
        self.algorithms = list(algorithms) if algorithms is not None else list(settings.allowed_algorithms)

    def __call__(
        self,
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    ) -> Parsed:
        if credentials is None or credentials.scheme.lower() != "bearer":
            raise self._unauthorized("Not authenticated")

        try:
            validate = self.tokens.validator(credentials.credentials, self.secret)
            validate.structure().algorithm_not_none().algorithm(self.algorithms).signature().expiration()
            if self.audience is not None:
                validate.audience(self.audience)
            return validate.parse.parse()
        except JwtError as exc:
            logger.info("Rejected bearer token: %s (code=%s)", exc, int(exc.code))
            raise self._unauthorized("Could not validate credentials") from exc

    @staticmethod
    def _unauthorized(detail: str) -> HTTPException:
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


__all__ = ["BearerTokenGuard", "bearer_scheme"]
