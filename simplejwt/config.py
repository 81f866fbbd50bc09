"""Library defaults handled with Pydantic models."""
from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, List, Optional

from dotenv import dotenv_values
from pydantic import AliasChoices, BaseModel, ConfigDict, Field, SecretStr, field_validator

from .secret import Secret

ENV_PREFIX = "SIMPLEJWT_"


def _collect_env(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load .env + OS variables carrying ``prefix`` and strip it from the keys."""

    raw: dict[str, Any] = {}
    sources = [dotenv_values(".env"), os.environ]
    for source in sources:
        for key, value in source.items():
            if value in (None, ""):
                continue
            key_upper = key.upper()
            if not key_upper.startswith(prefix):
                continue
            stripped = key_upper[len(prefix) :]
            raw[stripped] = value
            raw[stripped.lower()] = value
    return raw


class Settings(BaseModel):
    """Defaults used by the :class:`~simplejwt.tokens.Tokens` facade."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    token_type: str = Field(
        default="JWT",
        min_length=1,
        validation_alias=AliasChoices("token_type", "TOKEN_TYPE"),
    )
    jwt_secret_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("jwt_secret_key", "JWT_SECRET", "JWT_SECRET_KEY"),
    )
    issuer: str = Field(default="", validation_alias=AliasChoices("issuer", "ISSUER"))
    audience: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("audience", "AUDIENCE"),
    )
    user_key: str = Field(
        default="user_id",
        min_length=1,
        validation_alias=AliasChoices("user_key", "USER_KEY"),
    )
    expiration_seconds: int = Field(
        default=3600,
        ge=1,
        validation_alias=AliasChoices("expiration_seconds", "EXPIRATION_SECONDS"),
    )
    allowed_algorithms: List[str] = Field(
        default_factory=lambda: ["HS256"],
        validation_alias=AliasChoices("allowed_algorithms", "ALLOWED_ALGORITHMS"),
    )

    @field_validator("allowed_algorithms", mode="before")
    @classmethod
    def _split_algorithms(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @property
    def jwt_secret(self) -> Optional[str]:
        """Return the plain JWT secret string, if one is configured."""

        if self.jwt_secret_key is None:
            return None
        return self.jwt_secret_key.get_secret_value()

    @classmethod
    def load(cls) -> "Settings":
        data = _collect_env()
        instance = cls.model_validate(data)
        _validate_required_settings(instance)
        return instance


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings.load()


def _validate_required_settings(settings: Settings) -> None:
    """Fail fast when a configured secret could never sign a token."""

    secret = settings.jwt_secret
    if secret is None:
        return
    failures = Secret().failures(secret)
    if failures:
        details = "; ".join(message for _, message in failures)
        raise ValueError(f"Incomplete configuration: {ENV_PREFIX}JWT_SECRET: {details}")


__all__ = ["ENV_PREFIX", "Settings", "get_settings"]
