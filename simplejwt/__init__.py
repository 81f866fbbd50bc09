"""Build, parse and validate HS256 JSON Web Tokens."""
from __future__ import annotations

import logging

from .build import Build
from .clock import Clock, FixedClock, SystemClock
from .decoders import DecodeHS256, Decoder
from .encoders import EncodeHS256, Encoder
from .errors import (
    BuildError,
    ErrorCode,
    JwtError,
    ParseError,
    SecretError,
    TokensError,
    ValidateError,
    is_expiration_error,
)
from .jwt import Jwt
from .parse import Parse
from .parsed import Parsed
from .secret import Secret
from .tokens import Tokens
from .validate import Validate
from .validator import Validator

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Build",
    "BuildError",
    "Clock",
    "DecodeHS256",
    "Decoder",
    "EncodeHS256",
    "Encoder",
    "ErrorCode",
    "FixedClock",
    "Jwt",
    "JwtError",
    "Parse",
    "ParseError",
    "Parsed",
    "Secret",
    "SecretError",
    "SystemClock",
    "Tokens",
    "TokensError",
    "Validate",
    "ValidateError",
    "Validator",
    "is_expiration_error",
]
