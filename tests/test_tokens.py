from __future__ import annotations

import time

import pytest

from simplejwt import (
    Build,
    BuildError,
    EncodeHS256,
    ErrorCode,
    Jwt,
    Parse,
    Secret,
    Tokens,
    TokensError,
    Validate,
    Validator,
)
from simplejwt.config import Settings, get_settings


def test_factories_return_strict_components(tokens, secret):
    jwt = tokens.builder().set_secret(secret).build()

    assert isinstance(tokens.builder(), Build)
    assert isinstance(tokens.parser(jwt.get_token(), secret), Parse)
    assert isinstance(tokens.validator(jwt.get_token(), secret), Validate)


def test_builder_uses_configured_token_type(clock, secret):
    tokens = Tokens(settings=Settings(token_type="at+jwt"), clock=clock)

    assert tokens.builder().get_header()["typ"] == "at+jwt"


def test_create_sets_user_claim_issuer_and_issued_at(tokens, secret, now):
    jwt = tokens.create("user_id", 12, secret, now + 60, "localhost")

    payload = tokens.get_payload(jwt.get_token(), secret)

    assert isinstance(jwt, Jwt)
    assert payload == {"user_id": 12, "exp": now + 60, "iss": "localhost", "iat": now}


def test_create_rejects_past_expiration(tokens, secret, now):
    with pytest.raises(BuildError) as exc_info:
        tokens.create("user_id", 12, secret, now - 20, "localhost")

    assert exc_info.value.code == ErrorCode.EXPIRATION_EXPIRED


def test_custom_payload(tokens, secret, now):
    jwt = tokens.custom_payload({"iat": now, "uid": 1, "exp": now + 10, "iss": "localhost"}, secret)

    assert tokens.get_payload(jwt.get_token(), secret) == {
        "iat": now,
        "uid": 1,
        "exp": now + 10,
        "iss": "localhost",
    }
    assert tokens.validate(jwt.get_token(), secret) is True


def test_custom_payload_rejects_numeric_keys(tokens, secret):
    with pytest.raises(TokensError) as exc_info:
        tokens.custom_payload({"uid": 1, 2: "two"}, secret)

    assert exc_info.value.code == ErrorCode.INVALID_CLAIM


def test_custom_payload_rejects_weak_secret(tokens):
    with pytest.raises(BuildError) as exc_info:
        tokens.custom_payload({"uid": 1}, "weak")

    assert exc_info.value.code == ErrorCode.INVALID_SECRET


def test_get_header_and_payload_are_lenient(tokens, secret):
    jwt = tokens.custom_payload({"uid": 1}, secret)

    assert tokens.get_header(jwt.get_token(), secret) == {"alg": "HS256", "typ": "JWT"}
    assert tokens.get_header("not a token", secret) == {}
    assert tokens.get_payload("not a token", secret) == {}


def test_validate(tokens, secret):
    token = tokens.custom_payload({"uid": 1}, secret).get_token()

    assert tokens.validate(token, secret) is True
    assert tokens.validate(token, "456abcDEF!$%123") is False
    assert tokens.validate("bad.token", secret) is False


class NoneAlgorithm(EncodeHS256):
    def get_algorithm(self) -> str:
        return "none"


def test_validate_rejects_none_algorithm(tokens, clock, secret):
    builder = Build("JWT", Validator(clock), Secret(), NoneAlgorithm())
    builder.set_secret(secret).set_payload_claim("uid", 1)

    assert tokens.validate(builder.build().get_token(), secret) is False


def test_validate_expiration(tokens, secret, clock, now):
    expiring = tokens.create("user_id", 1, secret, now + 10, "localhost").get_token()
    no_exp = tokens.custom_payload({"uid": 1}, secret).get_token()

    assert tokens.validate_expiration(expiring, secret) is True
    assert tokens.validate_expiration(no_exp, secret) is False

    clock.advance(10)

    assert tokens.validate_expiration(expiring, secret) is False


def test_validate_not_before(tokens, secret, now):
    usable = tokens.custom_payload({"nbf": now - 1}, secret).get_token()
    pending = tokens.custom_payload({"nbf": now + 30}, secret).get_token()
    unset = tokens.custom_payload({"uid": 1}, secret).get_token()

    assert tokens.validate_not_before(usable, secret) is True
    assert tokens.validate_not_before(pending, secret) is False
    assert tokens.validate_not_before(unset, secret) is False


def test_validate_audience(clock, secret):
    tokens = Tokens(settings=Settings(audience="https://api.example"), clock=clock)
    token = tokens.builder().set_secret(secret).set_audience(["https://api.example"]).build().get_token()
    without_aud = tokens.custom_payload({"uid": 1}, secret).get_token()

    assert tokens.validate_audience(token, secret) is True
    assert tokens.validate_audience(token, secret, "https://other.example") is False
    assert tokens.validate_audience(without_aud, secret) is False


def test_validate_audience_without_configured_audience(tokens, secret):
    token = tokens.custom_payload({"aud": "x"}, secret).get_token()

    assert tokens.validate_audience(token, secret) is False
    assert tokens.validate_audience(token, secret, "x") is True


def test_validate_algorithm_uses_configured_allow_list(clock, secret):
    token = Tokens(clock=clock, settings=Settings()).custom_payload({"uid": 1}, secret).get_token()

    assert Tokens(settings=Settings(), clock=clock).validate_algorithm(token, secret) is True
    restricted = Tokens(settings=Settings(allowed_algorithms="HS512"), clock=clock)
    assert restricted.validate_algorithm(token, secret) is False


def test_module_shortcuts(secret):
    from simplejwt import tokens as shortcuts

    token = shortcuts.custom_payload({"uid": 7}, secret)

    assert isinstance(token, str)
    assert shortcuts.validate(token, secret) is True
    assert shortcuts.get_payload(token, secret) == {"uid": 7}
    assert shortcuts.get_header(token, secret)["alg"] == "HS256"
    assert shortcuts.validate_expiration(token, secret) is False
    assert shortcuts.validate_not_before(token, secret) is False


def test_module_create_uses_configured_user_key(monkeypatch, secret):
    from simplejwt import tokens as shortcuts
    from simplejwt.config import get_settings

    monkeypatch.setenv("SIMPLEJWT_USER_KEY", "account")
    get_settings.cache_clear()

    token = shortcuts.create(5, secret, int(time.time()) + 60, "localhost")

    payload = shortcuts.get_payload(token, secret)
    assert payload["account"] == 5
    assert payload["iss"] == "localhost"
    assert shortcuts.validate_expiration(token, secret) is True


@pytest.mark.parametrize(
    ("claims", "check"),
    [
        ({"aud": 5}, lambda t, tok, s: t.validate_audience(tok, s, "x")),
        ({"aud": {"x": 1}}, lambda t, tok, s: t.validate_audience(tok, s, "x")),
        ({"exp": "soon"}, lambda t, tok, s: t.validate_expiration(tok, s)),
        ({"nbf": None}, lambda t, tok, s: t.validate_not_before(tok, s)),
    ],
)
def test_lenient_checks_reject_claims_of_the_wrong_type(tokens, secret, claims, check):
    token = tokens.custom_payload(claims, secret).get_token()

    assert check(tokens, token, secret) is False


def test_unsigned_token_with_odd_claims_is_rejected(tokens):
    forged = ".".join((EncodeHS256().encode({"alg": "none"}), EncodeHS256().encode({"exp": "later"}), "x"))

    assert tokens.validate_expiration(forged, "anything") is False
    assert tokens.validate(forged, "anything") is False


def test_shortcuts_ignore_unprefixed_environment(monkeypatch, secret):
    from simplejwt import tokens as shortcuts

    monkeypatch.setenv("JWT_SECRET", "other-app-dev-secret")
    monkeypatch.setenv("TOKEN_TYPE", "Bearer")
    get_settings.cache_clear()

    token = shortcuts.custom_payload({"uid": 1}, secret)

    assert shortcuts.validate(token, secret) is True
    assert shortcuts.get_header(token, secret)["typ"] == "JWT"


def test_lenient_shortcuts_fall_back_when_settings_are_invalid(monkeypatch, secret, now):
    from simplejwt import tokens as shortcuts

    token = Tokens(settings=Settings()).custom_payload({"uid": 1}, secret).get_token()
    monkeypatch.setenv("SIMPLEJWT_JWT_SECRET", "weak")
    get_settings.cache_clear()

    assert shortcuts.validate(token, secret) is True
    assert shortcuts.get_payload(token, secret) == {"uid": 1}
    assert shortcuts.validate_expiration(token, secret) is False

    with pytest.raises(ValueError):
        shortcuts.custom_payload({"uid": 1}, secret)
