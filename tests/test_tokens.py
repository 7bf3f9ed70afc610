import string
from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from blog_api.core.tokens import (
    ExpiredTokenError,
    InvalidSignatureError,
    MalformedTokenError,
    TokenCodec,
    TokenError,
)

SECRET = "unit-test-secret"
NOW = datetime(2026, 3, 1, 9, 30, tzinfo=timezone.utc)
B64URL = string.ascii_letters + string.digits + "-_"


@pytest.fixture
def codec():
    return TokenCodec(SECRET)


def _tamper_payload(token: str) -> str:
    header, payload, signature = token.split(".")
    idx = len(payload) // 2
    swapped = "A" if payload[idx] != "A" else "B"
    return ".".join([header, payload[:idx] + swapped + payload[idx + 1:], signature])


def test_sign_then_decode_returns_claims(codec):
    token = codec.sign(auth_id=3, user_id=9, issued_at=NOW)
    claims = codec.decode(token)

    assert claims.auth_id == 3
    assert claims.user_id == 9
    assert claims.issued_at == NOW.replace(microsecond=0)
    assert claims.expires_at == NOW + timedelta(days=7)


def test_payload_carries_access_type(codec):
    token = codec.sign(auth_id=1, user_id=2, issued_at=NOW)
    payload = jwt.get_unverified_claims(token)
    assert payload["type"] == "access"
    assert payload["authId"] == 1
    assert payload["userId"] == 2


def test_tampered_payload_is_rejected(codec):
    token = codec.sign(auth_id=3, user_id=9, issued_at=NOW)
    with pytest.raises(InvalidSignatureError):
        codec.decode(_tamper_payload(token))


def test_last_signature_character_cannot_be_swapped(codec):
    token = codec.sign(auth_id=3, user_id=9, issued_at=NOW)
    for char in B64URL.replace(token[-1], ""):
        with pytest.raises(InvalidSignatureError):
            codec.decode(token[:-1] + char)


def test_every_single_character_change_is_rejected(codec):
    token = codec.sign(auth_id=3, user_id=9, issued_at=NOW)
    accepted = []
    for i, original in enumerate(token):
        if original == ".":
            continue
        for char in B64URL.replace(original, ""):
            try:
                codec.decode(token[:i] + char + token[i + 1:])
            except TokenError:
                continue
            accepted.append((i, char))
    assert accepted == []


def test_wrong_secret_is_rejected(codec):
    token = TokenCodec("another-secret").sign(auth_id=3, user_id=9, issued_at=NOW)
    with pytest.raises(InvalidSignatureError):
        codec.decode(token)


@pytest.mark.parametrize("garbage", ["", "abc", "a.b", "not.a.token"])
def test_garbage_is_malformed(codec, garbage):
    with pytest.raises(TokenError):
        codec.decode(garbage)


def test_missing_auth_id_is_malformed(codec):
    token = jwt.encode({"type": "access", "userId": 1, "exp": 4102444800}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        codec.decode(token)


def test_wrong_type_is_malformed(codec):
    token = jwt.encode({"type": "refresh", "authId": 1, "userId": 1, "exp": 4102444800}, SECRET, algorithm="HS256")
    with pytest.raises(MalformedTokenError):
        codec.decode(token)


def test_decode_ignores_expiry_but_verify_does_not(codec):
    token = codec.sign(auth_id=1, user_id=1, issued_at=NOW - timedelta(days=8))

    claims = codec.decode(token)
    assert claims.is_expired(NOW)

    with pytest.raises(ExpiredTokenError):
        codec.verify(token, now=NOW)


def test_expiry_boundary_is_inclusive(codec):
    token = codec.sign(auth_id=1, user_id=1, issued_at=NOW - timedelta(days=1), expires_at=NOW)
    with pytest.raises(ExpiredTokenError):
        codec.verify(token, now=NOW)
    assert codec.verify(token, now=NOW - timedelta(seconds=1)).auth_id == 1
