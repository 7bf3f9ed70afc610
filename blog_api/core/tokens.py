# blog_api/core/tokens.py
"""Codec do access token (JWT assinado com SECRET_KEY).

O token carrega ``{type, authId, userId, iat, exp}``. ``decode`` valida apenas
assinatura e estrutura; a expiração é verificada à parte para que o gate
consiga distinguir token expirado de token inválido.
"""
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import jwt, jws
from jose.exceptions import JWSError
from jose.utils import base64url_decode, base64url_encode

from blog_api.core.config import settings

TOKEN_TYPE = "access"


class TokenError(Exception):
    pass


class InvalidSignatureError(TokenError):
    pass


class MalformedTokenError(TokenError):
    pass


class ExpiredTokenError(TokenError):
    pass


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _from_ts(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class AccessClaims:
    auth_id: int
    user_id: int
    issued_at: Optional[datetime]
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at <= now


class TokenCodec:
    def __init__(self, secret_key: str, algorithm: str = "HS256", ttl: timedelta = timedelta(days=7)) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.ttl = ttl

    def sign(
        self,
        *,
        auth_id: int,
        user_id: int,
        issued_at: Optional[datetime] = None,
        expires_at: Optional[datetime] = None,
    ) -> str:
        issued_at = issued_at or _now()
        expires_at = expires_at or issued_at + self.ttl
        payload: Dict[str, Any] = {
            "type": TOKEN_TYPE,
            "authId": auth_id,
            "userId": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> AccessClaims:
        """Verifica assinatura e claims obrigatórias, sem olhar a expiração."""
        # estrutura primeiro: o jose reporta falha de assinatura como JWSError genérico
        try:
            jws.get_unverified_header(token)
        except JWSError as exc:
            raise MalformedTokenError(str(exc)) from exc
        try:
            raw = jws.verify(token, self.secret_key, algorithms=[self.algorithm])
        except JWSError as exc:
            raise InvalidSignatureError(str(exc)) from exc
        # base64url do jose ignora os bits de sobra do último caractere;
        # só a codificação canônica da assinatura é aceita
        segment = token.rsplit(".", 1)[1].encode()
        if base64url_encode(base64url_decode(segment)) != segment:
            raise InvalidSignatureError("assinatura fora da codificação canônica")

        try:
            payload = json.loads(raw)
        except ValueError as exc:
            raise MalformedTokenError("payload não é JSON válido") from exc
        if not isinstance(payload, dict):
            raise MalformedTokenError("payload não é um objeto")
        if payload.get("type") != TOKEN_TYPE:
            raise MalformedTokenError("tipo de token inesperado")

        auth_id = payload.get("authId")
        user_id = payload.get("userId")
        exp = payload.get("exp")
        iat = payload.get("iat")
        if not _is_int(auth_id) or auth_id <= 0:
            raise MalformedTokenError("claim authId ausente")
        if not _is_int(user_id):
            raise MalformedTokenError("claim userId ausente")
        if not isinstance(exp, (int, float)) or isinstance(exp, bool):
            raise MalformedTokenError("claim exp ausente")
        if iat is not None and (not isinstance(iat, (int, float)) or isinstance(iat, bool)):
            raise MalformedTokenError("claim iat inválida")

        return AccessClaims(
            auth_id=auth_id,
            user_id=user_id,
            issued_at=_from_ts(iat) if iat is not None else None,
            expires_at=_from_ts(exp),
        )

    def verify(self, token: str, now: Optional[datetime] = None) -> AccessClaims:
        claims = self.decode(token)
        if claims.is_expired(now or _now()):
            raise ExpiredTokenError("token expirado")
        return claims


def build_token_codec() -> TokenCodec:
    return TokenCodec(
        settings.SECRET_KEY,
        algorithm=settings.ALGORITHM,
        ttl=timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS),
    )
