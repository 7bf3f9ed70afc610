# blog_api/services/gate.py
"""Gate de autenticação executado na frente de todos os handlers da API.

A decisão é uma sequência fixa de checagens, cada uma interrompendo o fluxo:

1. caminho na allow-list          -> aceita sem resolver identidade
2. sem token (cookie / Bearer)    -> aceita como anônimo
3. assinatura / claims inválidas  -> INVALID_TOKEN
4. ``exp`` do token vencido       -> TOKEN_EXPIRED
5. registro inexistente           -> INVALID_TOKEN
6. registro vencido               -> INVALID_TOKEN
7. usuário inexistente            -> INVALID_TOKEN
8. ``last_validated_at`` antigo   -> touch (no máximo uma escrita por intervalo)
9. aceita com a identidade resolvida

Rotas que exigem login chamam ``require_identity`` sobre o contexto devolvido.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterable, Optional

from blog_api.core.errors import InvalidTokenError, LoginRequiredError, TokenExpiredError
from blog_api.core.tokens import TokenCodec, TokenError
from blog_api.schemas.user import ResolvedIdentity
from blog_api.services.session import Clock, utc_clock
from blog_api.services.stores import AuthenticationRecordStore, UserStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GateRequest:
    path: str
    cookie_token: Optional[str] = None
    authorization: Optional[str] = None


@dataclass(frozen=True)
class AuthContext:
    identity: Optional[ResolvedIdentity] = None
    auth_id: Optional[int] = None
    bypassed: bool = False

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None


ANONYMOUS = AuthContext()
BYPASSED = AuthContext(bypassed=True)


def extract_token(request: GateRequest) -> Optional[str]:
    """Cookie tem precedência; depois ``Authorization: Bearer <token>``."""
    if request.cookie_token:
        return request.cookie_token
    if not request.authorization:
        return None
    parts = request.authorization.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        return None
    return parts[1]


def require_identity(ctx: AuthContext) -> ResolvedIdentity:
    if ctx.identity is None:
        raise LoginRequiredError()
    return ctx.identity


class RequestGate:
    def __init__(
        self,
        codec: TokenCodec,
        records: AuthenticationRecordStore,
        users: UserStore,
        *,
        bypass_paths: Iterable[str] = (),
        revalidate_interval: timedelta = timedelta(minutes=5),
        clock: Clock = utc_clock,
    ) -> None:
        self.codec = codec
        self.records = records
        self.users = users
        self.bypass_paths = frozenset(bypass_paths)
        self.revalidate_interval = revalidate_interval
        self.clock = clock

    def authorize(self, request: GateRequest) -> AuthContext:
        if request.path in self.bypass_paths:
            return BYPASSED

        token = extract_token(request)
        if not token:
            return ANONYMOUS

        try:
            claims = self.codec.decode(token)
        except TokenError as exc:
            logger.info("token rejeitado em %s: %s", request.path, exc)
            raise InvalidTokenError() from exc

        now = self.clock()
        if claims.is_expired(now):
            logger.info("token expirado rejeitado auth_id=%s", claims.auth_id)
            raise TokenExpiredError()

        record = self.records.find_by_id(claims.auth_id)
        if record is None:
            logger.info("token rejeitado, auth_id=%s inexistente", claims.auth_id)
            raise InvalidTokenError()

        if record.expires_at <= now:
            logger.info("token rejeitado, auth_id=%s expirado", record.id)
            raise InvalidTokenError()

        identity = self.users.get_identity(record.user_id)
        if identity is None:
            logger.warning("auth_id=%s aponta para user_id=%s inexistente", record.id, record.user_id)
            raise InvalidTokenError()

        if record.last_validated_at < now - self.revalidate_interval:
            self.records.touch(record.id, now)
            logger.debug("auth_id=%s revalidado", record.id)

        return AuthContext(identity=identity, auth_id=record.id)
