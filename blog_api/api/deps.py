# blog_api/api/deps.py
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from blog_api.core.config import settings
from blog_api.core.tokens import TokenCodec, build_token_codec
from blog_api.crud.auth_record import SqlAuthenticationRecordStore
from blog_api.crud.user import SqlUserStore
from blog_api.db.session import get_db
from blog_api.schemas.user import ResolvedIdentity
from blog_api.services.auth import AuthService
from blog_api.services.gate import AuthContext, GateRequest, RequestGate, require_identity
from blog_api.services.session import SessionIssuer


@lru_cache
def get_token_codec() -> TokenCodec:
    return build_token_codec()


def get_session_issuer(
    db: Session = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
) -> SessionIssuer:
    return SessionIssuer(
        SqlAuthenticationRecordStore(db),
        codec,
        record_ttl=timedelta(days=settings.AUTH_RECORD_EXPIRE_DAYS),
    )


def get_auth_service(
    db: Session = Depends(get_db),
    issuer: SessionIssuer = Depends(get_session_issuer),
) -> AuthService:
    return AuthService(SqlUserStore(db), issuer)


def get_request_gate(
    db: Session = Depends(get_db),
    codec: TokenCodec = Depends(get_token_codec),
) -> RequestGate:
    return RequestGate(
        codec,
        SqlAuthenticationRecordStore(db),
        SqlUserStore(db),
        bypass_paths=settings.AUTH_BYPASS_PATHS,
        revalidate_interval=timedelta(minutes=settings.REVALIDATE_INTERVAL_MINUTES),
    )


# ----------------------------------------------------------------------
# Executado uma vez por requisição em todo o api_router; handlers que
# declaram a mesma dependência recebem o contexto já resolvido (cache).
# ----------------------------------------------------------------------
def authorize_request(
    request: Request,
    authorization: str | None = Header(None, alias="Authorization"),
    gate: RequestGate = Depends(get_request_gate),
) -> AuthContext:
    return gate.authorize(
        GateRequest(
            path=request.url.path,
            cookie_token=request.cookies.get(settings.ACCESS_TOKEN_COOKIE),
            authorization=authorization,
        )
    )


def get_current_user(ctx: AuthContext = Depends(authorize_request)) -> ResolvedIdentity:
    return require_identity(ctx)
