# blog_api/services/session.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from blog_api.core.tokens import TokenCodec
from blog_api.services.stores import AuthenticationRecordStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_clock() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class IssuedSession:
    access_token: str
    auth_id: int
    expires_at: datetime


class SessionIssuer:
    """Cria o registro de autenticação e assina o token que o referencia."""

    def __init__(
        self,
        records: AuthenticationRecordStore,
        codec: TokenCodec,
        *,
        record_ttl: timedelta = timedelta(days=7),
        clock: Clock = utc_clock,
    ) -> None:
        self.records = records
        self.codec = codec
        self.record_ttl = record_ttl
        self.clock = clock

    def issue(self, user_id: int) -> IssuedSession:
        now = self.clock()
        record = self.records.create(user_id, now, now + self.record_ttl)
        token = self.codec.sign(auth_id=record.id, user_id=user_id, issued_at=now)
        logger.info("sessão emitida auth_id=%s user_id=%s expires_at=%s", record.id, user_id, record.expires_at.isoformat())
        return IssuedSession(access_token=token, auth_id=record.id, expires_at=record.expires_at)
