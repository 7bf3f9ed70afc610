# blog_api/crud/auth_record.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from blog_api.models.authentication import UserAuthentication
from blog_api.services.stores import AuthRecord


def as_utc(value: datetime) -> datetime:
    # sqlite devolve datetimes sem tzinfo; gravamos sempre em UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_record(row: UserAuthentication) -> AuthRecord:
    return AuthRecord(
        id=row.id,
        user_id=row.user_id,
        created_at=as_utc(row.created_at),
        last_validated_at=as_utc(row.last_validated_at),
        expires_at=as_utc(row.expires_at),
    )


class SqlAuthenticationRecordStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, user_id: int, created_at: datetime, expires_at: datetime) -> AuthRecord:
        row = UserAuthentication(
            user_id=user_id,
            created_at=created_at,
            last_validated_at=created_at,
            expires_at=expires_at,
        )
        self.db.add(row)
        self.db.flush()
        return _to_record(row)

    def find_by_id(self, auth_id: int) -> Optional[AuthRecord]:
        row = self.db.get(UserAuthentication, auth_id)
        return _to_record(row) if row else None

    def touch(self, auth_id: int, now: datetime) -> None:
        # condicional: requisições concorrentes nunca fazem o timestamp voltar
        self.db.execute(
            update(UserAuthentication)
            .where(UserAuthentication.id == auth_id, UserAuthentication.last_validated_at < now)
            .values(last_validated_at=now)
            .execution_options(synchronize_session=False)
        )
        self.db.commit()
