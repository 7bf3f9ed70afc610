"""Implementações em memória das stores usadas pelo fluxo de autenticação."""
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from blog_api.schemas.user import IdentityProfile, ResolvedIdentity
from blog_api.services.stores import AuthRecord, UserCredentials


class FakeClock:
    def __init__(self, now: Optional[datetime] = None) -> None:
        self.now = now or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class InMemoryAuthRecordStore:
    def __init__(self) -> None:
        self.rows: Dict[int, AuthRecord] = {}
        self.touch_calls = 0
        self._next_id = 1

    def create(self, user_id: int, created_at: datetime, expires_at: datetime) -> AuthRecord:
        record = AuthRecord(
            id=self._next_id,
            user_id=user_id,
            created_at=created_at,
            last_validated_at=created_at,
            expires_at=expires_at,
        )
        self.rows[record.id] = record
        self._next_id += 1
        return record

    def find_by_id(self, auth_id: int) -> Optional[AuthRecord]:
        return self.rows.get(auth_id)

    def touch(self, auth_id: int, now: datetime) -> None:
        self.touch_calls += 1
        record = self.rows.get(auth_id)
        if record and record.last_validated_at < now:
            self.rows[auth_id] = replace(record, last_validated_at=now)


class InMemoryUserStore:
    def __init__(self) -> None:
        self.users: Dict[int, UserCredentials] = {}
        self.names: Dict[int, str] = {}
        self._next_id = 1

    def find_by_email(self, email: str) -> Optional[UserCredentials]:
        return next((u for u in self.users.values() if u.email == email), None)

    def find_conflict(self, email: str, username: str) -> Optional[UserCredentials]:
        for user_id in sorted(self.users):
            user = self.users[user_id]
            if user.email == email or user.username == username:
                return user
        return None

    def create_with_profile(self, *, email: str, username: str, password_hash: str, name: str) -> int:
        user_id = self._next_id
        self._next_id += 1
        self.users[user_id] = UserCredentials(id=user_id, email=email, username=username, password_hash=password_hash)
        self.names[user_id] = name
        return user_id

    def update_password_hash(self, user_id: int, password_hash: str) -> None:
        self.users[user_id] = replace(self.users[user_id], password_hash=password_hash)

    def get_identity(self, user_id: int) -> Optional[ResolvedIdentity]:
        user = self.users.get(user_id)
        if user is None:
            return None
        return ResolvedIdentity(
            id=user.id,
            email=user.email,
            username=user.username,
            profile=IdentityProfile(name=self.names[user_id]),
        )

    def delete(self, user_id: int) -> None:
        self.users.pop(user_id, None)
