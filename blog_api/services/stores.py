# blog_api/services/stores.py
"""Contratos estreitos de persistência usados pelo fluxo de autenticação.

As implementações SQLAlchemy ficam em ``blog_api.crud``; os testes usam
implementações em memória.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Protocol

from blog_api.schemas.user import ResolvedIdentity


@dataclass(frozen=True)
class AuthRecord:
    id: int
    user_id: int
    created_at: datetime
    last_validated_at: datetime
    expires_at: datetime


@dataclass(frozen=True)
class UserCredentials:
    id: int
    email: str
    username: str
    password_hash: str


class AuthenticationRecordStore(Protocol):
    def create(self, user_id: int, created_at: datetime, expires_at: datetime) -> AuthRecord:
        """Persiste um novo registro (sem commit: participa da transação do chamador)."""

    def find_by_id(self, auth_id: int) -> Optional[AuthRecord]:
        ...

    def touch(self, auth_id: int, now: datetime) -> None:
        """Avança ``last_validated_at`` para ``now``; nunca o faz retroceder."""


class UserStore(Protocol):
    def find_by_email(self, email: str) -> Optional[UserCredentials]:
        ...

    def find_conflict(self, email: str, username: str) -> Optional[UserCredentials]:
        """Primeiro usuário cujo e-mail ou username coincide."""

    def create_with_profile(self, *, email: str, username: str, password_hash: str, name: str) -> int:
        ...

    def update_password_hash(self, user_id: int, password_hash: str) -> None:
        ...

    def get_identity(self, user_id: int) -> Optional[ResolvedIdentity]:
        ...
