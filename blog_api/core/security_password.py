# blog_api/core/security_password.py
from __future__ import annotations

import logging
from typing import NamedTuple, Optional

from passlib.context import CryptContext

logger = logging.getLogger(__name__)

# argon2 para hashes novos; bcrypt só é aceito na verificação e migra no próximo login
pwd_context = CryptContext(
    schemes=["argon2", "bcrypt"],
    deprecated=["bcrypt"],
    argon2__time_cost=2,
    argon2__memory_cost=19456,
    argon2__parallelism=1,
)


class PasswordCheck(NamedTuple):
    ok: bool
    upgraded_hash: Optional[str] = None


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def check_password(plain: str, stored_hash: str) -> PasswordCheck:
    try:
        ok, new_hash = pwd_context.verify_and_update(plain, stored_hash)
    except ValueError:
        logger.warning("hash de senha armazenado em formato desconhecido")
        return PasswordCheck(False)
    return PasswordCheck(ok, new_hash if ok else None)
