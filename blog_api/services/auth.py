# blog_api/services/auth.py
from __future__ import annotations

import logging

from blog_api.core.errors import AlreadyExistsError, BadRequestError, ExceptionCode, NotFoundError
from blog_api.core.security_password import check_password, hash_password
from blog_api.schemas.user import AuthResult
from blog_api.services.session import SessionIssuer
from blog_api.services.stores import UserStore

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


class AuthService:
    """Login e cadastro. Não faz commit: o endpoint fecha a transação."""

    def __init__(self, users: UserStore, issuer: SessionIssuer) -> None:
        self.users = users
        self.issuer = issuer

    def signin(self, email: str, password: str) -> AuthResult:
        user = self.users.find_by_email(normalize_email(email))
        if not user:
            raise NotFoundError("E-mail não cadastrado.", field="email")

        check = check_password(password, user.password_hash)
        if not check.ok:
            raise BadRequestError("Senha incorreta.", field="password", code=ExceptionCode.INCORRECT_PASSWORD)
        if check.upgraded_hash:
            self.users.update_password_hash(user.id, check.upgraded_hash)

        session = self.issuer.issue(user.id)
        return AuthResult(user_id=user.id, access_token=session.access_token)

    def signup(self, *, email: str, username: str, password: str, name: str) -> AuthResult:
        email = normalize_email(email)
        exists = self.users.find_conflict(email, username)
        if exists:
            if exists.email == email:
                raise AlreadyExistsError("E-mail já cadastrado.", field="email")
            raise AlreadyExistsError("Username já está em uso.", field="username")

        user_id = self.users.create_with_profile(
            email=email, username=username, password_hash=hash_password(password), name=name
        )
        logger.info("usuário cadastrado user_id=%s", user_id)
        session = self.issuer.issue(user_id)
        return AuthResult(user_id=user_id, access_token=session.access_token)
