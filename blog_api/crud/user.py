# blog_api/crud/user.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session, selectinload

from blog_api.models.user import User, UserProfile
from blog_api.schemas.user import ResolvedIdentity
from blog_api.services.stores import UserCredentials


def _credentials(user: User) -> UserCredentials:
    return UserCredentials(id=user.id, email=user.email, username=user.username, password_hash=user.password_hash)


class SqlUserStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_email(self, email: str) -> Optional[UserCredentials]:
        user = self.db.execute(select(User).where(User.email == email)).scalar_one_or_none()
        return _credentials(user) if user else None

    def find_conflict(self, email: str, username: str) -> Optional[UserCredentials]:
        user = self.db.scalars(
            select(User).where(or_(User.email == email, User.username == username)).order_by(User.id).limit(1)
        ).first()
        return _credentials(user) if user else None

    def create_with_profile(self, *, email: str, username: str, password_hash: str, name: str) -> int:
        user = User(email=email, username=username, password_hash=password_hash)
        user.profile = UserProfile(name=name)
        self.db.add(user)
        self.db.flush()
        return user.id

    def update_password_hash(self, user_id: int, password_hash: str) -> None:
        user = self.db.get(User, user_id)
        if user:
            user.password_hash = password_hash
            self.db.flush()

    def get_identity(self, user_id: int) -> Optional[ResolvedIdentity]:
        user = self.db.execute(
            select(User)
            .where(User.id == user_id)
            .options(selectinload(User.profile).selectinload(UserProfile.tech_stacks))
        ).scalar_one_or_none()
        if not user:
            return None
        return ResolvedIdentity.model_validate(user)
