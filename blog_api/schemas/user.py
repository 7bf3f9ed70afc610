# blog_api/schemas/user.py
from __future__ import annotations
from typing import List, Optional
from pydantic import EmailStr, Field
from blog_api.schemas.common import CamelModel


class TechStackOut(CamelModel):
    id: int
    name: str


class ProfileOut(CamelModel):
    name: str
    bio: Optional[str] = None
    avatar_url: Optional[str] = None
    available_text: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None


class IdentityProfile(ProfileOut):
    tech_stacks: List[TechStackOut] = Field(default_factory=list)


class ResolvedIdentity(CamelModel):
    """Usuário autenticado entregue aos handlers."""

    id: int
    email: str
    username: str
    profile: Optional[IdentityProfile] = None


class UserSummary(CamelModel):
    id: int
    username: str
    email: str
    profile: Optional[ProfileOut] = None


class SigninIn(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1, max_length=128)


class SignupIn(CamelModel):
    email: EmailStr
    username: str = Field(min_length=2, max_length=40, pattern=r"^[A-Za-z0-9_-]+$")
    password: str = Field(min_length=6, max_length=128)
    name: str = Field(min_length=1, max_length=120)


class AuthResult(CamelModel):
    user_id: int
    access_token: str
