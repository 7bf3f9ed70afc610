# blog_api/schemas/post.py
from __future__ import annotations
from datetime import datetime
from typing import List, Optional
from pydantic import Field
from blog_api.schemas.common import CamelModel
from blog_api.schemas.user import UserSummary


class TagOut(CamelModel):
    id: int
    name: str


class PostCount(CamelModel):
    post_like: int = 0


class PostOut(CamelModel):
    id: int
    title: str
    sub_title: Optional[str] = None
    content: str
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tags: List[TagOut] = Field(default_factory=list)
    user: UserSummary
    count: PostCount = Field(default_factory=PostCount)


class PostCreate(CamelModel):
    title: str = Field(min_length=1, max_length=200)
    sub_title: Optional[str] = Field(default=None, max_length=200)
    content: str
    description: Optional[str] = Field(default=None, max_length=255)
    thumbnail: Optional[str] = None
    tags: Optional[List[str]] = None
    disabled_comment: Optional[bool] = None
    is_public: Optional[bool] = None
    publishing_date: Optional[datetime] = None


class TrendingOut(CamelModel):
    list: List[PostOut]
    has_next_page: bool
