# blog_api/schemas/draft.py
from __future__ import annotations
from datetime import datetime
from typing import List, Optional
from pydantic import Field
from blog_api.schemas.common import CamelModel
from blog_api.schemas.post import TagOut


class DraftOut(CamelModel):
    id: int
    title: str
    sub_title: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None
    thumbnail: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    tags: List[TagOut] = Field(default_factory=list)


class DraftCreate(CamelModel):
    title: str = Field(default="", max_length=200)


class DraftSave(CamelModel):
    draft_id: int
    title: str = Field(default="", max_length=200)
    sub_title: Optional[str] = Field(default=None, max_length=200)
    content: Optional[str] = None
    description: Optional[str] = Field(default=None, max_length=255)
    thumbnail: Optional[str] = None
    tags: Optional[List[str]] = None
