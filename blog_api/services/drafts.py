# blog_api/services/drafts.py
from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from blog_api.core.errors import NotFoundError
from blog_api.crud.draft import draft_crud
from blog_api.crud.tag import get_or_create_tags
from blog_api.schemas.common import DataId, Page, PageInfo
from blog_api.schemas.draft import DraftCreate, DraftOut, DraftSave
from blog_api.schemas.user import ResolvedIdentity
from blog_api.services.posts import clamp_limit


def list_drafts(db: Session, user: ResolvedIdentity, *, cursor: Optional[int], limit: Optional[int]) -> Page[DraftOut]:
    page = draft_crud.list_owned(db, user.id, cursor=cursor, limit=clamp_limit(limit))
    return Page[DraftOut](
        list=[DraftOut.model_validate(d) for d in page.items],
        total_count=page.total_count,
        page_info=PageInfo(
            end_cursor=page.end_cursor if page.has_next_page else None,
            has_next_page=page.has_next_page,
        ),
    )


def get_draft(db: Session, user: ResolvedIdentity, draft_id: int) -> DraftOut:
    draft = draft_crud.get_owned(db, draft_id, user.id)
    if not draft:
        raise NotFoundError("Rascunho não encontrado.")
    return DraftOut.model_validate(draft)


def create_draft(db: Session, user: ResolvedIdentity, body: DraftCreate) -> DataId:
    draft = draft_crud.create(db, user_id=user.id, title=body.title)
    return DataId(data_id=draft.id)


def save_draft(db: Session, user: ResolvedIdentity, body: DraftSave) -> DataId:
    draft = draft_crud.get_owned(db, body.draft_id, user.id)
    if not draft:
        raise NotFoundError("Rascunho não encontrado.")

    data = body.model_dump(exclude={"draft_id", "tags"}, exclude_unset=True)
    for field, value in data.items():
        setattr(draft, field, value)
    if body.tags is not None:
        draft.tags = get_or_create_tags(db, body.tags)
    db.flush()
    return DataId(data_id=draft.id)
