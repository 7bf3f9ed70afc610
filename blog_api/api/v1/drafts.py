# blog_api/api/v1/drafts.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_current_user
from blog_api.db.session import get_db
from blog_api.schemas.common import DataId, Page
from blog_api.schemas.draft import DraftCreate, DraftOut, DraftSave
from blog_api.schemas.user import ResolvedIdentity
from blog_api.services import drafts as draft_service

router = APIRouter()


@router.get("", response_model=Page[DraftOut])
def list_drafts(
    cursor: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    user: ResolvedIdentity = Depends(get_current_user),
):
    return draft_service.list_drafts(db, user, cursor=cursor, limit=limit)


@router.get("/{draft_id}", response_model=DraftOut)
def draft_detail(draft_id: int, db: Session = Depends(get_db), user: ResolvedIdentity = Depends(get_current_user)):
    return draft_service.get_draft(db, user, draft_id)


@router.post("/new", response_model=DataId, status_code=status.HTTP_201_CREATED)
def create_draft(body: DraftCreate, db: Session = Depends(get_db), user: ResolvedIdentity = Depends(get_current_user)):
    result = draft_service.create_draft(db, user, body)
    db.commit()
    return result


@router.post("/save-data", response_model=DataId)
def save_draft(body: DraftSave, db: Session = Depends(get_db), user: ResolvedIdentity = Depends(get_current_user)):
    result = draft_service.save_draft(db, user, body)
    db.commit()
    return result
