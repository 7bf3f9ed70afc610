# blog_api/crud/draft.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from blog_api.crud.base import CRUDBase, CursorPage
from blog_api.models.draft import Draft


class CRUDDraft(CRUDBase[Draft]):
    def get_owned(self, db: Session, draft_id: int, user_id: int) -> Optional[Draft]:
        return db.execute(
            select(Draft)
            .where(Draft.id == draft_id, Draft.user_id == user_id)
            .options(selectinload(Draft.tags))
        ).scalar_one_or_none()

    def list_owned(self, db: Session, user_id: int, *, cursor: Optional[int], limit: int) -> CursorPage[Draft]:
        return self.cursor_page(
            db, where=[Draft.user_id == user_id], cursor=cursor, limit=limit, options=(selectinload(Draft.tags),)
        )


draft_crud = CRUDDraft(Draft)
