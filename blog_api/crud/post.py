# blog_api/crud/post.py
from datetime import datetime
from typing import Any, List, Optional, Sequence

from sqlalchemy import func, select
from sqlalchemy.orm import Session, selectinload

from blog_api.crud.base import CRUDBase, CursorPage
from blog_api.models.post import Post, PostLike
from blog_api.models.user import User

# autor + perfil + tags: tudo que a serialização de posts precisa
POST_LOAD_OPTIONS = (
    selectinload(Post.user).selectinload(User.profile),
    selectinload(Post.tags),
)


class CRUDPost(CRUDBase[Post]):
    def get_detail(self, db: Session, post_id: int) -> Optional[Post]:
        return db.execute(
            select(Post).where(Post.id == post_id).options(*POST_LOAD_OPTIONS)
        ).scalar_one_or_none()

    def public_filter(self, start: Optional[datetime] = None, end: Optional[datetime] = None) -> List[Any]:
        where: List[Any] = [Post.is_public.is_(True)]
        if start is not None:
            where.append(Post.created_at >= start)
        if end is not None:
            where.append(Post.created_at <= end)
        return where

    def list_public(
        self,
        db: Session,
        *,
        cursor: Optional[int],
        limit: int,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> CursorPage[Post]:
        return self.cursor_page(
            db, where=self.public_filter(start, end), cursor=cursor, limit=limit, options=POST_LOAD_OPTIONS
        )

    def like_counts(self, db: Session, post_ids: Sequence[int]) -> dict[int, int]:
        if not post_ids:
            return {}
        rows = db.execute(
            select(PostLike.post_id, func.count(PostLike.id))
            .where(PostLike.post_id.in_(post_ids))
            .group_by(PostLike.post_id)
        ).all()
        return {post_id: count for post_id, count in rows}


post_crud = CRUDPost(Post)
