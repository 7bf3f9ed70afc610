# blog_api/services/posts.py
from __future__ import annotations

import re
from datetime import datetime, time, timedelta, timezone
from typing import Dict, List, Literal, Optional

from sqlalchemy.orm import Session

from blog_api.core.config import settings
from blog_api.core.errors import BadRequestError, NotFoundError
from blog_api.crud.post import post_crud
from blog_api.crud.tag import get_or_create_tags
from blog_api.models.post import Post
from blog_api.schemas.common import DataId, Page, PageInfo
from blog_api.schemas.post import PostCount, PostCreate, PostOut, TagOut, TrendingOut
from blog_api.schemas.user import ResolvedIdentity, UserSummary

TrendingRange = Literal["1W", "1M", "3M", "6M"]
TRENDING_SIZE = 6

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def clamp_limit(limit: Optional[int]) -> int:
    if not limit or limit < 1:
        return settings.DEFAULT_PAGE_LIMIT
    return min(limit, settings.MAX_PAGE_LIMIT)


def parse_date_range(start_date: Optional[str], end_date: Optional[str]) -> tuple[datetime, datetime]:
    """``YYYY-MM-DD`` -> [início 00:00:00, fim 23:59:59] em UTC."""
    if any(not d or not _DATE_RE.match(d) for d in (start_date, end_date)):
        raise BadRequestError("startDate ou endDate fora do formato yyyy-mm-dd", field="datetime")
    try:
        d1 = datetime.strptime(start_date, "%Y-%m-%d")
        d2 = datetime.strptime(end_date, "%Y-%m-%d")
    except ValueError as exc:
        raise BadRequestError("startDate ou endDate não é uma data válida", field="datetime") from exc
    start = datetime.combine(d1.date(), time.min, tzinfo=timezone.utc)
    end = datetime.combine(d2.date(), time(23, 59, 59), tzinfo=timezone.utc)
    return start, end


def _months_ago(now: datetime, months: int) -> datetime:
    month = now.month - months
    year = now.year
    while month < 1:
        month += 12
        year -= 1
    # dia 31 em mês curto: cai para o último dia válido
    for day in range(now.day, 0, -1):
        try:
            return now.replace(year=year, month=month, day=day)
        except ValueError:
            continue
    return now.replace(year=year, month=month, day=1)


def trending_start(data_type: TrendingRange, now: Optional[datetime] = None) -> datetime:
    now = now or datetime.now(timezone.utc)
    if data_type == "1W":
        start = now - timedelta(days=7)
    else:
        start = _months_ago(now, {"1M": 1, "3M": 3, "6M": 6}[data_type])
    return start.replace(hour=0, minute=0, second=0, microsecond=0)


def serialize(post: Post, like_counts: Dict[int, int]) -> PostOut:
    return PostOut(
        id=post.id,
        title=post.title,
        sub_title=post.sub_title,
        content=post.content,
        description=post.description,
        thumbnail=post.thumbnail,
        created_at=post.created_at,
        updated_at=post.updated_at,
        tags=[TagOut.model_validate(t) for t in post.tags],
        user=UserSummary.model_validate(post.user),
        count=PostCount(post_like=like_counts.get(post.id, 0)),
    )


def _serialize_all(db: Session, posts: List[Post]) -> List[PostOut]:
    counts = post_crud.like_counts(db, [p.id for p in posts])
    return [serialize(p, counts) for p in posts]


def create_post(db: Session, user: ResolvedIdentity, body: PostCreate) -> DataId:
    tags = get_or_create_tags(db, body.tags or [])
    post = post_crud.create(
        db,
        user_id=user.id,
        title=body.title,
        sub_title=body.sub_title,
        content=body.content,
        description=body.description,
        thumbnail=body.thumbnail,
        disabled_comment=True if body.disabled_comment is None else body.disabled_comment,
        is_public=bool(body.is_public),
        publishing_date=body.publishing_date,
    )
    post.tags.extend(tags)
    db.flush()
    return DataId(data_id=post.id)


def get_post(db: Session, post_id: int) -> PostOut:
    post = post_crud.get_detail(db, post_id)
    if not post:
        raise NotFoundError("Post não encontrado.")
    return serialize(post, post_crud.like_counts(db, [post.id]))


def list_posts(
    db: Session,
    *,
    list_type: Optional[str] = None,
    cursor: Optional[int] = None,
    limit: Optional[int] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> Page[PostOut]:
    start = end = None
    if list_type == "past":
        start, end = parse_date_range(start_date, end_date)

    page = post_crud.list_public(db, cursor=cursor, limit=clamp_limit(limit), start=start, end=end)
    return Page[PostOut](
        list=_serialize_all(db, page.items),
        total_count=page.total_count,
        page_info=PageInfo(
            end_cursor=page.end_cursor if page.has_next_page else None,
            has_next_page=page.has_next_page,
        ),
    )


def trending_posts(db: Session, data_type: TrendingRange, now: Optional[datetime] = None) -> TrendingOut:
    page = post_crud.list_public(db, cursor=None, limit=TRENDING_SIZE, start=trending_start(data_type, now))
    return TrendingOut(list=_serialize_all(db, page.items), has_next_page=page.has_next_page)
