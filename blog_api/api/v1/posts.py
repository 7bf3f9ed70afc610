# blog_api/api/v1/posts.py
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_current_user
from blog_api.db.session import get_db
from blog_api.schemas.common import DataId, Page
from blog_api.schemas.post import PostCreate, PostOut, TrendingOut
from blog_api.schemas.user import ResolvedIdentity
from blog_api.services import posts as post_service

router = APIRouter()


@router.get("", response_model=Page[PostOut])
def list_posts(
    type: Optional[Literal["past"]] = Query(None),
    cursor: Optional[int] = Query(None, ge=1),
    limit: Optional[int] = Query(None, ge=1),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
):
    return post_service.list_posts(
        db, list_type=type, cursor=cursor, limit=limit, start_date=start_date, end_date=end_date
    )


@router.get("/trending", response_model=TrendingOut)
def simple_trending(
    data_type: Literal["1W", "1M", "3M", "6M"] = Query("1W", alias="dataType"),
    db: Session = Depends(get_db),
):
    return post_service.trending_posts(db, data_type)


@router.get("/{post_id}", response_model=PostOut)
def post_detail(post_id: int, db: Session = Depends(get_db)):
    return post_service.get_post(db, post_id)


@router.post("", response_model=DataId, status_code=status.HTTP_201_CREATED)
def create_post(
    body: PostCreate,
    db: Session = Depends(get_db),
    user: ResolvedIdentity = Depends(get_current_user),
):
    result = post_service.create_post(db, user, body)
    db.commit()
    return result
