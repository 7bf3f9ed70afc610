# blog_api/api/v1/users.py
from fastapi import APIRouter, Depends

from blog_api.api.deps import get_current_user
from blog_api.schemas.user import ResolvedIdentity

router = APIRouter()


@router.get("/me", response_model=ResolvedIdentity)
def read_me(user: ResolvedIdentity = Depends(get_current_user)):
    return user
