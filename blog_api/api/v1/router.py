# blog_api/api/v1/router.py
from fastapi import APIRouter, Depends

from blog_api.api.deps import authorize_request
from blog_api.api.v1 import auth, drafts, posts, users

# o gate roda na frente de todas as rotas da API
api_router = APIRouter(dependencies=[Depends(authorize_request)])

api_router.include_router(auth.router,   prefix="/auth",   tags=["auth"])
api_router.include_router(users.router,  prefix="/users",  tags=["users"])
api_router.include_router(posts.router,  prefix="/posts",  tags=["posts"])
api_router.include_router(drafts.router, prefix="/drafts", tags=["drafts"])
