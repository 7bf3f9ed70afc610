# blog_api/api/v1/auth.py
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from blog_api.api.deps import get_auth_service
from blog_api.core.config import settings
from blog_api.db.session import get_db
from blog_api.schemas.user import AuthResult, SigninIn, SignupIn
from blog_api.services.auth import AuthService

router = APIRouter()


def _set_token_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.ACCESS_TOKEN_COOKIE,
        value=token,
        httponly=True,
        secure=settings.COOKIE_SECURE,
        samesite="lax",
        max_age=settings.ACCESS_TOKEN_EXPIRE_DAYS * 24 * 3600,
        path="/",
    )


@router.post("/signin", response_model=AuthResult)
def signin(
    body: SigninIn,
    response: Response,
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    result = service.signin(body.email, body.password)
    db.commit()
    _set_token_cookie(response, result.access_token)
    return result


@router.post("/signup", response_model=AuthResult, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupIn,
    response: Response,
    db: Session = Depends(get_db),
    service: AuthService = Depends(get_auth_service),
):
    # usuário + perfil + sessão na mesma transação
    result = service.signup(email=body.email, username=body.username, password=body.password, name=body.name)
    db.commit()
    _set_token_cookie(response, result.access_token)
    return result


@router.post("/logout")
def logout(response: Response):
    response.delete_cookie(settings.ACCESS_TOKEN_COOKIE, path="/")
    return {"ok": True}
