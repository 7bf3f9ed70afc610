# blog_api/main.py
import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request

from blog_api.api.v1.router import api_router
from blog_api.core.config import settings
from blog_api.core.errors import AppError, ExceptionCode
from blog_api.core.logging import setup_logging
from blog_api.db.bootstrap import run_migrations

setup_logging()
logger = logging.getLogger(__name__)

api = FastAPI(
    title="Blog API",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    swagger_ui_parameters={"displayRequestDuration": True, "persistAuthorization": True},
)

api.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# métricas /metrics (Prometheus)
Instrumentator().instrument(api).expose(api, include_in_schema=False, should_gzip=True)

api.include_router(api_router, prefix=settings.API_PREFIX)


@api.get("/healthz", tags=["health"])
def healthz():
    return {"status": "ok"}


@api.on_event("startup")
def startup():
    if settings.RUN_MIGRATIONS_ON_STARTUP:
        run_migrations()


@api.exception_handler(AppError)
def handle_app_error(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@api.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    # mantém o 422 do FastAPI, mas no mesmo formato {code, message, field}
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = first.get("loc") or ()
    return JSONResponse(
        status_code=422,
        content={
            "code": ExceptionCode.INVALID,
            "message": first.get("msg", "Requisição inválida."),
            "field": str(loc[-1]) if loc else None,
        },
    )


@api.exception_handler(StarletteHTTPException)
def handle_http_error(request: Request, exc: StarletteHTTPException):
    code = ExceptionCode.NOT_EXIST if exc.status_code == 404 else ExceptionCode.INVALID
    return JSONResponse(
        status_code=exc.status_code,
        content={"code": code, "message": str(exc.detail), "field": None},
        headers=getattr(exc, "headers", None),
    )


@api.exception_handler(IntegrityError)
def handle_integrity_error(request: Request, exc: IntegrityError):
    return JSONResponse(
        status_code=409,
        content={"code": "UNIQUE_VIOLATION", "message": "Registro duplicado.", "field": None},
    )


@api.exception_handler(Exception)
def handle_unexpected(request: Request, exc: Exception):
    logger.exception("erro não tratado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={"code": "INTERNAL_ERROR", "message": "Erro interno.", "field": None},
    )
