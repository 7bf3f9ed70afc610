# blog_api/core/logging.py
import logging
import sys

from blog_api.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# bibliotecas muito verbosas em DEBUG
_NOISY_LOGGERS = ("sqlalchemy.engine", "passlib", "multipart")


def setup_logging(level: str | None = None) -> None:
    """Configura o logging da aplicação (stdout, um único handler)."""
    level_name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
        force=True,
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
