# blog_api/crud/tag.py
import re
from typing import Iterable, List

from sqlalchemy import select
from sqlalchemy.orm import Session

from blog_api.models.tag import Tag

_UNSAFE = re.compile(r"[^\w .\-]", re.UNICODE)


def escape_for_url(text: str) -> str:
    """Normaliza o nome da tag para uso em URL (``"Fast API!"`` -> ``"Fast-API"``)."""
    cleaned = _UNSAFE.sub("", text).strip()
    cleaned = re.sub(r"\s+", "-", cleaned)
    cleaned = re.sub(r"-{2,}", "-", cleaned)
    return cleaned.rstrip(".")


def get_or_create_tags(db: Session, names: Iterable[str]) -> List[Tag]:
    tags: List[Tag] = []
    seen = set()
    for raw in names:
        name = escape_for_url(raw)
        if not name or name in seen:
            continue
        seen.add(name)
        tag = db.execute(select(Tag).where(Tag.name == name)).scalar_one_or_none()
        if not tag:
            tag = Tag(name=name)
            db.add(tag)
            db.flush()
        tags.append(tag)
    return tags
