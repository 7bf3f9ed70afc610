# blog_api/crud/base.py
from dataclasses import dataclass
from typing import Any, Generic, List, Optional, Sequence, Type, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from blog_api.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


@dataclass
class CursorPage(Generic[ModelType]):
    items: List[ModelType]
    total_count: int
    end_cursor: Optional[int]
    has_next_page: bool


class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]): self.model = model

    def create(self, db: Session, **data: Any) -> ModelType:
        obj = self.model(**data)
        db.add(obj); db.flush()
        return obj

    def count(self, db: Session, *where: Any) -> int:
        return db.scalar(select(func.count()).select_from(self.model).where(*where)) or 0

    def cursor_page(
        self,
        db: Session,
        *,
        where: Sequence[Any],
        cursor: Optional[int],
        limit: int,
        options: Sequence[Any] = (),
    ) -> CursorPage[ModelType]:
        """Paginação por id decrescente: ``id < cursor``, ``limit`` linhas.

        ``has_next_page`` conta as linhas restantes abaixo do último id
        devolvido sob o mesmo filtro.
        """
        id_col = self.model.id
        stmt: Select = select(self.model).where(*where).order_by(id_col.desc()).limit(limit)
        if cursor:
            stmt = stmt.where(id_col < cursor)
        if options:
            stmt = stmt.options(*options)
        items = list(db.scalars(stmt).all())

        total_count = self.count(db, *where)
        end_cursor = items[-1].id if items else None
        has_next_page = bool(end_cursor) and self.count(db, *where, id_col < end_cursor) > 0
        return CursorPage(items=items, total_count=total_count, end_cursor=end_cursor, has_next_page=has_next_page)
