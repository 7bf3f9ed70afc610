from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String
from blog_api.db.base import Base


class Tag(Base):
    __tablename__ = "tags"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, index=True)
