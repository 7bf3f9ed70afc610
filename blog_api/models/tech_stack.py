from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Table, Column, String, ForeignKey
from blog_api.db.base import Base

profile_tech_stacks = Table(
    "profile_tech_stacks",
    Base.metadata,
    Column("profile_id", ForeignKey("user_profiles.id", ondelete="CASCADE"), primary_key=True),
    Column("tech_stack_id", ForeignKey("tech_stacks.id", ondelete="CASCADE"), primary_key=True),
)


class TechStack(Base):
    __tablename__ = "tech_stacks"
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(64), unique=True, index=True)
