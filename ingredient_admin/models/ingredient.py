from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Float, Integer, String

from .base import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Ingredient(Base):
    __tablename__ = "ingredient"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    price = Column(Float, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    def __init__(self, **kwargs):
        # stamped on construction, not on flush
        kwargs.setdefault("created_at", utcnow())
        super().__init__(**kwargs)

    def __repr__(self) -> str:
        return f"<Ingredient id={self.id} name={self.name!r} price={self.price}>"
