"""Database tables / schema"""

from typing import Optional

from sqlalchemy import Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class DBGame(Base):
    __tablename__ = "games"
    id: Mapped[str] = mapped_column(primary_key=True)
    name: Mapped[str]
    # Descriptive snapshot, written once at creation
    description: Mapped[Optional[str]] = mapped_column(Text)
    year_published: Mapped[Optional[int]]
    min_players: Mapped[Optional[int]]
    max_players: Mapped[Optional[int]]
    play_time: Mapped[Optional[int]]
    min_age: Mapped[Optional[int]]
    thumbnail: Mapped[Optional[str]]
    image: Mapped[Optional[str]]
    # Editable after creation
    rating: Mapped[float] = mapped_column(default=0.0)
    notes: Mapped[str] = mapped_column(Text, default="")
