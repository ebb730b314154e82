"""Database models."""

from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from vocab_practice.database import Base


class Category(Base):
    """Word category, created administratively and referenced by words."""

    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    words: Mapped[list["Word"]] = relationship(back_populates="category")

    def __repr__(self) -> str:
        """String representation of Category."""
        return f"<Category(id={self.id}, name='{self.name}')>"


class Word(Base):
    """Polish/English word pair."""

    __tablename__ = "words"
    __table_args__ = (
        CheckConstraint("difficulty BETWEEN 1 AND 3", name="difficulty_range"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    polish: Mapped[str] = mapped_column(String(500), nullable=False)
    english: Mapped[str] = mapped_column(String(500), nullable=False)
    category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("categories.id"), nullable=False, index=True
    )
    difficulty: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    category: Mapped[Category] = relationship(back_populates="words")

    def __repr__(self) -> str:
        """String representation of Word."""
        return f"<Word(id={self.id}, polish='{self.polish}', english='{self.english}')>"


class PracticeSession(Base):
    """
    Practice session progress keyed by an externally supplied token.

    ``used_word_ids`` is a JSON array of word ids; there is no
    foreign key into ``words``.
    """

    __tablename__ = "sessions"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    used_word_ids: Mapped[str] = mapped_column(
        Text, nullable=False, default="[]", server_default="[]"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    last_accessed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )

    def __repr__(self) -> str:
        """String representation of PracticeSession."""
        return f"<PracticeSession(id='{self.id}', last_accessed_at={self.last_accessed_at})>"
