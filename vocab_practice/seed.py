"""
Seed script to populate the database with the built-in dictionary.

Creates the tables if needed and inserts categories and words. Running it
twice does not duplicate rows. The same data backs the in-memory word
repository (``STORAGE_BACKEND=memory``).

Usage:
    python -m vocab_practice.seed
"""

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session

from vocab_practice.config import configure_logging, get_settings
from vocab_practice.database import Base, get_engine, get_session_factory, initialize_database
from vocab_practice.domain.common.value_objects import CategoryId, WordId
from vocab_practice.domain.practice import Category, Difficulty, Word
from vocab_practice.models import Category as CategoryORM
from vocab_practice.models import Word as WordORM

logger = structlog.get_logger(__name__)


# ========== SEED DATA ==========
# category -> [(polish, english, difficulty)]

SEED_DATA: dict[str, list[tuple[str, str, int]]] = {
    "kolokacje": [
        ("podjąć decyzję", "make a decision", 2),
        ("dojść do wniosku", "reach a conclusion", 2),
        ("mieć opinię / pogląd", "hold an opinion", 2),
        ("poruszyć problem / kwestię", "raise an issue", 2),
        ("wziąć coś pod uwagę", "take something into account", 2),
        ("wyrazić zaniepokojenie", "express concern", 2),
        ("zwrócić uwagę na", "draw attention to", 2),
        ("mieć mieszane uczucia", "have mixed feelings", 2),
        ("dotrzymać terminu", "meet a deadline", 2),
        ("wziąć odpowiedzialność za", "take responsibility for", 2),
        ("przeprowadzić badania", "carry out research", 2),
        ("przewaga konkurencyjna", "competitive advantage", 3),
        ("pracować pod presją", "work under pressure", 2),
        ("budować zaufanie", "build trust", 2),
        ("stracić cierpliwość", "lose patience", 2),
        ("poczucie przynależności", "sense of belonging", 3),
        ("postarać się / włożyć wysiłek", "make an effort", 2),
        ("pogodzić się z (czymś)", "come to terms with", 3),
        ("na dłuższą metę", "in the long run", 2),
        ("do pewnego stopnia", "to some extent", 2),
        ("nie da się zaprzeczyć, że", "there is no denying that", 3),
        ("rzucić światło na / wyjaśnić", "shed light on", 3),
        ("stanowić wyzwanie", "pose a challenge", 3),
    ],
    "A1": [
        ("dom", "house", 1),
        ("rodzina", "family", 1),
        ("woda", "water", 1),
        ("jedzenie", "food", 1),
        ("książka", "book", 1),
        ("szkoła", "school", 1),
        ("przyjaciel", "friend", 1),
        ("miasto", "city", 1),
        ("samochód", "car", 1),
        ("duży", "big", 1),
        ("mały", "small", 1),
        ("szczęśliwy", "happy", 1),
        ("jeść", "(to) eat", 1),
        ("pić", "(to) drink", 1),
        ("czytać", "(to) read", 1),
        ("rozumieć", "(to) understand", 1),
        ("dzisiaj", "today", 1),
        ("jutro", "tomorrow", 1),
        ("zawsze", "always", 1),
        ("pieniądze", "money", 1),
        ("pogoda", "weather", 1),
        ("rok", "year", 1),
    ],
}


def build_seed_vocabulary() -> tuple[list[Category], list[Word]]:
    """
    Build domain entities for the seed data with stable ids.

    Category ids follow ``SEED_DATA`` order; word ids are sequential across
    categories starting at 1.
    """
    categories: list[Category] = []
    words: list[Word] = []
    next_word_id = 1
    for category_index, (category_name, entries) in enumerate(SEED_DATA.items(), start=1):
        category = Category(id=CategoryId(category_index), name=category_name)
        categories.append(category)
        for polish, english, difficulty in entries:
            words.append(
                Word(
                    id=WordId(next_word_id),
                    polish=polish,
                    english=english,
                    category_id=category.id,
                    category_name=category.name,
                    difficulty=Difficulty(difficulty),
                )
            )
            next_word_id += 1
    return categories, words


def seed_database(db: Session) -> dict[str, int]:
    """
    Insert missing categories and words.

    A word is considered present when a word with the same Polish and English
    text already exists in its category.

    Returns:
        Counts of inserted categories and words
    """
    created = {"categories": 0, "words": 0}

    for category_name, entries in SEED_DATA.items():
        category = db.execute(
            select(CategoryORM).where(CategoryORM.name == category_name)
        ).scalar_one_or_none()
        if category is None:
            category = CategoryORM(name=category_name)
            db.add(category)
            db.flush()
            created["categories"] += 1

        existing = {
            (polish, english)
            for polish, english in db.execute(
                select(WordORM.polish, WordORM.english).where(WordORM.category_id == category.id)
            ).all()
        }
        for polish, english, difficulty in entries:
            if (polish, english) in existing:
                continue
            db.add(
                WordORM(
                    polish=polish,
                    english=english,
                    category_id=category.id,
                    difficulty=difficulty,
                )
            )
            created["words"] += 1

    db.commit()
    logger.info("database_seeded", **created)
    return created


def main() -> None:
    settings = get_settings()
    configure_logging(settings.ENVIRONMENT)
    initialize_database(settings)

    Base.metadata.create_all(bind=get_engine())

    session_factory = get_session_factory()
    with session_factory() as db:
        seed_database(db)


if __name__ == "__main__":
    main()
