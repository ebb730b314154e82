"""Pytest configuration and fixtures."""

from collections.abc import Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from vocab_practice import models
from vocab_practice.config import Settings
from vocab_practice.database import Base, get_db
from vocab_practice.main import create_app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"

# One shared connection so every thread sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DATABASE_URL=TEST_DATABASE_URL, ENVIRONMENT="test", STORAGE_BACKEND="sql")


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
def client(app: FastAPI, db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_category(db_session: Session) -> models.Category:
    """Create the "Animals" category."""
    category = models.Category(id=1, name="Animals")
    db_session.add(category)
    db_session.commit()
    db_session.refresh(category)
    return category


@pytest.fixture
def test_word(db_session: Session, test_category: models.Category) -> models.Word:
    """Create kot/cat in the "Animals" category."""
    word = models.Word(
        id=7, polish="kot", english="cat", category_id=test_category.id, difficulty=1
    )
    db_session.add(word)
    db_session.commit()
    db_session.refresh(word)
    return word


@pytest.fixture
def test_vocabulary(db_session: Session) -> list[models.Word]:
    """Create two categories with words across all difficulty levels."""
    animals = models.Category(name="Animals")
    phrases = models.Category(name="Phrases")
    db_session.add_all([animals, phrases])
    db_session.flush()

    words = [
        models.Word(polish="kot", english="cat", category_id=animals.id, difficulty=1),
        models.Word(polish="pies", english="dog", category_id=animals.id, difficulty=1),
        models.Word(polish="koń", english="horse", category_id=animals.id, difficulty=2),
        models.Word(
            polish="podjąć decyzję",
            english="make a decision",
            category_id=phrases.id,
            difficulty=2,
        ),
        models.Word(
            polish="pogodzić się z (czymś)",
            english="come to terms with",
            category_id=phrases.id,
            difficulty=3,
        ),
    ]
    db_session.add_all(words)
    db_session.commit()
    for word in words:
        db_session.refresh(word)
    return words
