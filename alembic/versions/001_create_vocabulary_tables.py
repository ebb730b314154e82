"""Create categories, words and sessions tables.

Revision ID: 001
Revises:
Create Date: 2026-01-12

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create vocabulary and practice session tables."""
    op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_categories")),
        sa.UniqueConstraint("name", name=op.f("uq_categories_name")),
    )
    op.create_index(op.f("ix_categories_id"), "categories", ["id"], unique=False)

    op.create_table(
        "words",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("polish", sa.String(500), nullable=False),
        sa.Column("english", sa.String(500), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("difficulty", sa.Integer(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "difficulty BETWEEN 1 AND 3", name=op.f("ck_words_difficulty_range")
        ),
        sa.ForeignKeyConstraint(
            ["category_id"],
            ["categories.id"],
            name=op.f("fk_words_category_id_categories"),
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_words")),
    )
    op.create_index(op.f("ix_words_id"), "words", ["id"], unique=False)
    op.create_index(op.f("ix_words_category_id"), "words", ["category_id"], unique=False)
    op.create_index(op.f("ix_words_difficulty"), "words", ["difficulty"], unique=False)

    op.create_table(
        "sessions",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("used_word_ids", sa.Text(), server_default="[]", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "last_accessed_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_sessions")),
    )
    op.create_index(
        op.f("ix_sessions_last_accessed_at"), "sessions", ["last_accessed_at"], unique=False
    )


def downgrade() -> None:
    """Drop vocabulary and practice session tables."""
    op.drop_index(op.f("ix_sessions_last_accessed_at"), table_name="sessions")
    op.drop_table("sessions")
    op.drop_index(op.f("ix_words_difficulty"), table_name="words")
    op.drop_index(op.f("ix_words_category_id"), table_name="words")
    op.drop_index(op.f("ix_words_id"), table_name="words")
    op.drop_table("words")
    op.drop_index(op.f("ix_categories_id"), table_name="categories")
    op.drop_table("categories")
