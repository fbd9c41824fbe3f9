"""
Initial schema: languages, flashcards, study sessions and word analytics
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# --- Alembic identifiers ---
revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None

SEED_LANGUAGES = [
    {"code": "tr", "name": "Türkçe"},
    {"code": "en", "name": "İngilizce"},
    {"code": "zh-Hans", "name": "Çince (Basitleştirilmiş)"},
]


def upgrade():
    languages = op.create_table(
        "languages",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("code", sa.String(length=16), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
    )
    op.create_index("ix_languages_code", "languages", ["code"], unique=True)

    op.create_table(
        "flashcards",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("words", postgresql.JSONB(astext_type=sa.Text()), nullable=False),
        sa.Column("language_id", sa.Integer(), sa.ForeignKey("languages.id"), nullable=False),
        sa.Column("last_studied_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
    )
    op.create_index("ix_flashcards_language_created", "flashcards", ["language_id", "created_at"])

    op.create_table(
        "study_sessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "flashcard_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("flashcards.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("known_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("unknown_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("skipped_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("ai_feedback", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
    )
    op.create_index("ix_study_sessions_flashcard_id", "study_sessions", ["flashcard_id"])

    op.create_table(
        "word_analytics",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "flashcard_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("flashcards.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("word_key", sa.String(length=255), nullable=False),
        sa.Column("correct_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("wrong_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("ai_mnemonic", sa.Text(), nullable=True),
        sa.Column("difficulty_level", sa.Float(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("timezone('utc', now())")),
        sa.UniqueConstraint("flashcard_id", "word_key", name="uq_word_analytics_flashcard_word_key"),
    )
    op.create_index("ix_word_analytics_flashcard_id", "word_analytics", ["flashcard_id"])

    op.bulk_insert(languages, SEED_LANGUAGES)


def downgrade():
    op.drop_index("ix_word_analytics_flashcard_id", table_name="word_analytics")
    op.drop_table("word_analytics")
    op.drop_index("ix_study_sessions_flashcard_id", table_name="study_sessions")
    op.drop_table("study_sessions")
    op.drop_index("ix_flashcards_language_created", table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index("ix_languages_code", table_name="languages")
    op.drop_table("languages")
