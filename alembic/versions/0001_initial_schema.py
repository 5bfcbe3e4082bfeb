"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-18 10:00:00

"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("username", sa.String(), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(), nullable=False),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_users_id", "users", ["id"], unique=True)

    op.create_table(
        "cards",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("category", sa.String(), nullable=False),
        sa.Column("color", sa.String(), nullable=False),
        sa.Column("question", sa.Text(), nullable=False),
        sa.Column("option_a", sa.Text(), nullable=True),
        sa.Column("option_b", sa.Text(), nullable=True),
        sa.Column("option_c", sa.Text(), nullable=True),
        sa.Column("correct_option", sa.String(1), nullable=True),
        sa.Column("punchline", sa.Text(), nullable=True),
        sa.Column("card_type", sa.String(), nullable=False),
        sa.Column("hidden", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("weight", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_cards_id", "cards", ["id"])
    op.create_index("ix_cards_category", "cards", ["category"])

    op.create_table(
        "game_sessions",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("device_id", sa.String(), nullable=False),
        sa.Column("started_at", sa.DateTime(), nullable=True),
        sa.Column("ended_at", sa.DateTime(), nullable=True),
        sa.Column("cards_played", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("feedback_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("duration_ms", sa.Integer(), nullable=True),
    )
    op.create_index("ix_game_sessions_id", "game_sessions", ["id"])
    op.create_index("ix_game_sessions_device_id", "game_sessions", ["device_id"])

    op.create_table(
        "quiz_answers",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("session_id", sa.String(), nullable=False),
        sa.Column("card_id", sa.String(), nullable=False),
        sa.Column("device_id", sa.String(), nullable=False),
        sa.Column("selected_option", sa.String(1), nullable=True),
        sa.Column("correct", sa.Boolean(), nullable=False),
        sa.Column("time_ms", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_quiz_answers_id", "quiz_answers", ["id"])
    op.create_index("ix_quiz_answers_session_id", "quiz_answers", ["session_id"])
    op.create_index("ix_quiz_answers_card_id", "quiz_answers", ["card_id"])

    op.create_table(
        "feedback",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("card_id", sa.String(), nullable=False),
        sa.Column("device_id", sa.String(), nullable=False),
        sa.Column("session_id", sa.String(), nullable=True),
        sa.Column("review", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("top", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("easy", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("hard", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("fun", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("boring", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(), nullable=True),
    )
    op.create_index("ix_feedback_id", "feedback", ["id"])
    op.create_index("ix_feedback_card_id", "feedback", ["card_id"])
    op.create_index("ix_feedback_device_id", "feedback", ["device_id"])
    op.create_index("ix_feedback_session_id", "feedback", ["session_id"])


def downgrade() -> None:
    op.drop_table("feedback")
    op.drop_table("quiz_answers")
    op.drop_table("game_sessions")
    op.drop_table("cards")
    op.drop_table("users")
