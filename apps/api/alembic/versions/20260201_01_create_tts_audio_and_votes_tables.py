"""Create tts_audio cache and votes tables"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20260201_01"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "tts_audio",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("provider_id", sa.String(length=64), nullable=False),
        sa.Column("prompt_id", sa.String(length=64), nullable=False),
        sa.Column("model", sa.String(length=255), nullable=False),
        sa.Column("voice", sa.String(length=255), nullable=False),
        sa.Column("format", sa.String(length=16), nullable=False),
        sa.Column("audio_base64", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.UniqueConstraint(
            "provider_id", "prompt_id", "model", "voice", name="uq_tts_audio_cache_key"
        ),
    )
    op.create_index("idx_audio_provider", "tts_audio", ["provider_id"])
    op.create_index("idx_audio_prompt", "tts_audio", ["prompt_id"])

    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("prompt_id", sa.String(length=64), nullable=False),
        sa.Column("winner_provider", sa.String(length=64), nullable=False),
        sa.Column("loser_provider", sa.String(length=64), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_index("idx_votes_winner", "votes", ["winner_provider"])
    op.create_index("idx_votes_prompt", "votes", ["prompt_id"])


def downgrade() -> None:
    op.drop_index("idx_votes_prompt", "votes")
    op.drop_index("idx_votes_winner", "votes")
    op.drop_table("votes")
    op.drop_index("idx_audio_prompt", "tts_audio")
    op.drop_index("idx_audio_provider", "tts_audio")
    op.drop_table("tts_audio")
