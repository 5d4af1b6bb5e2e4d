# pylint: skip-file
# ruff: noqa
"""Initial schema - create all tables

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00

Tables created:
- users: Accounts (unique email, unique username)
- games: Catalog records memoized from RAWG (unique rawg_id)
- user_games: Collection entries, UNIQUE(user_id, game_id)
- reviews: One review per user per game, UNIQUE(user_id, game_id)

Enums created:
- game_status: BACKLOG, PLAYING, COMPLETED, DROPPED
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


game_status_enum = postgresql.ENUM(
    "BACKLOG",
    "PLAYING",
    "COMPLETED",
    "DROPPED",
    name="game_status",
    create_type=False,
)


def _timestamps() -> list:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    """Upgrade database schema."""
    op.execute("CREATE TYPE game_status AS ENUM ('BACKLOG', 'PLAYING', 'COMPLETED', 'DROPPED')")

    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True, index=True),
        sa.Column("username", sa.String(20), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.Text(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "games",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("rawg_id", sa.Integer(), nullable=False, unique=True, index=True),
        sa.Column("name", sa.String(512), nullable=False),
        sa.Column("slug", sa.String(512), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("released", sa.Date(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=True),
        sa.Column("metacritic", sa.Integer(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("genres", postgresql.JSONB(), nullable=False),
        sa.Column("platforms", postgresql.JSONB(), nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "user_games",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "game_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("games.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("status", game_status_enum, nullable=False, server_default="BACKLOG"),
        sa.Column("playtime", sa.Float(), nullable=True),
        sa.Column(
            "added_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    )
    op.create_unique_constraint(
        "uq_user_games_user_game", "user_games", ["user_id", "game_id"]
    )

    op.create_table(
        "reviews",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "user_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column(
            "game_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("games.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        ),
        sa.Column("rating", sa.Float(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_unique_constraint("uq_reviews_user_game", "reviews", ["user_id", "game_id"])


def downgrade() -> None:
    """Downgrade database schema."""
    # Reverse order (respect foreign keys)
    op.drop_table("reviews")
    op.drop_table("user_games")
    op.drop_table("games")
    op.drop_table("users")

    op.execute("DROP TYPE IF EXISTS game_status")
