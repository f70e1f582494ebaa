"""Create journal entries table.

Revision ID: 20261018_create_entries
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


revision = "20261018_create_entries"
down_revision = None
branch_labels = None
depends_on = None

NOW_WITH_MILLIS = "(STRFTIME('%Y-%m-%d %H:%M:%f', 'NOW'))"


def upgrade() -> None:
    op.create_table(
        "entries",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column(
            "inserted_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text(NOW_WITH_MILLIS),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(),
            nullable=False,
            server_default=sa.text(NOW_WITH_MILLIS),
        ),
        sa.CheckConstraint("trim(body) <> ''", name="entries_body_not_blank"),
        sqlite_autoincrement=True,
    )
    op.create_index("entries_inserted_at", "entries", ["inserted_at"])
    op.execute(
        f"""
        CREATE TRIGGER entries_updated_at AFTER UPDATE ON entries
        BEGIN
            UPDATE entries SET updated_at = {NOW_WITH_MILLIS}
            WHERE id = old.id;
        END
        """
    )


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS entries_updated_at")
    op.drop_index("entries_inserted_at", table_name="entries")
    op.drop_table("entries")
