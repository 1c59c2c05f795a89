"""Create users, todolists and todos tables

Revision ID: 3f6c2a9d1b7e
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f6c2a9d1b7e"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("username", sa.Text(), nullable=False),
        sa.Column("password", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("username"),
    )

    # Titles are unique per user; the store maps violations to a duplicate-title result
    op.create_table(
        "todolists",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title", "username", name="todolists_title_username_key"),
    )

    # Deleting a list removes its todos through the cascade
    op.create_table(
        "todos",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("todolist_id", sa.Integer(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("done", sa.Boolean(), server_default=sa.false(), nullable=False),
        sa.Column("username", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(["todolist_id"], ["todolists.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_todos_todolist_username", "todos", ["todolist_id", "username"]
    )


def downgrade():
    op.drop_index("ix_todos_todolist_username", table_name="todos")
    op.drop_table("todos")
    op.drop_table("todolists")
    op.drop_table("users")
