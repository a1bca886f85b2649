"""create helpdesk tables

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-19 10:12:31.448210

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the user, ticket, comment and ban tables."""
    op.create_table(
        "UserData",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False, server_default="basic"),
        sa.Column("profile_picture", sa.String(1024), nullable=False, server_default=""),
        sa.Column("level", sa.Integer(), nullable=False, server_default="0"),
        sa.UniqueConstraint("username", name="uq_userdata_username"),
        sa.UniqueConstraint("email", name="uq_userdata_email"),
    )

    op.create_table(
        "TicketData",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("userid", sa.Integer(), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("data", sa.Text(), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="open"),
        sa.Column(
            "date_time",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.UniqueConstraint("title", name="uq_ticketdata_title"),
    )
    op.create_index("ix_TicketData_userid", "TicketData", ["userid"])

    op.create_table(
        "CommentData",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("ticketid", sa.Integer(), nullable=False),
        sa.Column("userid", sa.Integer(), nullable=False),
        sa.Column("data", sa.Text(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes", sa.Integer(), nullable=False, server_default="0"),
        sa.CheckConstraint("likes >= 0", name="ck_comment_likes_non_negative"),
        sa.CheckConstraint("dislikes >= 0", name="ck_comment_dislikes_non_negative"),
    )
    op.create_index("ix_CommentData_ticketid", "CommentData", ["ticketid"])
    op.create_index("ix_CommentData_userid", "CommentData", ["userid"])

    op.create_table(
        "BanList",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("reason", sa.Text(), nullable=True),
    )


def downgrade() -> None:
    """Drop the helpdesk tables."""
    op.drop_table("BanList")
    op.drop_index("ix_CommentData_userid", table_name="CommentData")
    op.drop_index("ix_CommentData_ticketid", table_name="CommentData")
    op.drop_table("CommentData")
    op.drop_index("ix_TicketData_userid", table_name="TicketData")
    op.drop_table("TicketData")
    op.drop_table("UserData")
