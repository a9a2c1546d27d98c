"""create guests, votes and voting status tables

Revision ID: 3f1c9a2e7b40
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "3f1c9a2e7b40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("username", sa.String(length=80), nullable=False),
        sa.Column("email", sa.String(length=120), nullable=False),
        sa.Column("password_hash", sa.String(length=256), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "guests",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("code", sa.String(length=50), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("registered_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("code"),
    )

    op.create_table(
        "votes",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("voter_id", sa.Integer(), nullable=False),
        sa.Column("first_choice_id", sa.Integer(), nullable=False),
        sa.Column("second_choice_id", sa.Integer(), nullable=False),
        sa.Column("third_choice_id", sa.Integer(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint(
            "first_choice_id != voter_id AND second_choice_id != voter_id "
            "AND third_choice_id != voter_id",
            name="ck_votes_no_self_vote",
        ),
        sa.CheckConstraint(
            "first_choice_id != second_choice_id "
            "AND second_choice_id != third_choice_id "
            "AND third_choice_id != first_choice_id",
            name="ck_votes_distinct_choices",
        ),
        sa.ForeignKeyConstraint(["voter_id"], ["guests.id"]),
        sa.ForeignKeyConstraint(["first_choice_id"], ["guests.id"]),
        sa.ForeignKeyConstraint(["second_choice_id"], ["guests.id"]),
        sa.ForeignKeyConstraint(["third_choice_id"], ["guests.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_votes_voter_id", "votes", ["voter_id"], unique=True)
    op.create_index("ix_votes_submitted_at", "votes", ["submitted_at"], unique=False)

    voting_status = op.create_table(
        "voting_status",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("is_open", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("opened_at", sa.DateTime(), nullable=True),
        sa.Column("closed_at", sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.bulk_insert(voting_status, [{"id": 1, "is_open": False}])


def downgrade():
    op.drop_table("voting_status")
    op.drop_index("ix_votes_submitted_at", table_name="votes")
    op.drop_index("ix_votes_voter_id", table_name="votes")
    op.drop_table("votes")
    op.drop_table("guests")
    op.drop_table("users")
