"""dogs catalog

Revision ID: 0001_dogs
Revises:
Create Date: 2026-10-19 09:00:00
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = "0001_dogs"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    bind = op.get_bind()
    metadata = sa.MetaData()

    dogs = sa.Table(
        "dogs",
        metadata,
        sa.Column("name", sa.String(length=255), primary_key=True),
        sa.Column("color", sa.String(length=100), nullable=False, server_default=""),
        sa.Column("tail_length", sa.Integer(), nullable=False),
        sa.Column("weight", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("tail_length >= 0", name="ck_dogs_tail_length_non_negative"),
        sa.CheckConstraint("weight >= 0", name="ck_dogs_weight_non_negative"),
    )

    dogs.create(bind, checkfirst=True)


def downgrade() -> None:
    op.drop_table("dogs")
