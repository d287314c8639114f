"""create leaderboard_document table

Revision ID: 5c2e7a91d0b4
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5c2e7a91d0b4'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases that were bootstrapped with `flask leaderboard-reset` already have it
    if 'leaderboard_document' in set(insp.get_table_names()):
        return

    op.create_table(
        'leaderboard_document',
        sa.Column('id', sa.String(length=64), primary_key=True),
        sa.Column('content', sa.JSON(), nullable=False),
        sa.Column('last_updated', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade():
    op.drop_table('leaderboard_document')
