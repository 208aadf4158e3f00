"""key/value table holding the persisted session record

Revision ID: 0001_session_store
Revises: 
Create Date: 2025-10-28
"""
from __future__ import annotations
from alembic import op
import sqlalchemy as sa

revision = '0001_session_store'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('kv_store',
        sa.Column('key', sa.String(length=64), primary_key=True),
        sa.Column('value', sa.JSON(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now())
    )


def downgrade():
    op.drop_table('kv_store')
