"""create sellers

Revision ID: c41f8e2a6b17
Revises: 7b3e1c2d9a40
Create Date: 2026-10-17 00:00:00.000000
"""
import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = 'c41f8e2a6b17'
down_revision = '7b3e1c2d9a40'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'sellers',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('email', sa.String(length=254), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('registered_at', sa.BigInteger(), nullable=False),
        sa.Column('updated_at', sa.BigInteger(), nullable=True),
        sa.Column('deleted_at', sa.BigInteger(), nullable=True),
        sa.PrimaryKeyConstraint('id', name=op.f('pk_sellers')),
        sa.UniqueConstraint('email', name='uq_sellers_email'),
    )
    with op.batch_alter_table('sellers', schema=None) as batch_op:
        batch_op.create_index(batch_op.f('ix_sellers_deleted_at'), ['deleted_at'], unique=False)


def downgrade():
    with op.batch_alter_table('sellers', schema=None) as batch_op:
        batch_op.drop_index(batch_op.f('ix_sellers_deleted_at'))
    op.drop_table('sellers')
