"""create users, delivery types, entries and items

Revision ID: 3f1c9a7e2b10
Revises:
Create Date: 2025-03-02 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c9a7e2b10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('role', sa.String(length=9), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=False)
    op.create_index('ix_users_role', 'users', ['role'], unique=False)

    op.create_table(
        'delivery_types',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('unit_value', sa.DECIMAL(10, 2), nullable=False),
        sa.Column('is_extra', sa.Boolean(), nullable=False, server_default=sa.text('false')),
    )

    op.create_table(
        'delivery_entries',
        sa.Column('id', sa.Uuid(), primary_key=True, nullable=False),
        sa.Column('deliverer_id', sa.Uuid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    )
    op.create_index('ix_delivery_entries_deliverer_id', 'delivery_entries', ['deliverer_id'], unique=False)
    op.create_index('ix_delivery_entries_date', 'delivery_entries', ['date'], unique=False)

    op.create_table(
        'delivery_items',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column('entry_id', sa.Uuid(), sa.ForeignKey('delivery_entries.id', ondelete='CASCADE'), nullable=False),
        sa.Column('type_id', sa.Uuid(), sa.ForeignKey('delivery_types.id'), nullable=False),
        sa.Column('position', sa.Integer(), nullable=False, server_default=sa.text('0')),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('value', sa.DECIMAL(10, 2), nullable=False),
        sa.CheckConstraint('quantity > 0', name='ck_delivery_items_quantity_positive'),
    )
    op.create_index('ix_delivery_items_entry_id', 'delivery_items', ['entry_id'], unique=False)
    op.create_index('ix_delivery_items_type_id', 'delivery_items', ['type_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_delivery_items_type_id', table_name='delivery_items')
    op.drop_index('ix_delivery_items_entry_id', table_name='delivery_items')
    op.drop_table('delivery_items')
    op.drop_index('ix_delivery_entries_date', table_name='delivery_entries')
    op.drop_index('ix_delivery_entries_deliverer_id', table_name='delivery_entries')
    op.drop_table('delivery_entries')
    op.drop_table('delivery_types')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
