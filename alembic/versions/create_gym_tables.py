"""create gym tables

Revision ID: 3c1f9a7d2b44
Revises:
Create Date: 2026-10-19 10:12:41

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f9a7d2b44'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'members',
        sa.Column('member_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('first_name', sa.String(length=100), nullable=False),
        sa.Column('last_name', sa.String(length=100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('phone_number', sa.String(length=30), nullable=True),
        sa.PrimaryKeyConstraint('member_id'),
    )

    # member_id 는 FK 제약 없이 인덱스만 둠 (회원 삭제 시 참조 정리 안 함)
    op.create_table(
        'memberships',
        sa.Column('membership_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('start_date', sa.DateTime(), nullable=False),
        sa.Column('end_date', sa.DateTime(), nullable=False),
        sa.Column('payment_type', sa.String(length=50), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('membership_id'),
    )
    op.create_index('ix_memberships_member_id', 'memberships', ['member_id'])
    op.create_index('ix_memberships_is_active', 'memberships', ['is_active'])

    op.create_table(
        'chips',
        sa.Column('chip_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('chip_info', sa.String(length=255), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('chip_id'),
    )
    op.create_index('ix_chips_member_id', 'chips', ['member_id'])
    op.create_index('ix_chips_is_active', 'chips', ['is_active'])

    op.create_table(
        'payments',
        sa.Column('payment_id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('member_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(precision=10, scale=2), nullable=False),
        sa.Column('payment_date', sa.DateTime(), nullable=False),
        sa.Column('payment_method', sa.String(length=30), nullable=False),
        sa.PrimaryKeyConstraint('payment_id'),
    )
    op.create_index('ix_payments_member_id', 'payments', ['member_id'])


def downgrade() -> None:
    op.drop_index('ix_payments_member_id', table_name='payments')
    op.drop_table('payments')
    op.drop_index('ix_chips_is_active', table_name='chips')
    op.drop_index('ix_chips_member_id', table_name='chips')
    op.drop_table('chips')
    op.drop_index('ix_memberships_is_active', table_name='memberships')
    op.drop_index('ix_memberships_member_id', table_name='memberships')
    op.drop_table('memberships')
    op.drop_table('members')
