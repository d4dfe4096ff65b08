"""initial occasion schema

Revision ID: 3a1f0c2d9b7e
Revises:
Create Date: 2026-10-19 10:12:41.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3a1f0c2d9b7e'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'occasions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'people',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('occasion_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),

        sa.ForeignKeyConstraint(['occasion_id'], ['occasions.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_people_occasion_id', 'people', ['occasion_id'])

    op.create_table(
        'subgroups',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('occasion_id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),

        sa.ForeignKeyConstraint(['occasion_id'], ['occasions.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_subgroups_occasion_id', 'subgroups', ['occasion_id'])

    op.create_table(
        'subgroup_members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('subgroup_id', sa.Integer(), nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=False),

        sa.ForeignKeyConstraint(['subgroup_id'], ['subgroups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['person_id'], ['people.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('subgroup_id', 'person_id', name='uq_subgroup_member'),
    )

    op.create_table(
        'expenses',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('occasion_id', sa.Integer(), nullable=False),
        sa.Column('payer_person_id', sa.Integer(), nullable=True),
        sa.Column('payer_subgroup_id', sa.Integer(), nullable=True),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('description', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False, server_default='general'),
        sa.Column('note', sa.String(), nullable=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),

        sa.ForeignKeyConstraint(['occasion_id'], ['occasions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['payer_person_id'], ['people.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['payer_subgroup_id'], ['subgroups.id'], ondelete='CASCADE'),
        sa.CheckConstraint('amount > 0', name='ck_expense_amount_positive'),
        sa.CheckConstraint(
            '(payer_person_id IS NULL) <> (payer_subgroup_id IS NULL)',
            name='ck_expense_single_payer',
        ),
    )
    op.create_index('ix_expenses_occasion_id', 'expenses', ['occasion_id'])

    op.create_table(
        'expense_splits',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('expense_id', sa.Integer(), nullable=False),
        sa.Column('person_id', sa.Integer(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),

        sa.ForeignKeyConstraint(['expense_id'], ['expenses.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['person_id'], ['people.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_expense_splits_expense_id', 'expense_splits', ['expense_id'])
    op.create_index('ix_expense_splits_person_id', 'expense_splits', ['person_id'])

    op.create_table(
        'settlements',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('occasion_id', sa.Integer(), nullable=False),
        sa.Column('from_person_id', sa.Integer(), nullable=True),
        sa.Column('from_subgroup_id', sa.Integer(), nullable=True),
        sa.Column('to_person_id', sa.Integer(), nullable=True),
        sa.Column('to_subgroup_id', sa.Integer(), nullable=True),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),

        sa.ForeignKeyConstraint(['occasion_id'], ['occasions.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['from_person_id'], ['people.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['from_subgroup_id'], ['subgroups.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['to_person_id'], ['people.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['to_subgroup_id'], ['subgroups.id'], ondelete='CASCADE'),
        sa.CheckConstraint('amount > 0', name='ck_settlement_amount_positive'),
    )
    op.create_index('ix_settlements_occasion_id', 'settlements', ['occasion_id'])


def downgrade() -> None:
    op.drop_table('settlements')
    op.drop_table('expense_splits')
    op.drop_table('expenses')
    op.drop_table('subgroup_members')
    op.drop_table('subgroups')
    op.drop_table('people')
    op.drop_table('occasions')
