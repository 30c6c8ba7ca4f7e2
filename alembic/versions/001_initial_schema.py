"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create companies table
    op.create_table(
        'companies',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_companies_name', 'companies', ['name'])

    # Create contacts table
    op.create_table(
        'contacts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('full_name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('company_id', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_contacts_email', 'contacts', ['email'])
    op.create_index('ix_contacts_company_id', 'contacts', ['company_id'])
    op.create_index('ix_contacts_company_name', 'contacts', ['company_id', 'full_name'])

    # Create engagements table
    op.create_table(
        'engagements',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('bucket', sa.Enum('LEAD', 'DEAL', 'ACCOUNT', name='engagementbucket'), nullable=False),
        sa.Column('company_id', sa.Integer(), nullable=False),
        sa.Column('primary_contact_id', sa.Integer(), nullable=False),
        sa.Column('product', sa.String(length=255), nullable=True),
        sa.Column('source', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('next_step', sa.Text(), nullable=True),
        sa.Column('follow_up_required', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('last_touch_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('deal_stage', sa.Enum('DISCOVERY', 'DEMO', 'PROPOSAL', 'ON_HOLD', 'CLOSED_WON', 'CLOSED_LOST', name='dealstage'), nullable=True),
        sa.Column('account_status', sa.Enum('ACTIVE', 'FORMER', name='accountstatus'), nullable=True),
        sa.Column('billing_schedule', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ),
        sa.ForeignKeyConstraint(['primary_contact_id'], ['contacts.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_engagements_bucket', 'engagements', ['bucket'])
    op.create_index('ix_engagements_company_id', 'engagements', ['company_id'])
    op.create_index('ix_engagements_primary_contact_id', 'engagements', ['primary_contact_id'])
    op.create_index('ix_engagements_updated_at', 'engagements', ['updated_at'])
    op.create_index('ix_engagements_bucket_stage', 'engagements', ['bucket', 'deal_stage'])

    # Create tasks table
    op.create_table(
        'tasks',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=500), nullable=False),
        sa.Column('status', sa.Enum('OPEN', 'DONE', name='taskstatus'), nullable=False, server_default='OPEN'),
        sa.Column('due_at', sa.DateTime(), nullable=True),
        sa.Column('engagement_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['engagement_id'], ['engagements.id'], ),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('ix_tasks_status', 'tasks', ['status'])
    op.create_index('ix_tasks_due_at', 'tasks', ['due_at'])
    op.create_index('ix_tasks_engagement_id', 'tasks', ['engagement_id'])
    op.create_index('ix_tasks_status_due', 'tasks', ['status', 'due_at'])


def downgrade() -> None:
    op.drop_table('tasks')
    op.drop_table('engagements')
    op.drop_table('contacts')
    op.drop_table('companies')

    # Drop enums
    op.execute('DROP TYPE IF EXISTS taskstatus')
    op.execute('DROP TYPE IF EXISTS accountstatus')
    op.execute('DROP TYPE IF EXISTS dealstage')
    op.execute('DROP TYPE IF EXISTS engagementbucket')
