"""Create users, companies, job_offers, applications and notifications tables

Revision ID: 20261019_0900
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '20261019_0900'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id_column(name: str = 'id') -> sa.Column:
    return sa.Column(
        name,
        postgresql.UUID(as_uuid=True),
        nullable=False,
        server_default=sa.text("gen_random_uuid()"),
    )


def _created_at() -> sa.Column:
    return sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def upgrade() -> None:
    """
    Ownership chain: applications -> job_offers -> companies -> users (owner).

    uq_applications_job_offer_applicant backs the one-application-per-job-offer
    rule; inserts rely on it instead of a prior existence check.
    """
    op.create_table(
        'users',
        _id_column(),
        sa.Column('role', sa.String(20), nullable=False, server_default='applicant',
                  comment='applicant, company_rep or admin'),
        sa.Column('email', sa.String(255), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'companies',
        _id_column(),
        sa.Column('owner_user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['owner_user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_companies_owner_user_id', 'companies', ['owner_user_id'], unique=True)

    op.create_table(
        'job_offers',
        _id_column(),
        sa.Column('company_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.text('true')),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['company_id'], ['companies.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_job_offers_company_id', 'job_offers', ['company_id'])

    op.create_table(
        'applications',
        _id_column(),
        sa.Column('job_offer_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('applicant_user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='pending',
                  comment='pending, reviewed, interview, accepted, rejected'),
        sa.Column('cover_letter', sa.Text(), nullable=True),
        sa.Column('resume_url', sa.String(500), nullable=True),
        _created_at(),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True,
                  comment='Soft delete; the row keeps its unique (job offer, applicant) slot'),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['job_offer_id'], ['job_offers.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['applicant_user_id'], ['users.id'], ondelete='CASCADE'),
        sa.UniqueConstraint('job_offer_id', 'applicant_user_id', name='uq_applications_job_offer_applicant'),
    )
    op.create_index('ix_applications_job_offer_id', 'applications', ['job_offer_id'])
    op.create_index('ix_applications_applicant_user_id', 'applications', ['applicant_user_id'])
    op.create_index('ix_applications_status', 'applications', ['status'])

    op.create_table(
        'notifications',
        _id_column(),
        sa.Column('recipient_user_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('kind', sa.String(50), nullable=False),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('is_read', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        _created_at(),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['recipient_user_id'], ['users.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_notifications_recipient_user_id', 'notifications', ['recipient_user_id'])


def downgrade() -> None:
    """Drop all tables in reverse dependency order"""
    op.drop_table('notifications')
    op.drop_table('applications')
    op.drop_table('job_offers')
    op.drop_table('companies')
    op.drop_table('users')
