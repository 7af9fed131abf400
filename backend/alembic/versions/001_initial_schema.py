"""Initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns() -> list:
    return [
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True, nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.Column('deleted_at', sa.DateTime(timezone=True), nullable=True),
    ]


def upgrade() -> None:
    # Create ENUM types
    op.execute("CREATE TYPE employment_status AS ENUM ('employed', 'unemployed')")
    op.execute("CREATE TYPE marital_status AS ENUM ('single', 'married', 'widowed', 'divorced')")
    op.execute("CREATE TYPE sex AS ENUM ('male', 'female')")
    op.execute("CREATE TYPE relationship_type AS ENUM ('spouse', 'child', 'parent', 'sibling')")

    # Create applicants table
    op.create_table(
        'applicants',
        *_base_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('employment_status', postgresql.ENUM(name='employment_status', create_type=False), nullable=False),
        sa.Column('marital_status', postgresql.ENUM(name='marital_status', create_type=False), nullable=False),
        sa.Column('sex', postgresql.ENUM(name='sex', create_type=False), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
    )
    op.create_index('ix_applicants_deleted_at', 'applicants', ['deleted_at'])

    # Create relationships table (directed edge: B is A's <relationship_type>)
    op.create_table(
        'relationships',
        *_base_columns(),
        sa.Column('applicant_a_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('applicant_b_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('relationship_type', postgresql.ENUM(name='relationship_type', create_type=False), nullable=False),
        sa.ForeignKeyConstraint(['applicant_a_id'], ['applicants.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['applicant_b_id'], ['applicants.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_relationships_applicant_a_id', 'relationships', ['applicant_a_id'])
    op.create_index('ix_relationships_applicant_b_id', 'relationships', ['applicant_b_id'])
    op.create_index('ix_relationships_deleted_at', 'relationships', ['deleted_at'])

    # Create schemes table
    op.create_table(
        'schemes',
        *_base_columns(),
        sa.Column('name', sa.String(length=255), nullable=False),
    )
    op.create_index('ix_schemes_deleted_at', 'schemes', ['deleted_at'])

    # Create benefits table
    op.create_table(
        'benefits',
        *_base_columns(),
        sa.Column('scheme_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('amount', sa.Numeric(precision=15, scale=2), nullable=False),
        sa.ForeignKeyConstraint(['scheme_id'], ['schemes.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_benefits_scheme_id', 'benefits', ['scheme_id'])
    op.create_index('ix_benefits_deleted_at', 'benefits', ['deleted_at'])

    # Create scheme_criteria table
    op.create_table(
        'scheme_criteria',
        *_base_columns(),
        sa.Column('scheme_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('name', sa.String(length=50), nullable=False),
        sa.Column('value', sa.String(length=255), nullable=False),
        sa.ForeignKeyConstraint(['scheme_id'], ['schemes.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_scheme_criteria_scheme_id', 'scheme_criteria', ['scheme_id'])
    op.create_index('ix_scheme_criteria_deleted_at', 'scheme_criteria', ['deleted_at'])

    # Create applications table
    op.create_table(
        'applications',
        *_base_columns(),
        sa.Column('applicant_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.Column('scheme_id', postgresql.UUID(as_uuid=True), nullable=False),
        sa.ForeignKeyConstraint(['applicant_id'], ['applicants.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['scheme_id'], ['schemes.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_applications_applicant_id', 'applications', ['applicant_id'])
    op.create_index('ix_applications_scheme_id', 'applications', ['scheme_id'])
    op.create_index('ix_applications_deleted_at', 'applications', ['deleted_at'])


def downgrade() -> None:
    # Drop tables in reverse order (respecting foreign key constraints)
    op.drop_index('ix_applications_deleted_at', table_name='applications')
    op.drop_index('ix_applications_scheme_id', table_name='applications')
    op.drop_index('ix_applications_applicant_id', table_name='applications')
    op.drop_table('applications')

    op.drop_index('ix_scheme_criteria_deleted_at', table_name='scheme_criteria')
    op.drop_index('ix_scheme_criteria_scheme_id', table_name='scheme_criteria')
    op.drop_table('scheme_criteria')

    op.drop_index('ix_benefits_deleted_at', table_name='benefits')
    op.drop_index('ix_benefits_scheme_id', table_name='benefits')
    op.drop_table('benefits')

    op.drop_index('ix_schemes_deleted_at', table_name='schemes')
    op.drop_table('schemes')

    op.drop_index('ix_relationships_deleted_at', table_name='relationships')
    op.drop_index('ix_relationships_applicant_b_id', table_name='relationships')
    op.drop_index('ix_relationships_applicant_a_id', table_name='relationships')
    op.drop_table('relationships')

    op.drop_index('ix_applicants_deleted_at', table_name='applicants')
    op.drop_table('applicants')

    # Drop ENUM types
    op.execute("DROP TYPE IF EXISTS relationship_type")
    op.execute("DROP TYPE IF EXISTS sex")
    op.execute("DROP TYPE IF EXISTS marital_status")
    op.execute("DROP TYPE IF EXISTS employment_status")
