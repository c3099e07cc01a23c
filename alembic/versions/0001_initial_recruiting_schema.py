"""Initial recruiting schema

Revision ID: 0001_initial_recruiting_schema
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_recruiting_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns():
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    """
    Create the recruiting tables.

    Unique keys back up the duplicate checks done before writes:
    jobs.role_code, candidate_applications.application_id and
    (candidate_applications.contact_number, role_code).
    """
    op.create_table(
        'jobs',
        *_record_columns(),
        sa.Column('role_code', sa.String(100), nullable=False),
        sa.Column('role_name', sa.String(255), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='active'),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('jd_url', sa.String(1000), nullable=True),
        sa.Column('current_updates', sa.Text(), nullable=True),
        sa.Column('minimum_experience', sa.String(100), nullable=True),
        sa.Column('duration', sa.String(100), nullable=True),
        sa.Column('candidate_monthly_ctc', sa.String(100), nullable=True),
        sa.Column('skills', sa.Text(), nullable=True),
        sa.UniqueConstraint('role_code', name='uq_jobs_role_code'),
    )
    op.create_index('ix_jobs_created_at', 'jobs', ['created_at'])
    op.create_index('ix_jobs_status', 'jobs', ['status'])

    op.create_table(
        'candidate_applications',
        *_record_columns(),
        sa.Column('application_id', sa.String(200), nullable=False),
        sa.Column('role_code', sa.String(100), nullable=True),
        sa.Column('candidate_name', sa.String(255), nullable=False),
        sa.Column('candidate_email', sa.String(255), nullable=True),
        sa.Column('contact_number', sa.String(50), nullable=True),
        sa.Column('experience_years', sa.String(50), nullable=True),
        sa.Column('relevant_experience_years', sa.String(50), nullable=True),
        sa.Column('notice_period', sa.String(100), nullable=True),
        sa.Column('current_ctc', sa.String(100), nullable=True),
        sa.Column('salary_expectation', sa.String(100), nullable=True),
        sa.Column('current_location', sa.String(255), nullable=True),
        sa.Column('resume_url', sa.String(1000), nullable=True),
        sa.Column('job_applied', sa.String(255), nullable=True),
        sa.Column('skills', sa.Text(), nullable=True),
        sa.Column('documents', sa.Text(), nullable=True),
        sa.Column('jd_mapping', sa.String(20), nullable=False, server_default='NOT STARTED'),
        sa.Column('screening_response', sa.Text(), nullable=True),
        sa.UniqueConstraint('application_id', name='uq_candidate_application_id'),
        sa.UniqueConstraint('contact_number', 'role_code', name='uq_candidate_contact_role'),
    )
    op.create_index('ix_candidate_applications_created_at', 'candidate_applications', ['created_at'])
    op.create_index('ix_candidate_applications_role_code', 'candidate_applications', ['role_code'])
    op.create_index('ix_candidate_applications_contact_number', 'candidate_applications', ['contact_number'])
    op.create_index('ix_candidate_applications_jd_mapping', 'candidate_applications', ['jd_mapping'])

    op.create_table(
        'cv_match_results',
        *_record_columns(),
        sa.Column('application_id', sa.String(200), nullable=True),
        sa.Column('role_code', sa.String(100), nullable=True),
        sa.Column('score', sa.String(50), nullable=True),
        sa.Column('extracted_skills', sa.Text(), nullable=True),
        sa.Column('missing_skills', sa.Text(), nullable=True),
        sa.Column('jd_summary', sa.Text(), nullable=True),
        sa.Column('resume_summary', sa.Text(), nullable=True),
    )
    op.create_index('ix_cv_match_results_created_at', 'cv_match_results', ['created_at'])
    op.create_index('ix_cv_match_results_application_id', 'cv_match_results', ['application_id'])

    op.create_table(
        'screening_outcomes',
        *_record_columns(),
        sa.Column('application_id', sa.String(200), nullable=True),
        sa.Column('candidate_name', sa.String(255), nullable=True),
        sa.Column('role_code', sa.String(100), nullable=True),
        sa.Column('job_title', sa.String(255), nullable=True),
        sa.Column('call_status', sa.String(50), nullable=True),
        sa.Column('call_duration', sa.Integer(), nullable=True),
        sa.Column('recording_link', sa.String(1000), nullable=True),
        sa.Column('call_score', sa.Float(), nullable=True),
        sa.Column('final_score', sa.Float(), nullable=True),
        sa.Column('screening_outcome', sa.String(50), nullable=True),
        sa.Column('screening_summary', sa.Text(), nullable=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_screening_outcomes_created_at', 'screening_outcomes', ['created_at'])
    op.create_index('ix_screening_outcomes_application_id', 'screening_outcomes', ['application_id'])

    op.create_table(
        'screening_batch_queue',
        *_record_columns(),
        sa.Column('application_id', sa.String(200), nullable=True),
        sa.Column('role_code', sa.String(100), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='queued'),
    )
    op.create_index('ix_screening_batch_queue_created_at', 'screening_batch_queue', ['created_at'])
    op.create_index('ix_screening_batch_queue_status', 'screening_batch_queue', ['status'])

    op.create_table(
        'user_roles',
        *_record_columns(),
        sa.Column('user_id', sa.String(100), nullable=False),
        sa.Column('role', sa.String(20), nullable=False),
        sa.UniqueConstraint('user_id', 'role', name='uq_user_role'),
    )
    op.create_index('ix_user_roles_created_at', 'user_roles', ['created_at'])
    op.create_index('ix_user_roles_user_id', 'user_roles', ['user_id'])


def downgrade() -> None:
    """Drop the recruiting tables."""
    for table in (
        'user_roles',
        'screening_batch_queue',
        'screening_outcomes',
        'cv_match_results',
        'candidate_applications',
        'jobs',
    ):
        op.drop_table(table)
