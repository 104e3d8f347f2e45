"""Initial schema: accounts, profiles, candidates, interviews, exams, jobs

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        'auth_users',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('email_confirmed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('user_metadata', sa.JSON()),
        *_timestamps(),
    )
    op.create_index('ix_auth_users_email', 'auth_users', ['email'], unique=True)

    op.create_table(
        'profiles',
        sa.Column('id', sa.String(36), sa.ForeignKey('auth_users.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('first_name', sa.String(120)),
        sa.Column('last_name', sa.String(120)),
        sa.Column('bio', sa.Text()),
        sa.Column('avatar_url', sa.String(512)),
        sa.Column('resume_url', sa.String(512)),
        sa.Column('role', sa.String(20), nullable=False, server_default='job_seeker'),
        sa.Column('approved', sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index('ix_profiles_role', 'profiles', ['role'])

    op.create_table(
        'interviewers',
        sa.Column('id', sa.String(36), sa.ForeignKey('profiles.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('bio', sa.Text()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'candidates',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.String(200)),
        sa.Column('email', sa.String(254)),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('profiles.id', ondelete='SET NULL')),
        sa.Column('status', sa.String(30)),
        *_timestamps(),
    )
    op.create_index('ix_candidates_email', 'candidates', ['email'])
    op.create_index('ix_candidates_user_id', 'candidates', ['user_id'])

    op.create_table(
        'interviews',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('candidate_id', sa.String(36), sa.ForeignKey('candidates.id')),
        sa.Column('candidate_name', sa.String(200)),
        sa.Column('interviewer_id', sa.String(36), sa.ForeignKey('profiles.id', ondelete='SET NULL')),
        sa.Column('position', sa.String(200), nullable=False),
        sa.Column('status', sa.String(20), nullable=False, server_default='Scheduled'),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('profiles.id', ondelete='SET NULL')),
        sa.Column('settings', sa.JSON()),
        *_timestamps(),
    )
    op.create_index('ix_interviews_date', 'interviews', ['date'])
    op.create_index('ix_interviews_candidate_id', 'interviews', ['candidate_id'])
    op.create_index('ix_interviews_user_id', 'interviews', ['user_id'])

    op.create_table(
        'exam_bank',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('difficulty', sa.String(20)),
        sa.Column('category', sa.String(80)),
        sa.Column('description', sa.Text()),
    )

    op.create_table(
        'interview_exams',
        sa.Column('interview_id', sa.String(36), sa.ForeignKey('interviews.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('exam_id', sa.String(36), sa.ForeignKey('exam_bank.id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'jobs',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.String(200), nullable=False),
        sa.Column('company', sa.String(200)),
        sa.Column('location', sa.String(200)),
        sa.Column('description', sa.Text()),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
    )

    op.create_table(
        'job_applications',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(36), sa.ForeignKey('profiles.id', ondelete='CASCADE'), nullable=False),
        sa.Column('job_id', sa.String(36), sa.ForeignKey('jobs.id', ondelete='CASCADE'), nullable=False),
        sa.Column('status', sa.String(30), server_default='pending'),
        sa.Column('cover_letter', sa.Text()),
        sa.Column('resume_url', sa.String(512)),
        sa.Column('created_at', sa.DateTime(), server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'job_id', name='uq_job_applications_user_job'),
    )
    op.create_index('ix_job_applications_user_id', 'job_applications', ['user_id'])


def downgrade() -> None:
    op.drop_table('job_applications')
    op.drop_table('jobs')
    op.drop_table('interview_exams')
    op.drop_table('exam_bank')
    op.drop_table('interviews')
    op.drop_table('candidates')
    op.drop_table('interviewers')
    op.drop_table('profiles')
    op.drop_table('auth_users')
