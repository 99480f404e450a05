"""Create tracker tables

Revision ID: 3f9c2a7d4e10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f9c2a7d4e10'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    from sqlalchemy import inspect
    existing_tables = inspect(op.get_bind()).get_table_names()

    # db.create_all may already have created some of these
    if 'dsa_problem' not in existing_tables:
        op.create_table('dsa_problem',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('category', sa.String(length=100), nullable=False),
            sa.Column('difficulty', sa.String(length=20), nullable=False),
            sa.Column('platform', sa.String(length=50), nullable=False),
            sa.Column('problem_url', sa.String(length=500), nullable=True),
            sa.Column('status', sa.String(length=20), nullable=False),
            sa.Column('time_taken_minutes', sa.Integer(), nullable=False),
            sa.Column('solved_optimally', sa.Boolean(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('solution_approach', sa.Text(), nullable=True),
            sa.Column('time_complexity', sa.String(length=50), nullable=True),
            sa.Column('space_complexity', sa.String(length=50), nullable=True),
            sa.Column('attempt_count', sa.Integer(), nullable=False),
            sa.Column('tags_json', sa.Text(), nullable=True),
            sa.Column('is_favorite', sa.Boolean(), nullable=False),
            sa.Column('leetcode_number', sa.Integer(), nullable=True),
            sa.Column('next_review_date', sa.Date(), nullable=True),
            sa.Column('last_attempted_at', sa.DateTime(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('dsa_problem', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_dsa_problem_category'), ['category'], unique=False)
            batch_op.create_index(batch_op.f('ix_dsa_problem_status'), ['status'], unique=False)

    if 'system_design_topic' not in existing_tables:
        op.create_table('system_design_topic',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('title', sa.String(length=200), nullable=False),
            sa.Column('category', sa.String(length=100), nullable=False),
            sa.Column('difficulty', sa.String(length=20), nullable=False),
            sa.Column('status', sa.String(length=20), nullable=False),
            sa.Column('confidence_level', sa.Integer(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('key_concepts', sa.Text(), nullable=True),
            sa.Column('resources', sa.Text(), nullable=True),
            sa.Column('tags_json', sa.Text(), nullable=True),
            sa.Column('is_favorite', sa.Boolean(), nullable=False),
            sa.Column('last_reviewed_at', sa.DateTime(), nullable=True),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('system_design_topic', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_system_design_topic_category'), ['category'], unique=False)

    if 'mock_interview' not in existing_tables:
        op.create_table('mock_interview',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('type', sa.String(length=50), nullable=False),
            sa.Column('company', sa.String(length=200), nullable=False),
            sa.Column('interview_date', sa.DateTime(), nullable=False),
            sa.Column('duration_minutes', sa.Integer(), nullable=False),
            sa.Column('overall_score', sa.Integer(), nullable=False),
            sa.Column('communication_score', sa.Integer(), nullable=False),
            sa.Column('problem_solving_score', sa.Integer(), nullable=False),
            sa.Column('technical_score', sa.Integer(), nullable=False),
            sa.Column('feedback', sa.Text(), nullable=True),
            sa.Column('strengths', sa.Text(), nullable=True),
            sa.Column('areas_to_improve', sa.Text(), nullable=True),
            sa.Column('questions_asked', sa.Text(), nullable=True),
            sa.Column('passed', sa.Boolean(), nullable=False),
            sa.Column('created_at', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('mock_interview', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_mock_interview_type'), ['type'], unique=False)

    if 'weak_area' not in existing_tables:
        op.create_table('weak_area',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('area', sa.String(length=200), nullable=False),
            sa.Column('category', sa.String(length=100), nullable=False),
            sa.Column('severity', sa.String(length=10), nullable=False),
            sa.Column('description', sa.Text(), nullable=True),
            sa.Column('improvement_plan', sa.Text(), nullable=True),
            sa.Column('is_resolved', sa.Boolean(), nullable=False),
            sa.Column('identified_at', sa.DateTime(), nullable=False),
            sa.Column('resolved_at', sa.DateTime(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('weak_area', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_weak_area_category'), ['category'], unique=False)
            batch_op.create_index(batch_op.f('ix_weak_area_is_resolved'), ['is_resolved'], unique=False)

    if 'study_session' not in existing_tables:
        op.create_table('study_session',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('type', sa.String(length=50), nullable=False),
            sa.Column('topic', sa.String(length=200), nullable=False),
            sa.Column('duration_minutes', sa.Integer(), nullable=False),
            sa.Column('productivity_score', sa.Integer(), nullable=False),
            sa.Column('notes', sa.Text(), nullable=True),
            sa.Column('session_date', sa.DateTime(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
        )
        with op.batch_alter_table('study_session', schema=None) as batch_op:
            batch_op.create_index(batch_op.f('ix_study_session_type'), ['type'], unique=False)
            batch_op.create_index(batch_op.f('ix_study_session_session_date'), ['session_date'], unique=False)


def downgrade():
    op.drop_table('study_session')
    op.drop_table('weak_area')
    op.drop_table('mock_interview')
    op.drop_table('system_design_topic')
    op.drop_table('dsa_problem')
