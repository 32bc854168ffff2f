"""create users, courses and enrollments tables

Revision ID: 3f1c2a7b9d40
Revises:
Create Date: 2026-10-19 00:00:00.000000
"""

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3f1c2a7b9d40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=120), primary_key=True, nullable=False),
        sa.Column('username', sa.String(length=120), nullable=False),
        sa.Column('first_name', sa.String(length=120), nullable=True),
        sa.Column('last_name', sa.String(length=120), nullable=True),
        sa.Column('email', sa.String(length=255), nullable=True),
        sa.Column('role', sa.String(length=7), nullable=False),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=True)

    op.create_table(
        'courses',
        sa.Column('id', sa.String(length=120), primary_key=True, nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('number', sa.String(length=50), nullable=True),
        sa.Column('department', sa.String(length=120), nullable=True),
        sa.Column('credits', sa.Integer(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('end_date', sa.Date(), nullable=True),
    )

    op.create_table(
        'enrollments',
        sa.Column('id', sa.String(length=255), primary_key=True, nullable=False),
        sa.Column('user_id', sa.String(length=120), nullable=False),
        sa.Column('course_id', sa.String(length=120), nullable=False),
    )
    op.create_index('ix_enrollments_user_id', 'enrollments', ['user_id'], unique=False)
    op.create_index('ix_enrollments_course_id', 'enrollments', ['course_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_enrollments_course_id', table_name='enrollments')
    op.drop_index('ix_enrollments_user_id', table_name='enrollments')
    op.drop_table('enrollments')
    op.drop_table('courses')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
