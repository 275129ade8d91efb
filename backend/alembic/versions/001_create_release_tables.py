"""Create projects, releases, pages and members tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'projects',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('shorthand', sa.String(30), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_projects_id', 'projects', ['id'])
    op.create_index('ix_projects_shorthand', 'projects', ['shorthand'], unique=True)

    op.create_table(
        'releases',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('project_id', sa.Integer(), sa.ForeignKey('projects.id'), nullable=False),
        sa.Column('identifier', sa.String(10), nullable=False),
        sa.Column('scanlator', sa.String(255), nullable=False),
        sa.Column('version', sa.Integer(), nullable=False),
        sa.Column('status', sa.String(20), nullable=False),
        sa.Column('checksum', sa.String(8), nullable=False),
        sa.Column('released_on', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_releases_id', 'releases', ['id'])
    op.create_index('ix_releases_project_id', 'releases', ['project_id'])
    op.create_index('ix_releases_status', 'releases', ['status'])

    # Page mime type is derived from the name and not stored
    op.create_table(
        'pages',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('release_id', sa.Integer(), sa.ForeignKey('releases.id'), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('release_id', 'name', name='uq_pages_release_name'),
    )
    op.create_index('ix_pages_id', 'pages', ['id'])
    op.create_index('ix_pages_release_id', 'pages', ['release_id'])

    op.create_table(
        'members',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('biography', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_members_id', 'members', ['id'])


def downgrade() -> None:
    op.drop_table('members')
    op.drop_table('pages')
    op.drop_table('releases')
    op.drop_table('projects')
