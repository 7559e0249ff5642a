"""initial schema: users, refresh tokens and sheep

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('username', sa.String(length=30), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('hashed_password', sa.String(length=255), nullable=False),
        sa.Column('farm_name', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_users'),
        sa.UniqueConstraint('username', name='ux_users_username'),
        sa.UniqueConstraint('email', name='ux_users_email'),
    )
    op.create_index('ix_users_username', 'users', ['username'], unique=False)
    op.create_index('ix_users_email', 'users', ['email'], unique=False)

    op.create_table(
        'refresh_tokens',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('token_hash', sa.String(length=64), nullable=False),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ['user_id'], ['users.id'], name='fk_refresh_tokens_user_id_users', ondelete='CASCADE'
        ),
        sa.PrimaryKeyConstraint('id', name='pk_refresh_tokens'),
    )
    op.create_index('ix_refresh_tokens_user_id', 'refresh_tokens', ['user_id'], unique=False)
    op.create_index('ix_refresh_tokens_token_hash', 'refresh_tokens', ['token_hash'], unique=False)

    op.create_table(
        'sheep',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('owner_id', sa.Uuid(), nullable=False),
        sa.Column('tag_number', sa.String(length=16), nullable=False),
        sa.Column('gender', sa.String(length=6), nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=False),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('breed', sa.String(length=100), nullable=False),
        sa.Column('mother_id', sa.Uuid(), nullable=True),
        sa.Column('father_id', sa.Uuid(), nullable=True),
        sa.Column('fertility', sa.String(length=4), nullable=True),
        sa.Column('is_pregnant', sa.Boolean(), nullable=False, server_default=sa.text('false')),
        sa.Column('pregnancy_start_date', sa.Date(), nullable=True),
        sa.Column('health_status', sa.String(length=32), nullable=False),
        sa.Column('notes', sa.Text(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(
            ['owner_id'], ['users.id'], name='fk_sheep_owner_id_users', ondelete='CASCADE'
        ),
        sa.ForeignKeyConstraint(['mother_id'], ['sheep.id'], name='fk_sheep_mother_id_sheep'),
        sa.ForeignKeyConstraint(['father_id'], ['sheep.id'], name='fk_sheep_father_id_sheep'),
        sa.PrimaryKeyConstraint('id', name='pk_sheep'),
        sa.UniqueConstraint('owner_id', 'tag_number', name='ux_sheep_owner_tag'),
    )
    op.create_index('ix_sheep_owner_id', 'sheep', ['owner_id'], unique=False)
    op.create_index('ix_sheep_mother_id', 'sheep', ['mother_id'], unique=False)
    op.create_index('ix_sheep_father_id', 'sheep', ['father_id'], unique=False)


def downgrade() -> None:
    op.drop_index('ix_sheep_father_id', table_name='sheep')
    op.drop_index('ix_sheep_mother_id', table_name='sheep')
    op.drop_index('ix_sheep_owner_id', table_name='sheep')
    op.drop_table('sheep')
    op.drop_index('ix_refresh_tokens_token_hash', table_name='refresh_tokens')
    op.drop_index('ix_refresh_tokens_user_id', table_name='refresh_tokens')
    op.drop_table('refresh_tokens')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_index('ix_users_username', table_name='users')
    op.drop_table('users')
