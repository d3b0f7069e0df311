"""initial_schema

Revision ID: 001
Revises:
Create Date: 2025-09-14 20:12:41.318204

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = '001'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Cria admins, cultos e agenda se ainda nao existirem."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    if not inspector.has_table('admins'):
        op.create_table('admins',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('username', sa.String(length=100), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_admins_id'), 'admins', ['id'], unique=False)
        op.create_index(op.f('ix_admins_username'), 'admins', ['username'], unique=True)

    if not inspector.has_table('cultos'):
        op.create_table('cultos',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('titulo', sa.String(length=255), nullable=False),
        sa.Column('imagem_path', sa.String(length=500), nullable=False),
        sa.Column('public_id', sa.String(length=255), nullable=True),
        sa.Column('criado_em', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_cultos_id'), 'cultos', ['id'], unique=False)

    if not inspector.has_table('agenda'):
        op.create_table('agenda',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('titulo', sa.String(length=255), nullable=False),
        sa.Column('data_evento', sa.Date(), nullable=False),
        sa.Column('horario', sa.String(length=5), nullable=False),
        sa.Column('local', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id')
        )
        op.create_index(op.f('ix_agenda_id'), 'agenda', ['id'], unique=False)
        op.create_index(op.f('ix_agenda_data_evento'), 'agenda', ['data_evento'], unique=False)


def downgrade() -> None:
    """Remove as tabelas."""
    bind = op.get_bind()
    inspector = sa.inspect(bind)

    for table in ('agenda', 'cultos', 'admins'):
        if inspector.has_table(table):
            op.drop_table(table)
