"""Create cheques table

Revision ID: c1d2e3f4a5b6
Revises: 
Create Date: 2026-10-19 09:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'c1d2e3f4a5b6'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('cheques',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('banco_id', sa.Integer(), nullable=False),
        sa.Column('numero', sa.Integer(), nullable=False),
        sa.Column('agencia', sa.String(length=10), nullable=False),
        sa.Column('digito_agencia', sa.String(length=2), nullable=True),
        sa.Column('conta', sa.String(length=20), nullable=False),
        sa.Column('digito_conta', sa.String(length=2), nullable=True),
        sa.Column('nome', sa.String(length=150), nullable=False),
        sa.Column('data', sa.Date(), nullable=False),
        sa.Column('status', sa.String(length=30), nullable=False),
        sa.Column('valor', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('ativo', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('updated_by', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index('idx_cheques_ativo', 'cheques', ['ativo'], unique=False)


def downgrade():
    op.drop_index('idx_cheques_ativo', table_name='cheques')
    op.drop_table('cheques')
