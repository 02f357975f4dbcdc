"""Create financeiros table

Revision ID: d2e3f4a5b6c7
Revises: c1d2e3f4a5b6
Create Date: 2026-10-19 09:10:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'd2e3f4a5b6c7'
down_revision = 'c1d2e3f4a5b6'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table('financeiros',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('usuario_id', sa.Integer(), nullable=False),
        sa.Column('cheque_id', sa.Integer(), nullable=True),
        sa.Column('conta_pagar_id', sa.Integer(), nullable=True),
        sa.Column('unidade_id', sa.Integer(), nullable=True),
        sa.Column('conta_id', sa.Integer(), nullable=False),
        sa.Column('forma_pagamento_id', sa.Integer(), nullable=False),
        sa.Column('fornecedor_id', sa.Integer(), nullable=True),
        sa.Column('plano_conta_id', sa.Integer(), nullable=False),
        sa.Column('tipo_caixa_id', sa.Integer(), nullable=True),
        sa.Column('numero_documento', sa.String(length=20), nullable=False),
        sa.Column('descricao', sa.String(length=150), nullable=False),
        sa.Column('tipo', sa.SmallInteger(), nullable=False),
        sa.Column('valor', sa.Numeric(precision=12, scale=2), nullable=False),
        sa.Column('data_pagamento', sa.Date(), nullable=False),
        sa.Column('origem', sa.SmallInteger(), nullable=False),
        sa.Column('ativo', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('created_by', sa.String(length=255), nullable=True),
        sa.Column('updated_by', sa.String(length=255), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['cheque_id'], ['cheques.id'], ),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_index('idx_financeiros_ativo', 'financeiros', ['ativo'], unique=False)
    op.create_index('idx_financeiros_cheque_id', 'financeiros', ['cheque_id'], unique=False)


def downgrade():
    op.drop_index('idx_financeiros_cheque_id', table_name='financeiros')
    op.drop_index('idx_financeiros_ativo', table_name='financeiros')
    op.drop_table('financeiros')
