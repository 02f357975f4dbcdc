from app.database import db
from app.models.base import AuditMixin


class TipoFinanceiro:
    ENTRADA = 1
    SAIDA = 2

    CHOICES = [ENTRADA, SAIDA]


class Financeiro(AuditMixin, db.Model):
    """
    Lançamento financeiro.

    Apenas cheque_id é FK declarada; as demais referências apontam para
    tabelas mantidas por outros módulos do back-office.
    """
    __tablename__ = 'financeiros'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    usuario_id = db.Column(db.Integer, nullable=False)
    cheque_id = db.Column(db.Integer, db.ForeignKey('cheques.id'), nullable=True)
    conta_pagar_id = db.Column(db.Integer, nullable=True)
    unidade_id = db.Column(db.Integer, nullable=True)
    conta_id = db.Column(db.Integer, nullable=False)
    forma_pagamento_id = db.Column(db.Integer, nullable=False)
    fornecedor_id = db.Column(db.Integer, nullable=True)
    plano_conta_id = db.Column(db.Integer, nullable=False)
    tipo_caixa_id = db.Column(db.Integer, nullable=True)
    numero_documento = db.Column(db.String(20), nullable=False)
    descricao = db.Column(db.String(150), nullable=False)
    tipo = db.Column(db.SmallInteger, nullable=False)  # 1 = entrada, 2 = saída
    valor = db.Column(db.Numeric(12, 2), nullable=False)
    data_pagamento = db.Column(db.Date, nullable=False)
    origem = db.Column(db.SmallInteger, nullable=False)  # 1..6

    __table_args__ = (
        db.Index('idx_financeiros_ativo', 'ativo'),
        db.Index('idx_financeiros_cheque_id', 'cheque_id'),
    )

    def __repr__(self):
        return f'<Financeiro {self.id} documento={self.numero_documento}>'
