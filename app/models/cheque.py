from app.database import db
from app.models.base import AuditMixin


class Cheque(AuditMixin, db.Model):
    __tablename__ = 'cheques'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    banco_id = db.Column(db.Integer, nullable=False)
    numero = db.Column(db.Integer, nullable=False)
    agencia = db.Column(db.String(10), nullable=False)
    digito_agencia = db.Column(db.String(2))
    conta = db.Column(db.String(20), nullable=False)
    digito_conta = db.Column(db.String(2))
    nome = db.Column(db.String(150), nullable=False)  # nominal a
    data = db.Column(db.Date, nullable=False)
    status = db.Column(db.String(30), nullable=False)  # ex: compensado, devolvido
    valor = db.Column(db.Numeric(12, 2), nullable=False)

    # Relationships
    financeiros = db.relationship('Financeiro', backref='cheque', lazy='dynamic')

    __table_args__ = (
        db.Index('idx_cheques_ativo', 'ativo'),
    )

    def __repr__(self):
        return f'<Cheque {self.id} numero={self.numero}>'
