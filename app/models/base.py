"""
Helpers de persistência compartilhados pelos models.
"""
import logging
from datetime import datetime

from app.database import db
from app.exceptions import RecordNotFoundError

logger = logging.getLogger(__name__)


class AuditMixin:
    """
    Colunas de auditoria e operações básicas de persistência.

    created_by/updated_by guardam o nome do usuário autenticado e nunca
    são preenchidos a partir do payload.
    """

    ativo = db.Column(db.Boolean, default=True, nullable=False)
    created_by = db.Column(db.String(255), nullable=True)
    updated_by = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    @classmethod
    def create(cls, **fields):
        """Cria e persiste um novo registro"""
        instance = cls(**fields)
        instance.save()
        return instance

    @classmethod
    def find_or_fail(cls, record_id):
        """Busca pelo id ou levanta RecordNotFoundError"""
        instance = db.session.get(cls, record_id)
        if instance is None:
            raise RecordNotFoundError(cls.__name__, record_id)
        return instance

    def save(self):
        db.session.add(self)
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
        return self

    def toggle_ativo(self):
        """Inverte o flag ativo e retorna o novo estado"""
        self.ativo = not self.ativo
        return self.ativo
