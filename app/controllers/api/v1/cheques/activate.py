"""
Ativar/Inativar Cheque Controller.
"""

import logging
from flask import jsonify
from app.models import Cheque
from app.serializers import ChequeSerializer

logger = logging.getLogger(__name__)


def ativar_cheque(cheque_id, principal):
    """Alterna o cheque entre ativo e inativo"""
    cheque = Cheque.find_or_fail(cheque_id)

    ativo = cheque.toggle_ativo()
    cheque.updated_by = principal.nome

    cheque.save()

    logger.info(f"Cheque {cheque.id} {'ativado' if ativo else 'inativado'} por {principal.nome}")

    return jsonify({
        'status': True,
        'message': f"Registro {'ativado' if ativo else 'inativado'} com sucesso",
        'data': ChequeSerializer.to_dict(cheque)
    }), 200
