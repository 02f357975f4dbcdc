"""
Ativar/Inativar Financeiro Controller.
"""

import logging
from flask import jsonify
from app.models import Financeiro
from app.serializers import FinanceiroSerializer

logger = logging.getLogger(__name__)


def ativar_financeiro(financeiro_id, principal):
    """Alterna o lançamento entre ativo e inativo"""
    financeiro = Financeiro.find_or_fail(financeiro_id)

    ativo = financeiro.toggle_ativo()
    financeiro.updated_by = principal.nome

    financeiro.save()

    estado = 'ativado' if ativo else 'inativado'
    logger.info(f"Financeiro {financeiro.id} {estado} por {principal.nome}")

    return jsonify({
        'status': True,
        'message': f'Registro {estado} com sucesso',
        'data': FinanceiroSerializer.to_dict(financeiro)
    }), 200
