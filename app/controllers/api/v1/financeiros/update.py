"""
Atualizar Financeiro Controller.
"""

import logging
from flask import jsonify
from app.models import Financeiro
from app.serializers import FinanceiroSerializer
from app.validators import FinanceiroValidator
from .fields import campos_do_payload

logger = logging.getLogger(__name__)


def atualizar_financeiro(financeiro_id, payload, principal):
    """
    Atualiza todos os campos de um lançamento financeiro.

    Campos fora do validator (ativo, created_by) são preservados.
    """
    financeiro = Financeiro.find_or_fail(financeiro_id)

    dados = FinanceiroValidator().validate(payload)

    for coluna, valor in campos_do_payload(dados).items():
        setattr(financeiro, coluna, valor)
    financeiro.updated_by = principal.nome

    financeiro.save()

    logger.info(f"Financeiro {financeiro.id} atualizado por {principal.nome}")

    return jsonify({
        'status': True,
        'message': 'Registro atualizado com sucesso',
        'data': FinanceiroSerializer.to_dict(financeiro)
    }), 200
