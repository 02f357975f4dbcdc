"""
Buscar Financeiro Controller.
"""

from flask import jsonify
from app.models import Financeiro
from app.serializers import FinanceiroSerializer


def buscar_financeiro_por_id(financeiro_id, include_cheque=False):
    """Retorna um lançamento financeiro pelo id"""
    financeiro = Financeiro.find_or_fail(financeiro_id)

    return jsonify({
        'status': True,
        'message': 'Registro retornado com sucesso',
        'data': FinanceiroSerializer.to_dict(financeiro, include_cheque=include_cheque)
    }), 200
