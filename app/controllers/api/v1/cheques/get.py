"""
Buscar Cheque Controller.
"""

from flask import jsonify
from app.models import Cheque
from app.serializers import ChequeSerializer


def buscar_cheque_por_id(cheque_id):
    """Retorna um cheque pelo id"""
    cheque = Cheque.find_or_fail(cheque_id)

    return jsonify({
        'status': True,
        'message': 'Registro retornado com sucesso',
        'data': ChequeSerializer.to_dict(cheque)
    }), 200
