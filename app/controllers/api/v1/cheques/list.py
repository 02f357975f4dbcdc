"""
Listar Cheques Controller.
"""

from flask import jsonify
from app.exceptions import CustomErrorException
from app.models import Cheque
from app.serializers import ChequeSerializer


def _responder_lista(cheques):
    if not cheques:
        raise CustomErrorException('Nenhum registro encontrado', 404)

    return jsonify({
        'status': True,
        'message': 'Registros retornados com sucesso',
        'data': ChequeSerializer.to_list(cheques)
    }), 200


def buscar_todos_cheques():
    """Lista todos os cheques"""
    cheques = Cheque.query.order_by(Cheque.id).all()
    return _responder_lista(cheques)


def buscar_cheques_ativos():
    """Lista apenas os cheques ativos"""
    cheques = Cheque.query.filter_by(ativo=True).order_by(Cheque.id).all()
    return _responder_lista(cheques)
