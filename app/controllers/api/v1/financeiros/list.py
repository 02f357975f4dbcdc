"""
Listar Financeiros Controller.
"""

from flask import jsonify
from app.exceptions import CustomErrorException
from app.models import Financeiro
from app.serializers import FinanceiroSerializer


def _responder_lista(financeiros, include_cheque):
    if not financeiros:
        raise CustomErrorException('Nenhum registro encontrado', 404)

    return jsonify({
        'status': True,
        'message': 'Registros retornados com sucesso',
        'data': FinanceiroSerializer.to_list(financeiros, include_cheque=include_cheque)
    }), 200


def buscar_todos_financeiros(include_cheque=False):
    """Lista todos os lançamentos financeiros"""
    financeiros = Financeiro.query.order_by(Financeiro.id).all()
    return _responder_lista(financeiros, include_cheque)


def buscar_financeiros_ativos(include_cheque=False):
    """Lista apenas os lançamentos ativos"""
    financeiros = Financeiro.query.filter_by(ativo=True).order_by(Financeiro.id).all()
    return _responder_lista(financeiros, include_cheque)
