from flask import Blueprint, request, g
from app.controllers.api.v1 import cheques
from app.utils.auth import require_auth

cheques_bp = Blueprint('cheques', __name__, url_prefix='/api/v1/cheques')


@cheques_bp.route('', methods=['POST'])
@require_auth
def cadastrar():
    """Cadastra um cheque"""
    return cheques.cadastrar_cheque(request.get_json(silent=True), g.principal)


@cheques_bp.route('/<int:cheque_id>', methods=['PUT', 'PATCH'])
@require_auth
def atualizar(cheque_id):
    """Atualiza um cheque"""
    return cheques.atualizar_cheque(cheque_id, request.get_json(silent=True), g.principal)


@cheques_bp.route('/<int:cheque_id>/ativar', methods=['PATCH', 'POST'])
@require_auth
def ativar(cheque_id):
    """Ativa ou inativa um cheque"""
    return cheques.ativar_cheque(cheque_id, g.principal)


@cheques_bp.route('', methods=['GET'])
@require_auth
def buscar_todos():
    """Lista todos os cheques"""
    return cheques.buscar_todos_cheques()


@cheques_bp.route('/ativos', methods=['GET'])
@require_auth
def buscar_ativos():
    """Lista os cheques ativos"""
    return cheques.buscar_cheques_ativos()


@cheques_bp.route('/<int:cheque_id>', methods=['GET'])
@require_auth
def buscar_por_id(cheque_id):
    """Retorna um cheque pelo id"""
    return cheques.buscar_cheque_por_id(cheque_id)
