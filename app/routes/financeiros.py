from flask import Blueprint, request, g
from app.controllers.api.v1 import financeiros
from app.utils.auth import require_auth

financeiros_bp = Blueprint('financeiros', __name__, url_prefix='/api/v1/financeiros')


def _include_cheque():
    """?include=cheque adiciona o cheque vinculado na resposta"""
    return 'cheque' in request.args.get('include', '').split(',')


@financeiros_bp.route('', methods=['POST'])
@require_auth
def cadastrar():
    """Cadastra um lançamento financeiro"""
    return financeiros.cadastrar_financeiro(request.get_json(silent=True), g.principal)


@financeiros_bp.route('/<int:financeiro_id>', methods=['PUT', 'PATCH'])
@require_auth
def atualizar(financeiro_id):
    """Atualiza um lançamento financeiro"""
    return financeiros.atualizar_financeiro(financeiro_id, request.get_json(silent=True), g.principal)


@financeiros_bp.route('/<int:financeiro_id>/ativar', methods=['PATCH', 'POST'])
@require_auth
def ativar(financeiro_id):
    """Ativa ou inativa um lançamento financeiro"""
    return financeiros.ativar_financeiro(financeiro_id, g.principal)


@financeiros_bp.route('', methods=['GET'])
@require_auth
def buscar_todos():
    """Lista todos os lançamentos financeiros"""
    return financeiros.buscar_todos_financeiros(include_cheque=_include_cheque())


@financeiros_bp.route('/ativos', methods=['GET'])
@require_auth
def buscar_ativos():
    """Lista os lançamentos financeiros ativos"""
    return financeiros.buscar_financeiros_ativos(include_cheque=_include_cheque())


@financeiros_bp.route('/<int:financeiro_id>', methods=['GET'])
@require_auth
def buscar_por_id(financeiro_id):
    """Retorna um lançamento financeiro pelo id"""
    return financeiros.buscar_financeiro_por_id(financeiro_id, include_cheque=_include_cheque())
