from dataclasses import dataclass
from functools import wraps
from typing import Optional
from flask import request, jsonify, g, current_app


@dataclass(frozen=True)
class Principal:
    """Usuário autenticado que executa a operação"""
    nome: Optional[str] = None


def get_principal_from_request():
    """Monta o Principal a partir do header X-User-Nome (opcional)"""
    nome = request.headers.get('X-User-Nome')
    if nome is not None:
        nome = nome.strip() or None
    return Principal(nome=nome)


def require_auth(f):
    """Decorator para exigir autenticação Bearer token
    Aceita token no header Authorization ou no query parameter Authorization
    Armazena o Principal em g.principal para ser repassado aos controllers
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        # Tentar obter do header primeiro (prioridade)
        auth_value = request.headers.get('Authorization')

        # Se não encontrou no header, tentar no query parameter
        if not auth_value:
            auth_value = request.args.get('Authorization')

        if not auth_value:
            return jsonify({
                'status': False,
                'message': 'Bearer token é obrigatório'
            }), 401

        try:
            # Formato esperado: "Bearer {token}"
            token_type, token = auth_value.split(' ', 1)
        except ValueError:
            return jsonify({
                'status': False,
                'message': 'Formato do header Authorization inválido. Use: Bearer {token}'
            }), 401

        if token_type.lower() != 'bearer':
            return jsonify({
                'status': False,
                'message': 'Tipo de autorização deve ser Bearer'
            }), 401

        if token != current_app.config['BACKEND_API_TOKEN']:
            return jsonify({
                'status': False,
                'message': 'Token inválido'
            }), 401

        g.token = token
        g.principal = get_principal_from_request()

        return f(*args, **kwargs)

    return decorated_function
