"""
Pytest fixtures compartilhadas
"""

import pytest

from app import create_app
from app.config import TestConfig
from app.database import db


@pytest.fixture
def app():
    """App Flask com banco SQLite em memória"""
    app = create_app(TestConfig)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_headers():
    """Headers de um usuário autenticado"""
    return {
        'Authorization': f'Bearer {TestConfig.BACKEND_API_TOKEN}',
        'X-User-Nome': 'Maria Silva',
    }


@pytest.fixture
def cheque_payload():
    return {
        'bancoId': 1,
        'numero': 12345,
        'agencia': '0001',
        'digitoAgencia': '9',
        'conta': '123456',
        'digitoConta': '0',
        'nome': 'Fornecedor LTDA',
        'data': '01/01/2024',
        'status': 'compensado',
        'valor': 100.50,
    }


@pytest.fixture
def financeiro_payload():
    return {
        'usuarioId': 1,
        'chequeId': None,
        'contaId': 3,
        'formaPagamentoId': 2,
        'planoContaId': 7,
        'numeroDocumento': 'NF-1020',
        'descricao': 'Pagamento de fornecedor',
        'tipo': 2,
        'valor': 350.00,
        'dataPagamento': '15/03/2024',
        'origem': 1,
    }
