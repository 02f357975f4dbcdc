"""
Cadastrar Financeiro Controller.
"""

import logging
from flask import jsonify
from app.models import Financeiro
from app.serializers import FinanceiroSerializer
from app.validators import FinanceiroValidator
from .fields import campos_do_payload

logger = logging.getLogger(__name__)


def cadastrar_financeiro(payload, principal):
    """
    Cadastra um novo lançamento financeiro.

    Body:
    {
        "usuarioId": 1,
        "chequeId": null,
        "contaId": 3,
        "formaPagamentoId": 2,
        "planoContaId": 7,
        "numeroDocumento": "NF-1020",
        "descricao": "Pagamento de fornecedor",
        "tipo": 2,
        "valor": 350.00,
        "dataPagamento": "15/03/2024",
        "origem": 1
    }
    """
    dados = FinanceiroValidator().validate(payload)

    financeiro = Financeiro.create(
        **campos_do_payload(dados),
        created_by=principal.nome
    )

    logger.info(f"Financeiro {financeiro.id} cadastrado por {principal.nome}")

    return jsonify({
        'status': True,
        'message': 'Registro cadastrado com sucesso!',
        'data': FinanceiroSerializer.to_dict(financeiro)
    }), 201
