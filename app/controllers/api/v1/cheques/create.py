"""
Cadastrar Cheque Controller.
"""

import logging
from decimal import Decimal
from flask import jsonify
from app.models import Cheque
from app.serializers import ChequeSerializer
from app.validators import ChequeValidator

logger = logging.getLogger(__name__)


def cadastrar_cheque(payload, principal):
    """
    Cadastra um novo cheque.

    Body:
    {
        "bancoId": 1,
        "numero": 12345,
        "agencia": "0001",
        "digitoAgencia": "9",
        "conta": "123456",
        "digitoConta": "0",
        "nome": "Fornecedor LTDA",
        "data": "01/01/2024",
        "status": "compensado",
        "valor": 100.50
    }
    """
    dados = ChequeValidator().validate(payload)

    cheque = Cheque.create(
        banco_id=dados['bancoId'],
        numero=dados['numero'],
        agencia=dados['agencia'],
        digito_agencia=dados['digitoAgencia'],
        conta=dados['conta'],
        digito_conta=dados['digitoConta'],
        nome=dados['nome'],
        data=dados['data'],
        status=dados['status'],
        valor=Decimal(str(dados['valor'])),
        created_by=principal.nome
    )

    logger.info(f"Cheque {cheque.id} cadastrado por {principal.nome}")

    return jsonify({
        'status': True,
        'message': 'Registro cadastrado com sucesso!',
        'data': ChequeSerializer.to_dict(cheque)
    }), 201
