"""
Atualizar Cheque Controller.
"""

import logging
from decimal import Decimal
from flask import jsonify
from app.models import Cheque
from app.serializers import ChequeSerializer
from app.validators import ChequeValidator

logger = logging.getLogger(__name__)


def atualizar_cheque(cheque_id, payload, principal):
    """
    Atualiza todos os campos de um cheque.

    Campos fora do validator (ativo, created_by) são preservados.
    """
    cheque = Cheque.find_or_fail(cheque_id)

    dados = ChequeValidator().validate(payload)

    cheque.banco_id = dados['bancoId']
    cheque.numero = dados['numero']
    cheque.agencia = dados['agencia']
    cheque.digito_agencia = dados['digitoAgencia']
    cheque.conta = dados['conta']
    cheque.digito_conta = dados['digitoConta']
    cheque.nome = dados['nome']
    cheque.data = dados['data']
    cheque.status = dados['status']
    cheque.valor = Decimal(str(dados['valor']))
    cheque.updated_by = principal.nome

    cheque.save()

    logger.info(f"Cheque {cheque.id} atualizado por {principal.nome}")

    return jsonify({
        'status': True,
        'message': 'Registro atualizado com sucesso',
        'data': ChequeSerializer.to_dict(cheque)
    }), 200
