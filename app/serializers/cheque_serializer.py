"""
Cheque Serializer.
"""

from .base import BaseSerializer


class ChequeSerializer(BaseSerializer):
    """Serializer para Cheque."""

    fields = {
        'banco_id': 'bancoId',
        'numero': 'numero',
        'agencia': 'agencia',
        'digito_agencia': 'digitoAgencia',
        'conta': 'conta',
        'digito_conta': 'digitoConta',
        'nome': 'nome',
        'data': 'data',
        'status': 'status',
        'valor': 'valor',
    }
