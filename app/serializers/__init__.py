"""
Serializers - Transformam models em dicionários para respostas da API.

Centralizam quais campos são expostos e como valores do banco
(Decimal, date, datetime) viram JSON.
"""

from .cheque_serializer import ChequeSerializer
from .financeiro_serializer import FinanceiroSerializer

__all__ = [
    'ChequeSerializer',
    'FinanceiroSerializer',
]
