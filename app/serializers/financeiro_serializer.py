"""
Financeiro Serializer.
"""

from typing import Any, Dict
from .base import BaseSerializer
from .cheque_serializer import ChequeSerializer


class FinanceiroSerializer(BaseSerializer):
    """Serializer para Financeiro."""

    fields = {
        'usuario_id': 'usuarioId',
        'cheque_id': 'chequeId',
        'conta_pagar_id': 'contaPagarId',
        'unidade_id': 'unidadeId',
        'conta_id': 'contaId',
        'forma_pagamento_id': 'formaPagamentoId',
        'fornecedor_id': 'fornecedorId',
        'plano_conta_id': 'planoContaId',
        'tipo_caixa_id': 'tipoCaixaId',
        'numero_documento': 'numeroDocumento',
        'descricao': 'descricao',
        'tipo': 'tipo',
        'valor': 'valor',
        'data_pagamento': 'dataPagamento',
        'origem': 'origem',
    }

    def __init__(self, instance: Any = None, many: bool = False, include_cheque: bool = False):
        super().__init__(instance, many)
        self.include_cheque = include_cheque

    def _serialize_one(self, instance: Any) -> Dict[str, Any]:
        result = super()._serialize_one(instance)

        if self.include_cheque:
            result['cheque'] = ChequeSerializer.to_dict(instance.cheque) if instance.cheque else None

        return result
