"""
Conversão dos dados validados para colunas do model Financeiro.
"""

from decimal import Decimal

# Chave do payload -> coluna
CAMPOS = {
    'usuarioId': 'usuario_id',
    'chequeId': 'cheque_id',
    'contaPagarId': 'conta_pagar_id',
    'unidadeId': 'unidade_id',
    'contaId': 'conta_id',
    'formaPagamentoId': 'forma_pagamento_id',
    'fornecedorId': 'fornecedor_id',
    'planoContaId': 'plano_conta_id',
    'tipoCaixaId': 'tipo_caixa_id',
    'numeroDocumento': 'numero_documento',
    'descricao': 'descricao',
    'tipo': 'tipo',
    'valor': 'valor',
    'dataPagamento': 'data_pagamento',
    'origem': 'origem',
}


def campos_do_payload(dados):
    """Retorna {coluna: valor} para todos os campos validados"""
    campos = {coluna: dados[chave] for chave, coluna in CAMPOS.items()}
    campos['valor'] = Decimal(str(campos['valor']))
    return campos
