"""
Validator de cadastro/atualização de lançamento financeiro.
"""

from app.models.financeiro import TipoFinanceiro
from app.validators.base import Validator, Number, String, Enum, Date

ORIGENS = [1, 2, 3, 4, 5, 6]


class FinanceiroValidator(Validator):
    schema = {
        'usuarioId': Number(integer=True),
        'chequeId': Number(integer=True, nullable_optional=True),
        'contaPagarId': Number(integer=True, nullable_optional=True),
        'unidadeId': Number(integer=True, nullable_optional=True),
        'contaId': Number(integer=True),
        'formaPagamentoId': Number(integer=True),
        'fornecedorId': Number(integer=True, nullable_optional=True),
        'planoContaId': Number(integer=True),
        'tipoCaixaId': Number(integer=True, nullable_optional=True),
        'numeroDocumento': String(max_length=20),
        'descricao': String(max_length=150),
        'tipo': Enum(TipoFinanceiro.CHOICES),
        'valor': Number(),
        'dataPagamento': Date(format='DD/MM/YYYY'),
        'origem': Enum(ORIGENS),
    }

    messages = {
        'required': 'Campo {field} é obrigatório',
        'maxLength': 'Campo {field} deve possuir tamanho máximo de {maxLength}',
        'enum': 'Campo {field} deve ser de uma das opções a seguir: ({choices})',
    }
