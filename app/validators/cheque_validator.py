"""
Validator de cadastro/atualização de cheque.
"""

from app.validators.base import Validator, Number, String, Date


class ChequeValidator(Validator):
    schema = {
        'bancoId': Number(integer=True),
        'numero': Number(integer=True),
        'agencia': String(max_length=10),
        'digitoAgencia': String(max_length=2, nullable_optional=True),
        'conta': String(max_length=20),
        'digitoConta': String(max_length=2, nullable_optional=True),
        'nome': String(max_length=150),
        'data': Date(format='DD/MM/YYYY'),
        'status': String(max_length=30),
        'valor': Number(),
    }

    messages = {
        'required': 'Campo {field} é obrigatório',
        'maxLength': 'Campo {field} deve possuir tamanho máximo de {maxLength}',
    }
