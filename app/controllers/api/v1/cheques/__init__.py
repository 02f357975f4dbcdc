"""
Cheques Controllers.

Controllers para cadastro e consulta de cheques.
"""

from .create import cadastrar_cheque
from .update import atualizar_cheque
from .activate import ativar_cheque
from .list import buscar_todos_cheques, buscar_cheques_ativos
from .get import buscar_cheque_por_id

__all__ = [
    'cadastrar_cheque',
    'atualizar_cheque',
    'ativar_cheque',
    'buscar_todos_cheques',
    'buscar_cheques_ativos',
    'buscar_cheque_por_id',
]
