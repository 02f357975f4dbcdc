"""
Financeiros Controllers.

Controllers para lançamentos financeiros (pagamentos e recebimentos).
"""

from .create import cadastrar_financeiro
from .update import atualizar_financeiro
from .activate import ativar_financeiro
from .list import buscar_todos_financeiros, buscar_financeiros_ativos
from .get import buscar_financeiro_por_id

__all__ = [
    'cadastrar_financeiro',
    'atualizar_financeiro',
    'ativar_financeiro',
    'buscar_todos_financeiros',
    'buscar_financeiros_ativos',
    'buscar_financeiro_por_id',
]
