from .cheque import Cheque
from .financeiro import Financeiro, TipoFinanceiro

__all__ = [
    'Cheque',
    'Financeiro',
    'TipoFinanceiro',
]
