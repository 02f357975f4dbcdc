"""
Validators - Schemas declarativos dos payloads aceitos pela API.
"""

from .cheque_validator import ChequeValidator
from .financeiro_validator import FinanceiroValidator

__all__ = [
    'ChequeValidator',
    'FinanceiroValidator',
]
