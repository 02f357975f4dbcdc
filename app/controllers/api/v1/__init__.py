"""
API v1 Controllers.

Cada subdiretório contém controllers para um domínio específico.
Controllers são responsáveis por:
- Validar entrada
- Chamar os models
- Retornar resposta no envelope {status, message, data}
"""

from . import cheques
from . import financeiros
