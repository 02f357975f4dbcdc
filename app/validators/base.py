"""
Validator base - Valida payloads contra um schema declarativo.

Valida:
- Campos required / nullable e opcionais
- Tipos de dados (number, string, date)
- Tamanho máximo de strings
- Enum de códigos inteiros
- Datas no formato DD/MM/YYYY

O resultado é um dict apenas com as chaves do schema e os valores já
convertidos. Qualquer violação levanta ValidationError listando todos
os campos inválidos.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional
import math
import re

from app.exceptions import ValidationError

# Formatos aceitos pelo Date rule (token -> strftime)
DATE_FORMATS = {
    'DD/MM/YYYY': '%d/%m/%Y',
}

# Números decimais simples: sem expoente, separador _ ou nan/inf
NUMBER_PATTERN = re.compile(r'^-?\d+(\.\d+)?$')

DEFAULT_MESSAGES = {
    'object': 'O corpo da requisição deve ser um objeto JSON',
    'required': 'Campo {field} é obrigatório',
    'number': 'Campo {field} deve ser numérico',
    'integer': 'Campo {field} deve ser um número inteiro',
    'string': 'Campo {field} deve ser um texto',
    'maxLength': 'Campo {field} deve possuir tamanho máximo de {maxLength}',
    'enum': 'Campo {field} deve ser de uma das opções a seguir: ({choices})',
    'date.format': 'Campo {field} deve ser uma data no formato {format}',
}


class RuleViolation(Exception):
    """Falha de uma regra para um campo"""
    def __init__(self, rule: str, **options):
        self.rule = rule
        self.options = options
        super().__init__(rule)


class Rule:
    """Regra de um campo do schema"""

    def __init__(self, nullable_optional: bool = False):
        self.nullable_optional = nullable_optional

    def clean(self, value: Any) -> Any:
        """Converte o valor ou levanta RuleViolation"""
        return value

    def is_empty(self, value: Any) -> bool:
        return value is None or (isinstance(value, str) and value.strip() == '')


class Number(Rule):
    def __init__(self, integer: bool = False, **kwargs):
        super().__init__(**kwargs)
        self.integer = integer

    def clean(self, value):
        # bool é subclasse de int, mas não é um número válido aqui
        if isinstance(value, bool):
            raise RuleViolation('number')
        if isinstance(value, str):
            value = value.strip()
            if not NUMBER_PATTERN.match(value):
                raise RuleViolation('number')
            value = float(value) if '.' in value else int(value)
        if not isinstance(value, (int, float)) or not math.isfinite(value):
            raise RuleViolation('number')
        if self.integer:
            if isinstance(value, float) and not value.is_integer():
                raise RuleViolation('integer')
            return int(value)
        return value


class String(Rule):
    def __init__(self, max_length: Optional[int] = None, trim: bool = True, **kwargs):
        super().__init__(**kwargs)
        self.max_length = max_length
        self.trim = trim

    def clean(self, value):
        if not isinstance(value, str):
            raise RuleViolation('string')
        if self.trim:
            value = value.strip()
        if self.max_length is not None and len(value) > self.max_length:
            raise RuleViolation('maxLength', maxLength=self.max_length)
        return value


class Enum(Rule):
    def __init__(self, choices: List[int], **kwargs):
        super().__init__(**kwargs)
        self.choices = list(choices)

    def clean(self, value):
        candidate = value
        if isinstance(value, str) and value.strip().lstrip('-').isdigit():
            candidate = int(value.strip())
        if isinstance(candidate, bool) or candidate not in self.choices:
            raise RuleViolation('enum', choices=','.join(str(c) for c in self.choices))
        return candidate


class Date(Rule):
    def __init__(self, format: str = 'DD/MM/YYYY', **kwargs):
        super().__init__(**kwargs)
        self.format = format

    def clean(self, value):
        if not isinstance(value, str):
            raise RuleViolation('date.format', format=self.format)
        try:
            return datetime.strptime(value.strip(), DATE_FORMATS[self.format]).date()
        except ValueError:
            raise RuleViolation('date.format', format=self.format)


class Validator:
    """
    Classe base para validators.

    Subclasses declaram `schema` (chave do payload -> Rule) e podem
    sobrescrever `messages` por identificador de regra.
    """

    schema: Dict[str, Rule] = {}

    messages: Dict[str, str] = {}

    def validate(self, payload: Any) -> Dict[str, Any]:
        """
        Valida o payload inteiro.

        Args:
            payload: Dados brutos do request

        Returns:
            Dict com os campos do schema já convertidos

        Raises:
            ValidationError: Se qualquer campo for inválido
        """
        if not isinstance(payload, dict):
            raise ValidationError([self._error('*', 'object')])

        cleaned: Dict[str, Any] = {}
        errors: List[Dict[str, str]] = []

        for field, rule in self.schema.items():
            value = payload.get(field)

            if rule.is_empty(value):
                if rule.nullable_optional:
                    cleaned[field] = None
                else:
                    errors.append(self._error(field, 'required'))
                continue

            try:
                cleaned[field] = rule.clean(value)
            except RuleViolation as violation:
                errors.append(self._error(field, violation.rule, **violation.options))

        if errors:
            raise ValidationError(errors)

        return cleaned

    def _error(self, field: str, rule: str, **options) -> Dict[str, str]:
        template = self.messages.get(rule) or DEFAULT_MESSAGES[rule]
        return {
            'field': field,
            'rule': rule,
            'message': template.format(field=field, **options),
        }
