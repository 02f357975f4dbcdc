"""
Base Serializer - Classe base para todos os serializers.
"""

from typing import Any, Dict, List
from datetime import date, datetime
from decimal import Decimal


class BaseSerializer:
    """
    Classe base para serializers.

    Transforma models em dicionários JSON usando as mesmas chaves
    (camelCase) aceitas pelos validators.
    """

    # Atributo do model -> chave na resposta
    fields: Dict[str, str] = {}

    # Colunas de auditoria comuns a todos os models
    audit_fields: Dict[str, str] = {
        'ativo': 'ativo',
        'created_by': 'createdBy',
        'updated_by': 'updatedBy',
        'created_at': 'createdAt',
        'updated_at': 'updatedAt',
    }

    def __init__(self, instance: Any = None, many: bool = False):
        """
        Inicializa serializer.

        Args:
            instance: Objeto ou lista de objetos a serializar
            many: Se True, instance é uma lista
        """
        self.instance = instance
        self.many = many

    def serialize(self) -> Dict[str, Any] | List[Dict[str, Any]]:
        """
        Serializa a instância.

        Returns:
            Dict ou lista de dicts
        """
        if self.instance is None:
            return {} if not self.many else []

        if self.many:
            return [self._serialize_one(item) for item in self.instance]

        return self._serialize_one(self.instance)

    def _serialize_one(self, instance: Any) -> Dict[str, Any]:
        result = {'id': instance.id}

        for attribute, key in {**self.fields, **self.audit_fields}.items():
            result[key] = self._serialize_value(getattr(instance, attribute, None))

        return result

    def _serialize_value(self, value: Any) -> Any:
        if value is None:
            return None

        if isinstance(value, datetime):
            return value.isoformat()

        if isinstance(value, date):
            return value.isoformat()

        if isinstance(value, Decimal):
            return float(value)

        return value

    @classmethod
    def to_dict(cls, instance: Any, **kwargs) -> Dict[str, Any]:
        """Atalho para serializar um objeto."""
        serializer = cls(instance, **kwargs)
        return serializer.serialize()

    @classmethod
    def to_list(cls, instances: List[Any], **kwargs) -> List[Dict[str, Any]]:
        """Atalho para serializar uma lista."""
        serializer = cls(instances, many=True, **kwargs)
        return serializer.serialize()
