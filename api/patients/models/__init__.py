# patients/models/__init__.py
from .base import BaseModel
from .constants import STATUS_CHOICES, STATUS_ATIVO, STATUS_INATIVO
from .paciente import Paciente

__all__ = [
    'BaseModel',
    'Paciente',
    'STATUS_CHOICES',
    'STATUS_ATIVO',
    'STATUS_INATIVO',
]
