"""
Serviços de prontuários
"""
from .prontuario_service import ProntuarioService

__all__ = [
    'ProntuarioService',
]
