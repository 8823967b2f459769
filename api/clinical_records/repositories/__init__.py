from .prontuario_repository import ProntuarioRepository

__all__ = ['ProntuarioRepository']
