from .prontuario import ProntuarioSerializer

__all__ = ['ProntuarioSerializer']
