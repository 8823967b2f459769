from .prontuario import Prontuario

__all__ = ['Prontuario']
