from .odontogram_repository import OdontogramaRepository

__all__ = ['OdontogramaRepository']
