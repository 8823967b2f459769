from .odontogram_service import OdontogramService, OdontogramView

__all__ = ['OdontogramService', 'OdontogramView']
