from .prontuario_viewset import ProntuarioViewSet

__all__ = ['ProntuarioViewSet']
