from django.urls import path

from .views import OdontogramaAPIView

app_name = 'odontogram'

urlpatterns = [
    path(
        '<str:paciente_id>/records/<str:prontuario_id>/odontogram/',
        OdontogramaAPIView.as_view(),
        name='odontogram'
    ),
    path(
        '<str:paciente_id>/prontuario/<str:prontuario_id>/odontograma/',
        OdontogramaAPIView.as_view(),
        name='odontograma'
    ),
]
